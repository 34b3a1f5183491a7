"""
Shared FastAPI dependencies.

The music store is created once per application in ``create_app`` and
kept on ``app.state``.  Endpoints obtain it through ``get_store`` so
that tests can build isolated applications, each with its own empty
store.
"""

from fastapi import Depends, HTTPException, Query, Request, status

from ..core.errors import NotFoundError
from ..schemas.user import User
from ..services.music_store import MusicStore


def get_store(request: Request) -> MusicStore:
    """Return the store owned by the application serving ``request``."""
    return request.app.state.store


def get_current_user(
    secret_code: str = Query("", alias="secretCode"),
    store: MusicStore = Depends(get_store),
) -> User:
    """Resolve the ``secretCode`` query parameter to a stored user.

    Raises HTTP 404 if no user owns the code.  A missing parameter is
    treated as an empty code and therefore also yields 404.
    """
    try:
        return store.authenticate_user(secret_code)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
