"""
Main entrypoint for the MusicLister API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory music store and includes the versioned
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn musiclister_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.music_store import MusicStore


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as HTTP 400 instead of 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(store: Optional[MusicStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each application owns one ``MusicStore``; it starts empty and lives
    until the process exits.

    Parameters
    ----------
    store : Optional[MusicStore]
        Store to serve.  A new empty store is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    logger = setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else MusicStore()

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Mount the versioned routes under /api/v1 and, unversioned, at the
    # root (``/register``, ``/login`` ...).  Payload keys are camelCase
    # only (``secretCode``, ``musicURL``); PascalCase keys are ignored.
    app.include_router(v1_router, prefix="/api/v1")
    app.include_router(v1_router, include_in_schema=False)

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
