"""
User endpoints for API v1.

Provide registration, login and profile viewing.  Login and profile
viewing are the same lookup: the client presents its ``secretCode``
and receives its user record back.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from musiclister_api.app.api.deps import get_current_user, get_store
from musiclister_api.app.core.errors import ConflictError, ValidationError
from musiclister_api.app.schemas.user import User, UserCreate
from musiclister_api.app.services.music_store import MusicStore


router = APIRouter()


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
def register_user(user: UserCreate, store: MusicStore = Depends(get_store)) -> User:
    """Register a new user.

    Name and email are required and the email must not be taken.  The
    response contains the generated ``id`` and ``secretCode``; the
    latter is the only credential the user will ever get.
    """
    try:
        return store.create_user(user.name, user.email)
    except (ValidationError, ConflictError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)


@router.get("/login", response_model=User)
def login_user(current_user: User = Depends(get_current_user)) -> User:
    """Log in with ``?secretCode=`` and return the matching user."""
    return current_user


@router.get("/ViewProfile", response_model=User)
def view_profile(current_user: User = Depends(get_current_user)) -> User:
    """Return the profile of the user owning ``?secretCode=``."""
    return current_user
