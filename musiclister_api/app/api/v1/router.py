"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  The endpoints keep the
flat, camelCase paths of the first MusicLister releases
(``/register``, ``/createPlaylist``, ``/getSongDetail`` ...), so none
of the sub‑routers is given a prefix.
"""

from fastapi import APIRouter

from .endpoints import playlists, songs, users

router = APIRouter()

router.include_router(users.router, tags=["users"])
router.include_router(playlists.router, tags=["playlists"])
router.include_router(songs.router, tags=["songs"])
