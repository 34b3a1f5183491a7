"""
Playlist endpoints for API v1.

Playlists are created for the user identified by ``?secretCode=`` and
addressed afterwards by ``?playlistId=``.  Listing and deleting a
playlist do not check ownership: anyone holding a playlist id may use
it.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from musiclister_api.app.api.deps import get_store
from musiclister_api.app.core.errors import NotFoundError
from musiclister_api.app.schemas.playlist import Playlist, PlaylistCreate
from musiclister_api.app.schemas.song import Song
from musiclister_api.app.services.music_store import MusicStore


router = APIRouter()


@router.get("/getAllSongsOfPlaylist", response_model=List[Song])
def get_all_songs_of_playlist(
    playlist_id: str = Query("", alias="playlistId"),
    store: MusicStore = Depends(get_store),
) -> List[Song]:
    """Return the songs of a playlist in the order they were added."""
    try:
        return store.get_playlist_songs(playlist_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)


@router.post("/createPlaylist", response_model=Playlist, status_code=status.HTTP_201_CREATED)
def create_playlist(
    playlist_in: PlaylistCreate,
    secret_code: str = Query("", alias="secretCode"),
    store: MusicStore = Depends(get_store),
) -> Playlist:
    """Create an empty playlist for the user owning ``?secretCode=``.

    Only the ``name`` of the body is used; a client supplied ``id`` or
    ``songs`` list is ignored.
    """
    try:
        return store.create_playlist(secret_code, playlist_in.name)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)


@router.delete("/deletePlaylist", status_code=status.HTTP_204_NO_CONTENT)
def delete_playlist(
    playlist_id: str = Query("", alias="playlistId"),
    store: MusicStore = Depends(get_store),
) -> None:
    """Delete a playlist and every song it contains."""
    try:
        store.delete_playlist(playlist_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return None
