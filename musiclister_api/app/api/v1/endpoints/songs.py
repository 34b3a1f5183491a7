"""
Song endpoints for API v1.

Songs are created by appending them to a playlist and can then be
looked up by id alone.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from musiclister_api.app.api.deps import get_store
from musiclister_api.app.core.errors import NotFoundError
from musiclister_api.app.schemas.playlist import Playlist
from musiclister_api.app.schemas.song import Song, SongCreate
from musiclister_api.app.services.music_store import MusicStore


router = APIRouter()


@router.post("/addSongToPlaylist", response_model=Playlist, status_code=status.HTTP_201_CREATED)
def add_song_to_playlist(
    song_in: SongCreate,
    playlist_id: str = Query("", alias="playlistId"),
    store: MusicStore = Depends(get_store),
) -> Playlist:
    """Append a song to ``?playlistId=`` and return the updated playlist."""
    try:
        return store.add_song_to_playlist(
            playlist_id,
            name=song_in.name,
            composers=song_in.composers,
            music_url=song_in.music_url,
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)


@router.get("/getSongDetail", response_model=Song)
def get_song_detail(
    song_id: str = Query("", alias="songId"),
    store: MusicStore = Depends(get_store),
) -> Song:
    """Return a single song by ``?songId=``."""
    try:
        return store.get_song(song_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
