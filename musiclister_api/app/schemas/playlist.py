"""
Pydantic models for playlists.

``PlaylistCreate`` only carries a name.  Any ``id``, ``userID`` or
``songs`` sent by the client are ignored: the store assigns the id,
links the playlist to the authenticated user and starts with an empty
song list.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .song import Song


class PlaylistCreate(BaseModel):
    """Payload for creating a playlist."""

    name: str = Field("", examples=["Favourites"])


class Playlist(BaseModel):
    """A stored playlist with its songs in insertion order."""

    id: str
    name: str = ""
    user_id: str = Field(alias="userID")
    songs: List[Song] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
