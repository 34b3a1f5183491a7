"""
Pydantic models for songs.

Songs never exist on their own: they are created by appending them to a
playlist, and the store keeps an additional index by song id for
detail lookups.
"""

from pydantic import BaseModel, ConfigDict, Field


class SongCreate(BaseModel):
    """Payload for adding a song to a playlist."""

    name: str = Field("", examples=["Clair de Lune"])
    composers: str = Field("", examples=["Claude Debussy"])
    music_url: str = Field("", alias="musicURL", examples=["https://example.com/clair-de-lune.mp3"])

    model_config = ConfigDict(populate_by_name=True)


class Song(BaseModel):
    """A stored song."""

    id: str
    name: str = ""
    composers: str = ""
    music_url: str = Field("", alias="musicURL")

    model_config = ConfigDict(populate_by_name=True)
