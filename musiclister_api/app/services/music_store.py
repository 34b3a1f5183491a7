"""
In‑memory store for users, playlists and songs.

``MusicStore`` keeps three dictionaries and guards all of them with a
single :class:`~musiclister_api.app.core.locks.ReadWriteLock`:

* ``users``: ``User`` keyed by ``secret_code``
* ``playlists``: ``Playlist`` keyed by ``id``
* ``songs``: ``Song`` keyed by ``id``, an index over the songs embedded
  in stored playlists so that song details can be fetched without
  knowing the playlist

Lookups take the lock in shared mode, mutations take it exclusively.
Each operation is atomic: it either applies completely or raises a
:class:`~musiclister_api.app.core.errors.StoreError` subclass without
changing anything.  Entities handed out are deep copies, so callers
never see later mutations through a returned object.

Nothing is persisted; the state lives as long as the store object.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..core.errors import ConflictError, NotFoundError, ValidationError
from ..core.locks import ReadWriteLock
from ..core.security import generate_secret_code, generate_unique_id
from ..schemas.playlist import Playlist
from ..schemas.song import Song
from ..schemas.user import User


logger = logging.getLogger(__name__)


class MusicStore:
    """Concurrency‑safe repository of users, playlists and songs.

    Parameters
    ----------
    id_factory : Optional[Callable[[], str]]
        Generator for entity identifiers.  Defaults to
        :func:`~musiclister_api.app.core.security.generate_unique_id`.
    secret_factory : Optional[Callable[[], str]]
        Generator for user credentials.  Defaults to
        :func:`~musiclister_api.app.core.security.generate_secret_code`.
    """

    def __init__(
        self,
        id_factory: Optional[Callable[[], str]] = None,
        secret_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self._new_id = id_factory or generate_unique_id
        self._new_secret = secret_factory or generate_secret_code
        self._lock = ReadWriteLock()
        self._users: Dict[str, User] = {}
        self._playlists: Dict[str, Playlist] = {}
        self._songs: Dict[str, Song] = {}

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def create_user(self, name: Optional[str], email: Optional[str]) -> User:
        """Register a user and return it with its generated fields.

        Raises ``ValidationError`` if ``name`` or ``email`` is empty and
        ``ConflictError`` if another user already has ``email``.
        """
        if not name or not email:
            raise ValidationError("Name and Email are required")

        with self._lock.write_locked():
            if any(user.email == email for user in self._users.values()):
                raise ConflictError("User with this email already exists")
            user = User(
                id=self._new_id(),
                secret_code=self._new_secret(),
                name=name,
                email=email,
            )
            assert user.secret_code not in self._users, "secret code collision"
            assert all(u.id != user.id for u in self._users.values()), "user id collision"
            self._users[user.secret_code] = user
            created = user.model_copy(deep=True)

        logger.info("Registered user %s", created.id)
        return created

    def authenticate_user(self, secret_code: str) -> User:
        """Return the user owning ``secret_code``.

        Serves both login and profile viewing; there is no session or
        expiry.  Raises ``NotFoundError`` for an unknown code.
        """
        with self._lock.read_locked():
            user = self._users.get(secret_code)
            if user is None:
                raise NotFoundError("User not found")
            return user.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Playlists
    # ------------------------------------------------------------------

    def create_playlist(self, secret_code: str, name: str) -> Playlist:
        """Create an empty playlist owned by the user with ``secret_code``.

        The owner lookup and the insertion happen under the same write
        lock.  Raises ``NotFoundError`` if the code matches no user.
        """
        with self._lock.write_locked():
            owner = self._users.get(secret_code)
            if owner is None:
                raise NotFoundError("User not found")
            playlist = Playlist(id=self._new_id(), name=name, user_id=owner.id, songs=[])
            assert playlist.id not in self._playlists, "playlist id collision"
            self._playlists[playlist.id] = playlist
            created = playlist.model_copy(deep=True)

        logger.info("Created playlist %s for user %s", created.id, created.user_id)
        return created

    def get_playlist_songs(self, playlist_id: str) -> List[Song]:
        """Return the songs of a playlist in the order they were added."""
        with self._lock.read_locked():
            playlist = self._playlists.get(playlist_id)
            if playlist is None:
                raise NotFoundError("Playlist not found")
            return [song.model_copy(deep=True) for song in playlist.songs]

    def delete_playlist(self, playlist_id: str) -> None:
        """Remove a playlist together with the songs it contains.

        Raises ``NotFoundError`` if no playlist has ``playlist_id``.
        """
        with self._lock.write_locked():
            playlist = self._playlists.pop(playlist_id, None)
            if playlist is None:
                raise NotFoundError("Playlist not found")
            for song in playlist.songs:
                self._songs.pop(song.id, None)

        logger.info("Deleted playlist %s (%d songs)", playlist_id, len(playlist.songs))

    # ------------------------------------------------------------------
    # Songs
    # ------------------------------------------------------------------

    def add_song_to_playlist(
        self,
        playlist_id: str,
        name: str,
        composers: str,
        music_url: str,
    ) -> Playlist:
        """Append a new song to a playlist and return the updated playlist.

        Raises ``NotFoundError`` if no playlist has ``playlist_id``.
        """
        with self._lock.write_locked():
            playlist = self._playlists.get(playlist_id)
            if playlist is None:
                raise NotFoundError("Playlist not found")
            song = Song(id=self._new_id(), name=name, composers=composers, music_url=music_url)
            assert song.id not in self._songs, "song id collision"
            playlist.songs.append(song)
            self._songs[song.id] = song
            updated = playlist.model_copy(deep=True)

        logger.info("Added song %s to playlist %s", song.id, playlist_id)
        return updated

    def get_song(self, song_id: str) -> Song:
        """Return a song by id regardless of the playlist holding it."""
        with self._lock.read_locked():
            song = self._songs.get(song_id)
            if song is None:
                raise NotFoundError("Song not found")
            return song.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------

    def user_count(self) -> int:
        with self._lock.read_locked():
            return len(self._users)

    def playlist_count(self) -> int:
        with self._lock.read_locked():
            return len(self._playlists)

    def song_count(self) -> int:
        with self._lock.read_locked():
            return len(self._songs)
