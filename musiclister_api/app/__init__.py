"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (users, playlists, songs) exposes a router
defined in ``api/v1/endpoints``, while the shared in‑memory state lives
in ``services.music_store``.
"""

from .main import app  # noqa: F401
