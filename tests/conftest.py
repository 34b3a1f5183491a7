from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from musiclister_api.app.main import create_app
from musiclister_api.app.services.music_store import MusicStore


@pytest.fixture
def store() -> MusicStore:
    return MusicStore()


@pytest.fixture
def client(store: MusicStore) -> TestClient:
    with TestClient(create_app(store)) as test_client:
        yield test_client
