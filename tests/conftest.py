"""
Notekeeper — Test Configuration (conftest.py)
===============================================

Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── notes_path: Location of a not-yet-existing notes document in tmp_path
    ├── store: NoteStore over notes_path
    ├── service: NoteService over store
    ├── app_settings: Settings pointing at notes_path
    └── test_client: HTTPX AsyncClient talking to create_app(app_settings)
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set before any notekeeper import so the module-level settings pick it up
os.environ["LOG_LEVEL"] = "WARNING"

from notekeeper.config import Settings  # noqa: E402
from notekeeper.services.note_service import NoteService  # noqa: E402
from notekeeper.store import NoteStore  # noqa: E402


@pytest.fixture
def notes_path(tmp_path):
    """Path of the notes document; the file itself does not exist yet."""
    return tmp_path / "data" / "notes.json"


@pytest.fixture
def store(notes_path):
    return NoteStore(notes_path)


@pytest.fixture
def service(store):
    return NoteService(store)


@pytest.fixture
def app_settings(notes_path):
    return Settings(notes_file=str(notes_path), log_level="WARNING")


@pytest_asyncio.fixture
async def test_client(app_settings):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from notekeeper.main import create_app

    transport = ASGITransport(app=create_app(app_settings))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
