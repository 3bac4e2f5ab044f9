"""
Backend-specific test fixtures and configuration.

These fixtures build the FastAPI app around a temporary connection store
and a mongomock-motor client in place of a real server.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def settings(connections_file):
    """Settings pointing at the temporary connections file."""
    from mdbui.config import Settings

    return Settings(
        connections_file=str(connections_file),
        connect_timeout_seconds=1.0,
        operation_timeout_seconds=1.0,
    )


@pytest.fixture
def mock_connect(mock_async_mongo_client):
    """Patch the startup connection so it returns the mock client."""
    with patch("mdbui.main.connect", new=AsyncMock(return_value=mock_async_mongo_client)) as mocked:
        yield mocked


@pytest.fixture
def app(settings, store, mock_connect):
    """Create the FastAPI app with the database connection mocked."""
    from mdbui.main import create_app

    return create_app(settings, store)


@pytest.fixture
def client(app):
    """
    TestClient for the app.

    Entering the client runs the lifespan, which opens the mock connection.
    """
    from fastapi.testclient import TestClient

    with TestClient(app) as c:
        yield c


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in str(data["detail"]).lower()
    return _assert


@pytest.fixture
def assert_page_response():
    """Helper to assert a document page response."""
    def _assert(response, total: int, page: int, limit: int):
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"documents", "total", "page", "limit"}
        assert data["total"] == total
        assert data["page"] == page
        assert data["limit"] == limit
        return data
    return _assert
