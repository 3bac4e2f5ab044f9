"""
Global test fixtures for the MongoDB admin console.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Connection profile data and a store backed by a temporary file
- Sample documents
"""

import json
import sys
from pathlib import Path

import pytest
from bson import ObjectId

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    The client's coroutines are not bound to a particular event loop, so it
    can be shared by async tests and TestClient-driven route tests.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


# =============================================================================
# Connection Profile Fixtures
# =============================================================================

@pytest.fixture
def connections_file(tmp_path) -> Path:
    """Path for a connections file that does not exist yet."""
    return tmp_path / "connections.json"


@pytest.fixture
def profile_data() -> dict:
    """A profile as sent by the browser (camelCase keys)."""
    return {
        "name": "Staging",
        "host": "db.staging.internal",
        "port": 27018,
        "database": "orders",
        "username": "admin",
        "password": "s3cret",
        "authDB": "admin",
        "description": "Staging replica",
    }


@pytest.fixture
def store(connections_file):
    """A loaded ConnectionStore holding only the default profile."""
    from mdbui.services.connection_store import ConnectionStore

    store = ConnectionStore(connections_file)
    store.load()
    return store


@pytest.fixture
def write_connections(connections_file):
    """Helper to write a raw connections file before the store loads it."""
    def _write(profiles) -> Path:
        connections_file.write_text(json.dumps(profiles), encoding="utf-8")
        return connections_file
    return _write


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def sample_documents() -> list[dict]:
    """Three documents with increasing ObjectIds."""
    return [
        {"_id": ObjectId("65a000000000000000000001"), "sku": "A-1", "qty": 5},
        {"_id": ObjectId("65a000000000000000000002"), "sku": "B-2", "qty": 0},
        {"_id": ObjectId("65a000000000000000000003"), "sku": "C-3", "qty": 12,
         "owner": ObjectId("65a0000000000000000000ff")},
    ]
