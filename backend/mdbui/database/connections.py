"""
MongoDB client construction for a connection profile.
"""
import asyncio
import logging

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from mdbui.core.errors import UpstreamError

logger = logging.getLogger(__name__)


async def connect(uri: str, timeout: float = 10.0) -> AsyncIOMotorClient:
    """
    Open a client for ``uri`` and verify it with a ping.

    The client is closed again if the ping fails.

    Raises:
        UpstreamError: If the server cannot be reached within ``timeout`` seconds
    """
    timeout_ms = int(timeout * 1000)
    try:
        client = AsyncIOMotorClient(
            uri,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
    except (PyMongoError, ValueError) as exc:
        raise UpstreamError(f"failed to connect to MongoDB: {exc}")

    try:
        await asyncio.wait_for(client.admin.command("ping"), timeout)
    except (PyMongoError, asyncio.TimeoutError) as exc:
        client.close()
        raise UpstreamError(f"failed to ping MongoDB: {str(exc) or 'timed out'}")

    logger.info("Connected to MongoDB at %s", _redact(uri))
    return client


def _redact(uri: str) -> str:
    """Hide credentials in a URI for logging."""
    scheme, sep, rest = uri.partition("://")
    if "@" not in rest:
        return uri
    return f"{scheme}{sep}***@{rest.rsplit('@', 1)[1]}"
