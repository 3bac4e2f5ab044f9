"""
Error taxonomy shared by the connection store, the database service and the routers.
"""


class MdbUIError(Exception):
    """Base class for errors surfaced to API callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(MdbUIError):
    """A referenced connection, database, collection or document does not exist."""


class InvalidInputError(MdbUIError):
    """The caller supplied a malformed identifier or request payload."""


class UpstreamError(MdbUIError):
    """The MongoDB driver call failed or timed out."""


class PersistenceError(MdbUIError):
    """The connection store could not read or write its backing file."""
