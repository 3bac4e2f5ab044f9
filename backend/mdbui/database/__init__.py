"""
Database module - MongoDB client construction and document helpers.
"""
from mdbui.database.connections import connect
from mdbui.database.documents import (
    to_object_id,
    format_document,
    encode_document,
    from_extended_json,
)

__all__ = [
    "connect",
    "to_object_id",
    "format_document",
    "encode_document",
    "from_extended_json",
]
