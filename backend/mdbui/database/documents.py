"""
Document identifier parsing and wire formatting.
"""
import json
import re
from typing import Any

from bson import Decimal128, ObjectId
from bson import json_util
from bson.errors import BSONError, InvalidId
from fastapi.encoders import jsonable_encoder

from mdbui.core.errors import InvalidInputError

# ObjectId("...") / ObjectID('...') as copied from a shell or a rendered page
_WRAPPED_ID = re.compile(r"""^ObjectI[dD]\(\s*["']?([^"')]*)["']?\s*\)$""")

BSON_ENCODERS = {
    ObjectId: str,
    Decimal128: str,
}


def to_object_id(value: str) -> ObjectId:
    """
    Parse a 24-character hex identifier into an ObjectId.

    Raises:
        InvalidInputError: If the value is not a valid ObjectId
    """
    candidate = value
    match = _WRAPPED_ID.fullmatch(value)
    if match:
        candidate = match.group(1)
    try:
        return ObjectId(candidate)
    except (InvalidId, TypeError):
        raise InvalidInputError(f"Invalid document ID: {value!r}")


def format_document(document: dict[str, Any]) -> dict[str, Any]:
    """Replace top-level ObjectId values with their hex strings; other values pass through."""
    return {
        key: str(value) if isinstance(value, ObjectId) else value
        for key, value in document.items()
    }


def encode_document(document: Any) -> Any:
    """Encode a document for JSON transport, including nested BSON values."""
    return jsonable_encoder(document, custom_encoder=BSON_ENCODERS)


def from_extended_json(payload: Any) -> Any:
    """
    Decode MongoDB extended JSON markers in a parsed request body.

    ``{"$oid": "..."}`` becomes an ObjectId and ``{"$date": ...}`` a datetime;
    query operators such as ``$gt`` are left as they are.
    """
    if payload is None:
        return {}
    try:
        return json_util.loads(json.dumps(payload))
    except (BSONError, TypeError, ValueError) as exc:
        raise InvalidInputError(f"Invalid extended JSON: {exc}")
