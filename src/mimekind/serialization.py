"""Extension-only serialization for MIME records.

A record is written as its extension string and read back by classifying
that extension again. The encoded form carries no table version, so a
record decoded after a table change reflects the new mapping.
"""

import json
from typing import Any

from .exceptions import MimeDecodeError
from .mime import Mime


def encode(record: Mime) -> str:
    """Encode a record as its extension."""
    return record.to_json()


def decode(value: Any) -> Mime:
    """Decode an extension string into a record."""
    return Mime.from_json(value)


class MimeJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes Mime records as their extension string."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Mime):
            return o.to_json()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serialize to JSON text, writing any Mime records as extensions.

    Args:
        obj: A record, or any JSON-serializable structure containing records.
        **kwargs: Passed through to json.dumps.

    Returns:
        JSON text.
    """
    kwargs.setdefault("cls", MimeJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads(text: str | bytes) -> Mime:
    """
    Deserialize a single record from JSON text.

    Raises:
        MimeDecodeError: If the text is not valid JSON or not a JSON string.
    """
    try:
        value = json.loads(text)
    except ValueError as e:
        # JSONDecodeError, or UnicodeDecodeError for undecodable bytes
        raise MimeDecodeError(f"Invalid JSON: {e}") from e
    return decode(value)
