"""
Object utilities for JSON serialization.

Provides to_json/from_json helpers used by the persistence store so that
every backend writes exactly the same text for the same records.
"""

import json
from dataclasses import asdict, is_dataclass
from datetime import date
from typing import Any


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to JSON string.

    Handles dataclasses by converting them to dictionaries first.
    Dates are written as ISO-8601 strings.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.

    Returns:
        JSON string representation.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(obj, default=_default_serializer, indent=indent)


def from_json(text: str | bytes | None) -> Any:
    """
    Parse JSON text, returning None for empty input.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON.
    """
    if text is None:
        return None
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    if not text.strip():
        return None
    return json.loads(text)


def _default_serializer(obj: Any) -> Any:
    """
    Default serializer for JSON encoding.

    Handles common types that aren't JSON serializable by default.

    Args:
        obj: Object to serialize.

    Returns:
        JSON-serializable representation.
    """
    if isinstance(obj, date):
        return obj.isoformat()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return str(obj)
