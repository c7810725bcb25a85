"""JSON codec for data bag payloads.

Objects exposing ``to_dict`` are encoded through it, and decoded
mappings carrying a known ``json_class`` marker are rebuilt as objects.
"""

from __future__ import annotations

import json
from typing import Any

from core.constants import DATA_BAG_JSON_CLASS
from core.errors import BagkitCodecError, DataBagNameError
from databag.data_bag import DataBag

_JSON_CLASSES = {DATA_BAG_JSON_CLASS: DataBag}


def serialize(value: object) -> str:
    """Encode a value as JSON text.

    Args:
        value: JSON-compatible value or object with ``to_dict``.

    Returns:
        JSON text.

    Raises:
        BagkitCodecError: If value cannot be encoded.
    """
    try:
        return json.dumps(value, default=_encode_object, sort_keys=True)
    except (TypeError, ValueError) as error:
        raise BagkitCodecError(f"Failed to encode {type(value).__name__} as JSON: {error}") from error


def deserialize(text: str, source: str = "<string>") -> Any:
    """Decode JSON text, rebuilding marked objects.

    Args:
        text: JSON text.
        source: Origin used in error messages.

    Returns:
        Decoded value.

    Raises:
        BagkitCodecError: If text is not valid JSON.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as error:
        raise BagkitCodecError(f"Failed to parse JSON from {source}: {error.msg}.") from error
    return _inflate(payload, source)


def parse(text: str, source: str = "<string>") -> Any:
    """Decode JSON text without rebuilding marked objects."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise BagkitCodecError(f"Failed to parse JSON from {source}: {error.msg}.") from error


def _encode_object(value: object) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _inflate(payload: Any, source: str) -> Any:
    if isinstance(payload, dict):
        json_class = _JSON_CLASSES.get(str(payload.get("json_class")))
        if json_class is not None:
            try:
                return json_class.from_dict(payload)
            except DataBagNameError as error:
                raise BagkitCodecError(
                    f"Failed to rebuild {payload['json_class']} from {source}: {error}"
                ) from error
    return payload
