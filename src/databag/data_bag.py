"""Data bag model and name validation.

A data bag is a named collection of JSON items. The model only
carries the validated name; item contents are resolved separately.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Mapping

from core.constants import DATA_BAG_JSON_CLASS, DATA_BAG_NAME_PATTERN, DATA_BAG_TYPE
from core.errors import DataBagNameError, DataBagNameFormatError, DataBagNameTypeError

_NAME_RE = re.compile(DATA_BAG_NAME_PATTERN)
_RELATIVE_SEGMENTS = (".", "..")


def validate_name(value: object) -> str:
    """Validate a data bag name.

    Args:
        value: Candidate name.

    Returns:
        The unchanged name.

    Raises:
        DataBagNameTypeError: If value is not a string.
        DataBagNameFormatError: If value is empty or has disallowed characters.
    """
    if not isinstance(value, str):
        raise DataBagNameTypeError(
            f"Data bag name must be a string, got {type(value).__name__}."
        )
    if not _NAME_RE.fullmatch(value):
        raise DataBagNameFormatError(
            f"Invalid data bag name '{value}': use letters, digits, '.', '-' or '_'."
        )
    return value


def validate_lookup_name(value: object) -> str:
    """Validate a bag name used as a server path or directory segment.

    Args:
        value: Candidate name.

    Returns:
        The unchanged name.

    Raises:
        DataBagNameTypeError: If value is not a string.
        DataBagNameFormatError: If value is invalid or a relative path segment.
    """
    name = validate_name(value)
    if name in _RELATIVE_SEGMENTS:
        raise DataBagNameFormatError(
            f"Invalid data bag name '{name}': '.' and '..' cannot name a bag."
        )
    return name


def normalize_bag_name(name: object) -> str:
    """Normalize a textual or symbolic bag identifier to a string.

    Args:
        name: String, string-valued enum member, or object with a textual form.

    Returns:
        Bag name string.
    """
    if isinstance(name, Enum):
        return str(name.value)
    return str(name)


class DataBag:
    """Named data bag handle."""

    def __init__(self, name: str | None = None) -> None:
        self._name: str | None = None
        if name is not None:
            self.name = name

    @property
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = validate_name(value)

    def require_name(self) -> str:
        """Return the name, failing for an unnamed bag.

        Raises:
            DataBagNameError: If no name has been set.
        """
        if self._name is None:
            raise DataBagNameError("Data bag has no name. Set a name before saving.")
        return self._name

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "json_class": DATA_BAG_JSON_CLASS,
            "bag_type": DATA_BAG_TYPE,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "DataBag":
        """Build a data bag from its mapping form.

        Args:
            payload: Mapping with an optional ``name`` key.

        Returns:
            Data bag with a validated name, unnamed when ``name`` is absent or null.

        Raises:
            DataBagNameError: If ``name`` is present but invalid.
        """
        return cls(payload.get("name"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataBag):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return f"data_bag[{self._name}]"

    def __repr__(self) -> str:
        return f"DataBag(name={self._name!r})"
