"""Bagkit exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class BagkitError(Exception):
    """Base exception for all Bagkit failures."""


class BagkitConfigError(BagkitError):
    """Raised for invalid runtime configuration."""


class BagkitDependencyError(BagkitError):
    """Raised when an optional runtime dependency is missing."""


class DataBagNameError(BagkitError):
    """Raised when a data bag name argument is rejected."""


class DataBagNameTypeError(DataBagNameError, TypeError):
    """Raised when a data bag name is not a string."""


class DataBagNameFormatError(DataBagNameError, ValueError):
    """Raised when a data bag name contains disallowed characters."""


class BagkitStoreError(BagkitError):
    """Raised for local data bag resolution failures."""


class InvalidDataBagPathError(BagkitStoreError):
    """Raised when a configured data bag root is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Data bag path '{path}' is invalid")
        self.path = path


class BagkitCodecError(BagkitError):
    """Raised for JSON encode and decode failures."""


class BagkitRemoteError(BagkitError):
    """Raised when the configuration server answers with a failure status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BagkitModeError(BagkitError):
    """Raised for operations the configured mode cannot perform."""
