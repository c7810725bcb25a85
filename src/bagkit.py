"""Public SDK surface for Bagkit.

This module provides a stable import path for data bag users.
It re-exports the primary client, model, config and errors.
"""

from __future__ import annotations

from core.config import BagkitConfig
from core.errors import (
    BagkitError,
    BagkitRemoteError,
    DataBagNameError,
    InvalidDataBagPathError,
)
from core.types import Mode, RemoteResult, RemoteStatus
from databag.client import DataBagClient
from databag.data_bag import DataBag, validate_name
from databag.json_codec import deserialize, serialize

__all__ = [
    "BagkitConfig",
    "BagkitError",
    "BagkitRemoteError",
    "DataBag",
    "DataBagClient",
    "DataBagNameError",
    "InvalidDataBagPathError",
    "Mode",
    "RemoteResult",
    "RemoteStatus",
    "deserialize",
    "serialize",
    "validate_name",
]
