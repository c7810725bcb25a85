"""Core constants used across Bagkit modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_BAG_PATH = Path("/var/chef/data_bags")
DEFAULT_SERVER_URL = "https://localhost:443"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
DEFAULT_MODE = "server"

ENV_MODE = "BAGKIT_MODE"
ENV_DATA_BAG_PATH = "BAGKIT_DATA_BAG_PATH"
ENV_SERVER_URL = "BAGKIT_SERVER_URL"
ENV_DRY_RUN = "BAGKIT_DRY_RUN"
ENV_HTTP_TIMEOUT = "BAGKIT_HTTP_TIMEOUT"

DATA_ENDPOINT = "data"
DATA_BAG_ITEM_EXTENSION = ".json"
DATA_BAG_NAME_PATTERN = r"[.\-A-Za-z0-9_]+"
DATA_BAG_JSON_CLASS = "DataBag"
DATA_BAG_TYPE = "data_bag"

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")
