"""Runtime configuration model for Bagkit.

This module owns all environment variable and config file parsing.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
import os
from pathlib import Path
from typing import Mapping, cast

from core.constants import (
    DEFAULT_DATA_BAG_PATH,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_MODE,
    DEFAULT_SERVER_URL,
    ENV_DATA_BAG_PATH,
    ENV_DRY_RUN,
    ENV_HTTP_TIMEOUT,
    ENV_MODE,
    ENV_SERVER_URL,
    FALSE_VALUES,
    TRUE_VALUES,
)
from core.errors import BagkitConfigError, BagkitDependencyError
from core.types import Mode

_FILE_KEYS = ("mode", "data_bag_path", "server_url", "dry_run", "http_timeout_seconds")


@dataclass(frozen=True)
class BagkitConfig:
    """Validated runtime configuration.

    Attributes:
        mode: Resolve bags from the server or from local roots.
        data_bag_paths: Ordered local data bag roots used in solo mode.
        server_url: Configuration server base URL.
        dry_run: Skip mutating server requests when set.
        http_timeout_seconds: Timeout passed to HTTP requests.
    """

    mode: Mode
    data_bag_paths: tuple[Path, ...]
    server_url: str
    dry_run: bool
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS

    @property
    def is_solo(self) -> bool:
        return self.mode is Mode.SOLO

    @classmethod
    def from_env(cls) -> "BagkitConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            BagkitConfigError: If environment values are invalid.
        """
        raw_paths = os.getenv(ENV_DATA_BAG_PATH)
        if raw_paths:
            data_bag_paths = parse_data_bag_paths(raw_paths.split(os.pathsep))
        else:
            data_bag_paths = (DEFAULT_DATA_BAG_PATH,)
        return cls(
            mode=parse_mode(os.getenv(ENV_MODE, DEFAULT_MODE)),
            data_bag_paths=data_bag_paths,
            server_url=os.getenv(ENV_SERVER_URL, DEFAULT_SERVER_URL),
            dry_run=parse_flag(os.getenv(ENV_DRY_RUN, "false"), ENV_DRY_RUN),
            http_timeout_seconds=_parse_timeout(
                os.getenv(ENV_HTTP_TIMEOUT, str(DEFAULT_HTTP_TIMEOUT_SECONDS))
            ),
        )

    @classmethod
    def from_file(cls, config_path: str) -> "BagkitConfig":
        """Build config from a YAML file layered over the environment.

        Args:
            config_path: Path to a YAML mapping with config keys.

        Returns:
            A validated config object.

        Raises:
            BagkitConfigError: If the file or its values are invalid.
            BagkitDependencyError: If PyYAML is unavailable.
        """
        payload = _load_yaml_mapping(config_path)
        unknown_keys = sorted(set(payload) - set(_FILE_KEYS))
        if unknown_keys:
            raise BagkitConfigError(
                f"Unknown keys in config file {config_path}: {unknown_keys}. "
                f"Supported keys: {list(_FILE_KEYS)}."
            )
        base = cls.from_env()
        values: dict[str, object] = {field.name: getattr(base, field.name) for field in fields(cls)}
        if "mode" in payload:
            values["mode"] = parse_mode(str(payload["mode"]))
        if "data_bag_path" in payload:
            values["data_bag_paths"] = _parse_file_paths(payload["data_bag_path"], config_path)
        if "server_url" in payload:
            values["server_url"] = _parse_server_url(payload["server_url"], config_path)
        if "dry_run" in payload:
            values["dry_run"] = parse_flag(payload["dry_run"], "dry_run")
        if "http_timeout_seconds" in payload:
            values["http_timeout_seconds"] = _parse_timeout(payload["http_timeout_seconds"])
        return cls(**values)  # type: ignore[arg-type]


def parse_mode(raw_value: str) -> Mode:
    """Parse a mode name.

    Args:
        raw_value: ``solo`` or ``server``.

    Returns:
        Parsed mode.

    Raises:
        BagkitConfigError: If the mode is unknown.
    """
    try:
        return Mode(raw_value.strip().lower())
    except ValueError as error:
        raise BagkitConfigError(
            f"Invalid {ENV_MODE} value: expected one of "
            f"{[mode.value for mode in Mode]}, got '{raw_value}'."
        ) from error


def parse_flag(raw_value: object, setting_name: str) -> bool:
    """Parse a boolean flag from env text or a YAML scalar.

    Args:
        raw_value: Raw flag value.
        setting_name: Setting name used in error messages.

    Returns:
        Parsed boolean.

    Raises:
        BagkitConfigError: If the value is not a recognizable boolean.
    """
    if isinstance(raw_value, bool):
        return raw_value
    normalized = str(raw_value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise BagkitConfigError(
        f"Invalid {setting_name} value: expected a boolean, got '{raw_value}'. "
        f"Use one of {TRUE_VALUES + FALSE_VALUES}."
    )


def parse_data_bag_paths(raw_paths: list[str] | tuple[str, ...]) -> tuple[Path, ...]:
    """Normalize configured data bag roots, preserving their order.

    Args:
        raw_paths: Path strings in caller order.

    Returns:
        Expanded root paths.

    Raises:
        BagkitConfigError: If no non-empty path is given.
    """
    paths = tuple(Path(raw_path).expanduser() for raw_path in raw_paths if raw_path)
    if not paths:
        raise BagkitConfigError(
            "No data bag path configured. "
            f"Set {ENV_DATA_BAG_PATH} or data_bag_path to at least one directory."
        )
    return paths


def _parse_file_paths(raw_value: object, config_path: str) -> tuple[Path, ...]:
    if isinstance(raw_value, str):
        return parse_data_bag_paths([raw_value])
    if isinstance(raw_value, list) and all(isinstance(item, str) for item in raw_value):
        return parse_data_bag_paths(cast(list[str], raw_value))
    raise BagkitConfigError(
        f"Invalid data_bag_path in {config_path}: expected a string or list of strings."
    )


def _parse_server_url(raw_value: object, config_path: str) -> str:
    if isinstance(raw_value, str) and raw_value.strip():
        return raw_value
    raise BagkitConfigError(
        f"Invalid server_url in {config_path}: expected a non-empty string, got {raw_value!r}."
    )


def _parse_timeout(raw_value: object) -> float:
    """Parse the HTTP timeout value.

    Args:
        raw_value: Raw timeout value.

    Returns:
        Positive timeout in seconds.

    Raises:
        BagkitConfigError: If value is not a positive number.
    """
    try:
        timeout = float(cast(str, raw_value))
    except (TypeError, ValueError) as error:
        raise BagkitConfigError(
            f"Invalid {ENV_HTTP_TIMEOUT} value: expected number, got '{raw_value}'."
        ) from error
    if timeout <= 0:
        raise BagkitConfigError(
            f"Invalid {ENV_HTTP_TIMEOUT} value: expected positive seconds, got '{raw_value}'."
        )
    return timeout


def _load_yaml_mapping(config_path: str) -> Mapping[str, object]:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:
        raise BagkitDependencyError(
            "YAML config support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    path = Path(config_path).expanduser()
    if not path.is_file():
        raise BagkitConfigError(f"Config file not found at {path}.")
    try:
        payload = cast(object, yaml.safe_load(path.read_text(encoding="utf-8")))
    except yaml.YAMLError as error:
        raise BagkitConfigError(f"Failed to parse config file {path}: {error}") from error
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise BagkitConfigError(
            f"Failed to parse config file {path}: expected a mapping at top level."
        )
    return cast(Mapping[str, object], payload)
