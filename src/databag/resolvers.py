"""Data bag resolution strategies.

The remote strategy reads bags from the configuration server and the
local strategy scans the configured data bag roots. ``select_resolver``
picks one per call from the configured mode.
"""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Any, Protocol

from core.config import BagkitConfig
from core.constants import DATA_BAG_ITEM_EXTENSION, DATA_ENDPOINT
from core.errors import InvalidDataBagPathError
from core.logging_config import get_logger
from core.types import Filesystem, Mode, RemoteClientFactory
from databag.json_codec import parse

_LOGGER = get_logger(__name__)


class DataBagResolver(Protocol):
    """Read access to data bags in one mode."""

    def load(self, name: str) -> Any: ...

    def list(self) -> Any: ...


class RemoteDataBagResolver:
    """Resolve data bags through the configuration server."""

    def __init__(self, config: BagkitConfig, client_factory: RemoteClientFactory) -> None:
        self._config = config
        self._client_factory = client_factory

    def load(self, name: str) -> Any:
        """Fetch one bag's item index from the server.

        Args:
            name: Data bag name.

        Returns:
            Server payload, passed through uninterpreted.

        Raises:
            BagkitRemoteError: If the server answers with a failure status.
        """
        with self._client_factory(self._config.server_url) as client:
            return client.get(f"{DATA_ENDPOINT}/{name}").unwrap()

    def list(self) -> Any:
        with self._client_factory(self._config.server_url) as client:
            return client.get(DATA_ENDPOINT).unwrap()


class LocalDataBagResolver:
    """Resolve data bags from local data bag roots.

    Roots are scanned in configured order, so items from a later root
    replace same-id items from an earlier one.
    """

    def __init__(self, config: BagkitConfig, filesystem: Filesystem) -> None:
        self._roots = tuple(str(path) for path in config.data_bag_paths)
        self._filesystem = filesystem

    def load(self, name: str) -> dict[str, Any]:
        """Read every item file of a bag across all roots.

        Args:
            name: Data bag name.

        Returns:
            Mapping from item id (file stem) to decoded item.

        Raises:
            InvalidDataBagPathError: If a root is not a directory.
            BagkitCodecError: If an item file is not valid JSON.
        """
        items: dict[str, Any] = {}
        for root in self._roots:
            self._require_directory(root)
            pattern = os.path.join(glob.escape(root), glob.escape(name), f"*{DATA_BAG_ITEM_EXTENSION}")
            for item_path in self._filesystem.glob(pattern):
                item_id = Path(item_path).stem
                items[item_id] = parse(self._filesystem.read_file(item_path), source=item_path)
        _LOGGER.debug("data_bag_items_resolved", data_bag=name, item_count=len(items))
        return items

    def list(self) -> dict[str, str]:
        """List bag names found directly under each root.

        Returns:
            Identity mapping of bag names.

        Raises:
            InvalidDataBagPathError: If a root is not a directory.
        """
        names: dict[str, str] = {}
        for root in self._roots:
            self._require_directory(root)
            for entry_path in self._filesystem.glob(os.path.join(glob.escape(root), "*")):
                entry_name = os.path.basename(entry_path)
                names[entry_name] = entry_name
        return names

    def _require_directory(self, root: str) -> None:
        if not self._filesystem.is_directory(root):
            raise InvalidDataBagPathError(root)


def select_resolver(
    config: BagkitConfig,
    client_factory: RemoteClientFactory,
    filesystem: Filesystem,
) -> DataBagResolver:
    """Pick the resolution strategy for the configured mode.

    Args:
        config: Runtime configuration.
        client_factory: Builds remote clients from a base URL.
        filesystem: Local filesystem collaborator.

    Returns:
        Remote resolver in server mode, local resolver in solo mode.
    """
    if config.mode is Mode.SOLO:
        return LocalDataBagResolver(config, filesystem)
    return RemoteDataBagResolver(config, client_factory)
