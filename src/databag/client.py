"""Python SDK for data bag operations.

This module exposes save, load, list, and destroy backed by the
configuration server or by local data bag roots, depending on mode.
"""

from __future__ import annotations

from typing import Any

from core.config import BagkitConfig
from core.constants import DATA_ENDPOINT
from core.errors import BagkitModeError
from core.logging_config import get_logger
from core.types import Filesystem, RemoteClient, RemoteClientFactory
from databag.data_bag import DataBag, normalize_bag_name, validate_lookup_name
from databag.filesystem import LocalFilesystem
from databag.remote_client import ConfigServerClient
from databag.resolvers import select_resolver

_LOGGER = get_logger(__name__)


class DataBagClient:
    """Primary SDK entry point for data bag workflows."""

    def __init__(
        self,
        config: BagkitConfig | None = None,
        *,
        client_factory: RemoteClientFactory | None = None,
        filesystem: Filesystem | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            client_factory: Optional remote client builder taking a base URL.
            filesystem: Optional filesystem collaborator for solo mode.
        """
        self._config = config or BagkitConfig.from_env()
        self._client_factory = client_factory or self._default_client
        self._filesystem = filesystem or LocalFilesystem()

    @property
    def config(self) -> BagkitConfig:
        return self._config

    def save(self, data_bag: DataBag) -> None:
        """Create the data bag on the server.

        An existing bag of the same name counts as success. Nothing is
        sent in dry-run mode.

        Args:
            data_bag: Named data bag.

        Raises:
            DataBagNameError: If the bag has no name.
            BagkitRemoteError: If the server rejects the create.
        """
        name = data_bag.require_name()
        if self._config.dry_run:
            _LOGGER.warning("data_bag_save_skipped", data_bag=name, reason="dry_run")
            return
        with self._remote_client() as remote_client:
            result = remote_client.post(DATA_ENDPOINT, data_bag)
        if result.is_conflict:
            _LOGGER.info("data_bag_exists", data_bag=name)
            return
        result.unwrap()
        _LOGGER.info("data_bag_saved", data_bag=name)

    def load(self, name: object) -> Any:
        """Load a data bag's items.

        Args:
            name: Bag name as a string or symbolic identifier.

        Returns:
            Mapping from item id to item document (or server reference).

        Raises:
            DataBagNameError: If the name is not a valid bag name.
        """
        bag_name = validate_lookup_name(normalize_bag_name(name))
        items = select_resolver(self._config, self._client_factory, self._filesystem).load(bag_name)
        _LOGGER.info("data_bag_loaded", data_bag=bag_name, mode=self._config.mode.value)
        return items

    def list(self, inflate: bool = False) -> Any:
        """List available data bags.

        Args:
            inflate: Load every listed bag and map names to their items.

        Returns:
            Identity mapping of bag names, or names to item mappings.
        """
        names = select_resolver(self._config, self._client_factory, self._filesystem).list()
        if not inflate:
            return names
        return {name: self.load(name) for name in names}

    def destroy(self, name: object) -> Any:
        """Delete a data bag from the server.

        Args:
            name: Bag name as a string or symbolic identifier.

        Returns:
            Server payload, or ``None`` in dry-run mode.

        Raises:
            DataBagNameError: If the name is not a valid bag name.
            BagkitModeError: In solo mode.
            BagkitRemoteError: If the server rejects the delete.
        """
        bag_name = validate_lookup_name(normalize_bag_name(name))
        if self._config.is_solo:
            raise BagkitModeError(
                f"Cannot delete data bag '{bag_name}' in solo mode: "
                "local data bag roots are read-only. Remove the directory instead."
            )
        if self._config.dry_run:
            _LOGGER.warning("data_bag_destroy_skipped", data_bag=bag_name, reason="dry_run")
            return None
        with self._remote_client() as remote_client:
            payload = remote_client.delete(f"{DATA_ENDPOINT}/{bag_name}").unwrap()
        _LOGGER.info("data_bag_destroyed", data_bag=bag_name)
        return payload

    def _remote_client(self) -> RemoteClient:
        return self._client_factory(self._config.server_url)

    def _default_client(self, base_url: str) -> RemoteClient:
        return ConfigServerClient(base_url, timeout_seconds=self._config.http_timeout_seconds)
