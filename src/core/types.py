"""Shared typed models.

This module defines the mode enum, remote result model, and the
collaborator protocols consumed by the data bag resolvers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import TracebackType
from typing import Any, Callable, Protocol

from core.errors import BagkitRemoteError


class Mode(str, Enum):
    """Data bag resolution mode."""

    SOLO = "solo"
    SERVER = "server"


class RemoteStatus(str, Enum):
    """Outcome classes for configuration server requests."""

    SUCCESS = "success"
    CONFLICT = "conflict"
    FAILURE = "failure"


@dataclass(frozen=True)
class RemoteResult:
    """Outcome of one configuration server request.

    Attributes:
        status: Outcome class.
        url: Requested URL.
        status_code: HTTP status code.
        payload: Decoded JSON body for successful requests.
        message: Server error text for conflicts and failures.
    """

    status: RemoteStatus
    url: str
    status_code: int
    payload: Any = None
    message: str = ""

    @property
    def is_conflict(self) -> bool:
        return self.status is RemoteStatus.CONFLICT

    def unwrap(self) -> Any:
        """Return the payload of a successful request.

        Returns:
            Decoded JSON payload.

        Raises:
            BagkitRemoteError: If the request did not succeed.
        """
        if self.status is RemoteStatus.SUCCESS:
            return self.payload
        raise BagkitRemoteError(
            f"HTTP {self.status_code} for {self.url}: {self.message}",
            status_code=self.status_code,
        )


class RemoteClient(Protocol):
    """Configuration server client used by the remote resolver."""

    def post(self, path: str, body: object) -> RemoteResult: ...

    def get(self, path: str) -> RemoteResult: ...

    def delete(self, path: str) -> RemoteResult: ...

    def close(self) -> None: ...

    def __enter__(self) -> "RemoteClient": ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None: ...


RemoteClientFactory = Callable[[str], RemoteClient]


class Filesystem(Protocol):
    """Filesystem access used by the local resolver."""

    def is_directory(self, path: str) -> bool: ...

    def glob(self, pattern: str) -> list[str]: ...

    def read_file(self, path: str) -> str: ...
