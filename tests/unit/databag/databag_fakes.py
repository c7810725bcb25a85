"""Fake collaborators for data bag tests."""

from __future__ import annotations

from pathlib import Path

from core.config import BagkitConfig
from core.types import Mode, RemoteResult, RemoteStatus

SERVER_URL = "https://myserver.example.com"


def server_config(dry_run: bool = False) -> BagkitConfig:
    return BagkitConfig(
        mode=Mode.SERVER,
        data_bag_paths=(),
        server_url=SERVER_URL,
        dry_run=dry_run,
    )


def solo_config(*paths: str) -> BagkitConfig:
    return BagkitConfig(
        mode=Mode.SOLO,
        data_bag_paths=tuple(Path(path) for path in paths),
        server_url=SERVER_URL,
        dry_run=False,
    )


def success(payload: object = None) -> RemoteResult:
    return RemoteResult(status=RemoteStatus.SUCCESS, url=SERVER_URL, status_code=200, payload=payload)


def conflict() -> RemoteResult:
    return RemoteResult(
        status=RemoteStatus.CONFLICT,
        url=f"{SERVER_URL}/data",
        status_code=409,
        message="Data bag already exists",
    )


def failure(status_code: int = 500) -> RemoteResult:
    return RemoteResult(
        status=RemoteStatus.FAILURE,
        url=f"{SERVER_URL}/data",
        status_code=status_code,
        message="boom",
    )


class FakeRemoteClient:
    """Remote client that records calls and replays canned results."""

    def __init__(self, results: dict[tuple[str, str], RemoteResult] | None = None) -> None:
        self.results = results or {}
        self.calls: list[tuple[str, str, object]] = []
        self.close_count = 0

    def post(self, path: str, body: object) -> RemoteResult:
        return self._record("post", path, body)

    def get(self, path: str) -> RemoteResult:
        return self._record("get", path, None)

    def delete(self, path: str) -> RemoteResult:
        return self._record("delete", path, None)

    def close(self) -> None:
        self.close_count += 1

    def __enter__(self) -> "FakeRemoteClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _record(self, method: str, path: str, body: object) -> RemoteResult:
        self.calls.append((method, path, body))
        return self.results.get((method, path), success())


class FakeClientFactory:
    """Client factory that hands out one fake client and records base URLs."""

    def __init__(self, client: FakeRemoteClient) -> None:
        self.client = client
        self.base_urls: list[str] = []

    def __call__(self, base_url: str) -> FakeRemoteClient:
        self.base_urls.append(base_url)
        return self.client


class FakeFilesystem:
    """In-memory filesystem keyed by exact paths and glob patterns."""

    def __init__(
        self,
        directories: set[str] | None = None,
        globs: dict[str, list[str]] | None = None,
        files: dict[str, str] | None = None,
    ) -> None:
        self.directories = directories or set()
        self.globs = globs or {}
        self.files = files or {}
        self.calls: list[tuple[str, str]] = []

    def is_directory(self, path: str) -> bool:
        self.calls.append(("is_directory", path))
        return path in self.directories

    def glob(self, pattern: str) -> list[str]:
        self.calls.append(("glob", pattern))
        return list(self.globs.get(pattern, []))

    def read_file(self, path: str) -> str:
        self.calls.append(("read_file", path))
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]
