"""Local filesystem access for data bag roots."""

from __future__ import annotations

import glob
from pathlib import Path


class LocalFilesystem:
    """Filesystem collaborator backed by the local disk."""

    def is_directory(self, path: str) -> bool:
        return Path(path).is_dir()

    def glob(self, pattern: str) -> list[str]:
        """Expand a glob pattern.

        Args:
            pattern: Glob pattern, already escaped where literal.

        Returns:
            Matching paths in sorted order.
        """
        return sorted(glob.glob(pattern))

    def read_file(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")
