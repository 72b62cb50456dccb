from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Filesystem(Protocol):
    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def ensure_directory(self, path: Path) -> bool: ...


class LocalFilesystem:
    """Filesystem capability backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def ensure_directory(self, path: Path) -> bool:
        """Create ``path`` and any missing parents; return True if anything was created."""
        if path.is_dir():
            return False
        path.mkdir(parents=True, exist_ok=True)
        return True
