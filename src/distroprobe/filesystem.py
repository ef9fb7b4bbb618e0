"""File-reading capability used by the detector."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class FileReader(ABC):
    """Read-only access to release files.

    Implementations must be safe to call from several threads at once.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether ``path`` exists."""
        ...

    @abstractmethod
    def read(self, path: str) -> bytes:
        """Read the whole file.

        Raises:
            OSError: If the file cannot be read
        """
        ...


class LocalFileReader(FileReader):
    """FileReader backed by the real filesystem."""

    def exists(self, path: str) -> bool:
        try:
            return Path(path).exists()
        except OSError:
            return False

    def read(self, path: str) -> bytes:
        return Path(path).read_bytes()
