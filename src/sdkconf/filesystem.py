"""Filesystem abstraction used by the bundle scanner and the configuration store."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool:
        """Return True if anything exists at ``path``."""

    def is_directory(self, path: Path) -> bool:
        ...

    def is_file(self, path: Path) -> bool:
        ...

    def create_directory(self, path: Path, recursive: bool = False) -> None:
        ...

    def remove_file_tree(self, path: Path) -> None:
        """Remove a file or a whole directory tree."""

    def list_directory(self, path: Path) -> list[str]:
        ...

    def read_text(self, path: Path) -> str:
        ...

    def write_text(self, path: Path, text: str) -> None:
        """Replace the contents of ``path`` with ``text`` in a single step."""


class LocalFileSystem:
    """FileSystem backed by the local disk. ``OSError`` propagates to callers."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def is_file(self, path: Path) -> bool:
        return Path(path).is_file()

    def create_directory(self, path: Path, recursive: bool = False) -> None:
        Path(path).mkdir(parents=recursive, exist_ok=True)

    def remove_file_tree(self, path: Path) -> None:
        path = Path(path)
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()

    def list_directory(self, path: Path) -> list[str]:
        return sorted(os.listdir(path))

    def read_text(self, path: Path) -> str:
        with Path(path).open("r", encoding="utf-8") as handle:
            return handle.read()

    def write_text(self, path: Path, text: str) -> None:
        path = Path(path)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise


__all__ = ["FileSystem", "LocalFileSystem"]
