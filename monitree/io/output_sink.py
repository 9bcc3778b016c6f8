"""Where materialized directories and configuration files are written."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..errors import DirectoryCreationError, WriteError


class OutputSink(Protocol):
    """Directory-create plus file-write capability used by the materializer."""

    def make_dirs(self, path: Path) -> None:
        ...

    def write_text(self, path: Path, text: str) -> None:
        ...


class FilesystemSink:
    """Write to the real filesystem."""

    def make_dirs(self, path: Path) -> None:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationError(
                f"error creating directory {path}: {exc}", path=path
            ) from exc

    def write_text(self, path: Path, text: str) -> None:
        try:
            with open(path, "w", encoding="utf-8") as fh:
                fh.write(text)
        except OSError as exc:
            raise WriteError(f"error writing file {path}: {exc}", path=path) from exc


class MemorySink:
    """Record directories and files in memory instead of touching disk.

    ``fail_on`` lists paths whose creation or write should fail, which lets
    callers exercise error propagation without a read-only filesystem.
    """

    def __init__(self, fail_on: set[Path] | None = None) -> None:
        self.directories: list[Path] = []
        self.files: dict[Path, str] = {}
        self.fail_on = {Path(p) for p in (fail_on or ())}

    def make_dirs(self, path: Path) -> None:
        path = Path(path)
        if path in self.fail_on:
            raise DirectoryCreationError(f"error creating directory {path}", path=path)
        if path not in self.directories:
            self.directories.append(path)

    def write_text(self, path: Path, text: str) -> None:
        path = Path(path)
        if path in self.fail_on:
            raise WriteError(f"error writing file {path}", path=path)
        if path.parent not in self.directories:
            raise WriteError(f"error writing file {path}: parent directory missing", path=path)
        self.files[path] = text
