"""Exceptions raised while loading inputs and materializing the tree."""

from __future__ import annotations

from pathlib import Path


class MonitreeError(Exception):
    """Base class for all monitree failures.

    ``path`` names the file or directory involved when there is one.
    """

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class InputReadError(MonitreeError):
    """An input document is missing or cannot be read."""


class ParseError(MonitreeError):
    """An input document is not valid JSON/YAML or has the wrong shape."""


class DirectoryCreationError(MonitreeError):
    """A container directory could not be created."""


class SerializationError(MonitreeError):
    """A derived configuration could not be encoded as YAML."""


class WriteError(MonitreeError):
    """A configuration file could not be written."""


class TopologyCycleError(MonitreeError):
    """The topology nests a container inside itself or nests too deeply."""
