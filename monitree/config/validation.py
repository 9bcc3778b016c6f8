"""Validation helpers for configuration and topology payloads."""

from __future__ import annotations

from typing import Any


def ensure_mapping(value: Any, *, name: str) -> dict[str, Any]:
    """Return *value* as ``dict`` or raise a descriptive ``TypeError``."""

    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def ensure_sequence(value: Any, *, name: str) -> list[Any]:
    """Return *value* as ``list``; ``None`` is treated as an empty sequence."""

    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{name} must be a sequence, got {type(value).__name__}")
    return value


def ensure_str(value: Any, *, name: str) -> str:
    """Return *value* as ``str``; ``None`` becomes the empty string."""

    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def scalar_str(value: Any, *, name: str) -> str:
    """Return *value* as ``str``, accepting numeric YAML scalars.

    Unquoted identifiers such as ``id: 12345`` load as numbers; they are kept
    as their text. Booleans, mappings and sequences are still rejected.
    """

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ensure_str(value, name=name)


def ensure_bool(value: Any, *, name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a boolean, got {type(value).__name__}")
    return value


def ensure_int(value: Any, *, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def optional_float(value: Any, *, name: str) -> float | None:
    """Return *value* as ``float`` or ``None`` when it is absent.

    Absence is kept distinct from zero; booleans are rejected even though
    ``bool`` subclasses ``int``.
    """

    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)
