"""Filesystem-safe names for generated container directories."""

from __future__ import annotations

# Characters that are illegal in a path segment on at least one platform.
RESERVED_CHARS = ("/", "\\", ":", "*", "?", '"', "<", ">", "|")

_RESERVED_TABLE = str.maketrans({ch: "_" for ch in RESERVED_CHARS})


def sanitize_folder_name(name: str) -> str:
    """Return *name* with every reserved path character replaced by ``_``.

    The result has the same length as *name* and all other characters,
    including non-ASCII ones, are left untouched.

    >>> sanitize_folder_name("CPU / Memory")
    'CPU _ Memory'
    >>> sanitize_folder_name('a:b*c?"d"<e>|f\\\\g')
    'a_b_c__d__e__f_g'
    """
    return name.translate(_RESERVED_TABLE)
