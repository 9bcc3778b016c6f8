"""Helper utilities for debugging monitree runs."""

import logging
import os


def is_debug_enabled() -> bool:
    """Return ``True`` if ``MONITREE_DEBUG`` is set to a truthy value."""
    val = os.environ.get("MONITREE_DEBUG", "")
    return bool(val) and val.lower() not in {"0", "false", "no"}


def configure_logging(default_level: str = "DEBUG") -> logging.Logger:
    """Configure the ``monitree`` logger.

    When ``MONITREE_DEBUG`` is enabled messages go to ``stderr`` at the level
    named by ``MONITREE_LOG_LEVEL`` or ``default_level``; otherwise only
    warnings are shown.
    """
    logger = logging.getLogger("monitree")
    if is_debug_enabled():
        level_name = os.environ.get("MONITREE_LOG_LEVEL", default_level).upper()
        level = getattr(logging, level_name, logging.DEBUG)
        if not isinstance(level, int):
            level = logging.DEBUG
    else:
        level = logging.WARNING

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
