"""Topology-to-filesystem materialization."""

from .engine import CONFIG_FILENAME, MAX_TOPOLOGY_DEPTH, derive_config, materialize

__all__ = ["CONFIG_FILENAME", "MAX_TOPOLOGY_DEPTH", "derive_config", "materialize"]
