"""Monitoring topology tree model and document parsing."""

from .models import Container, Graph, GraphMeta, MetadataLayout, TopologyResponse
from .parsing import load_topology, parse_topology

__all__ = [
    "Container",
    "Graph",
    "GraphMeta",
    "MetadataLayout",
    "TopologyResponse",
    "load_topology",
    "parse_topology",
]
