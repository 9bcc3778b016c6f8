"""Typed containers for the monitoring topology tree."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MetadataLayout:
    containers: tuple[Container, ...] = ()


@dataclass(frozen=True)
class GraphMeta:
    """One metric reference inside a graph.

    ``metadata_layout`` may hold further containers, which is how the
    topology nests to arbitrary depth.
    """

    entity_id: str
    metric_id: str
    legend_name: str = ""
    metadata_layout: MetadataLayout = field(default_factory=MetadataLayout)

    @property
    def key(self) -> tuple[str, str]:
        return (self.entity_id, self.metric_id)


@dataclass(frozen=True)
class Graph:
    graph_name: str = ""
    graph_metadata: tuple[GraphMeta, ...] = ()


@dataclass(frozen=True)
class Container:
    container_name: str
    parent_entity_id: str = ""
    graphs: tuple[Graph, ...] = ()

    def iter_metadata(self):
        """Yield every :class:`GraphMeta` directly under this container."""
        for graph in self.graphs:
            yield from graph.graph_metadata

    def iter_children(self):
        """Yield the non-empty nested container sequences, in graph order."""
        for meta in self.iter_metadata():
            if meta.metadata_layout.containers:
                yield meta.metadata_layout.containers


@dataclass(frozen=True)
class TopologyResponse:
    """The topology document envelope."""

    status: int = 0
    message: str = ""
    containers: tuple[Container, ...] = ()
