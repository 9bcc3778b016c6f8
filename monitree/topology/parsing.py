"""Parse the JSON topology document into :mod:`monitree.topology.models`."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..config.validation import ensure_int, ensure_mapping, ensure_sequence, ensure_str
from ..errors import InputReadError, ParseError
from .models import Container, Graph, GraphMeta, MetadataLayout, TopologyResponse

logger = logging.getLogger(__name__)


def _parse_containers(raw: Any, *, name: str) -> tuple[Container, ...]:
    items = ensure_sequence(raw, name=name)
    return tuple(_parse_container(item, name=f"{name}[{idx}]") for idx, item in enumerate(items))


def _parse_meta(raw: Any, *, name: str) -> GraphMeta:
    data = ensure_mapping(raw, name=name)
    layout = ensure_mapping(data.get("metadata_layout"), name=f"{name}.metadata_layout")
    return GraphMeta(
        legend_name=ensure_str(data.get("legend_name"), name=f"{name}.legend_name"),
        entity_id=ensure_str(data.get("entity_id"), name=f"{name}.entity_id"),
        metric_id=ensure_str(data.get("metric_id"), name=f"{name}.metric_id"),
        metadata_layout=MetadataLayout(
            containers=_parse_containers(
                layout.get("containers"), name=f"{name}.metadata_layout.containers"
            )
        ),
    )


def _parse_graph(raw: Any, *, name: str) -> Graph:
    data = ensure_mapping(raw, name=name)
    metadata = ensure_sequence(data.get("graph_metadata"), name=f"{name}.graph_metadata")
    return Graph(
        graph_name=ensure_str(data.get("graph_name"), name=f"{name}.graph_name"),
        graph_metadata=tuple(
            _parse_meta(item, name=f"{name}.graph_metadata[{idx}]")
            for idx, item in enumerate(metadata)
        ),
    )


def _parse_container(raw: Any, *, name: str) -> Container:
    data = ensure_mapping(raw, name=name)
    graphs = ensure_sequence(data.get("graphs"), name=f"{name}.graphs")
    return Container(
        parent_entity_id=ensure_str(data.get("parent_entity_id"), name=f"{name}.parent_entity_id"),
        container_name=ensure_str(data.get("container_name"), name=f"{name}.container_name"),
        graphs=tuple(
            _parse_graph(item, name=f"{name}.graphs[{idx}]") for idx, item in enumerate(graphs)
        ),
    )


def topology_from_mapping(data: Any) -> TopologyResponse:
    """Build a :class:`TopologyResponse` from an already-decoded document."""

    root = ensure_mapping(data, name="document")
    payload = ensure_mapping(root.get("data"), name="data")
    return TopologyResponse(
        status=ensure_int(root.get("status"), name="status"),
        message=ensure_str(root.get("message"), name="message"),
        containers=_parse_containers(payload.get("containers"), name="data.containers"),
    )


def parse_topology(text: str, *, name: str = "<topology>") -> TopologyResponse:
    """Parse JSON *text* into a :class:`TopologyResponse`."""

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"{name} is not valid JSON: {exc}", path=name) from exc
    try:
        return topology_from_mapping(data)
    except TypeError as exc:
        raise ParseError(f"{name}: {exc}", path=name) from exc


def load_topology(path: Path | str) -> TopologyResponse:
    """Read and parse the topology document stored at *path*."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputReadError(f"cannot read {path}: {exc}", path=path) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path} is not valid UTF-8: {exc}", path=path) from exc
    response = parse_topology(text, name=str(path))
    logger.debug("Loaded %d top-level containers from %s", len(response.containers), path)
    return response
