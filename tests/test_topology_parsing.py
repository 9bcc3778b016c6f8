from __future__ import annotations

import json
from pathlib import Path

import pytest

from monitree.errors import InputReadError, ParseError
from monitree.topology import load_topology, parse_topology


def _document(containers: list[dict]) -> str:
    return json.dumps({"status": 200, "message": "ok", "data": {"containers": containers}})


def test_parse_topology_builds_nested_tree() -> None:
    text = _document(
        [
            {
                "parent_entity_id": "P1",
                "container_name": "Frontend",
                "graphs": [
                    {
                        "graph_name": "Latency",
                        "graph_metadata": [
                            {
                                "legend_name": "p99",
                                "entity_id": "E1",
                                "metric_id": "M1",
                                "metadata_layout": {
                                    "containers": [
                                        {"container_name": "Edge", "graphs": []}
                                    ]
                                },
                            }
                        ],
                    }
                ],
            }
        ]
    )

    response = parse_topology(text)
    assert response.status == 200
    assert response.message == "ok"

    (frontend,) = response.containers
    assert frontend.container_name == "Frontend"
    assert frontend.parent_entity_id == "P1"
    (meta,) = list(frontend.iter_metadata())
    assert meta.key == ("E1", "M1")
    assert meta.legend_name == "p99"
    (children,) = list(frontend.iter_children())
    assert [c.container_name for c in children] == ["Edge"]


@pytest.mark.parametrize(
    "layout",
    [None, {}, {"containers": None}, {"containers": []}],
)
def test_missing_metadata_layout_means_no_children(layout) -> None:
    meta = {"entity_id": "E1", "metric_id": "M1"}
    if layout is not None:
        meta["metadata_layout"] = layout
    text = _document(
        [{"container_name": "Solo", "graphs": [{"graph_metadata": [meta]}]}]
    )

    (solo,) = parse_topology(text).containers
    assert list(solo.iter_children()) == []


def test_missing_string_fields_default_to_empty() -> None:
    (container,) = parse_topology(_document([{}])).containers
    assert container.container_name == ""
    assert container.parent_entity_id == ""
    assert container.graphs == ()


def test_empty_document_has_no_containers() -> None:
    assert parse_topology("{}").containers == ()


def test_load_topology_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "topology.json"
    path.write_text(_document([{"container_name": "A"}]), encoding="utf-8")
    assert [c.container_name for c in load_topology(path).containers] == ["A"]


def test_load_topology_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(InputReadError):
        load_topology(tmp_path / "absent.json")


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        "[]",
        json.dumps({"data": {"containers": {"container_name": "A"}}}),
        json.dumps({"data": {"containers": [{"container_name": 5}]}}),
        json.dumps({"status": "200", "data": {}}),
    ],
)
def test_parse_topology_rejects_bad_documents(text: str) -> None:
    with pytest.raises(ParseError):
        parse_topology(text)


def test_load_topology_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "topology.json"
    path.write_bytes(b'{"data": {"containers": [{"container_name": "\xff"}]}}')

    with pytest.raises(ParseError):
        load_topology(path)


def test_topology_identifiers_must_be_strings() -> None:
    text = _document([{"container_name": "A", "graphs": [{"graph_metadata": [{"entity_id": 7}]}]}])
    with pytest.raises(ParseError):
        parse_topology(text)
