"""Mirror a monitoring topology onto disk as per-container configurations."""

from __future__ import annotations

import copy
import logging
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from ..config.models import Config, MetricThreshold
from ..config.serialization import dump_config
from ..errors import SerializationError, TopologyCycleError
from ..io.output_sink import FilesystemSink, OutputSink
from ..topology.models import Container
from ..utils.naming import sanitize_folder_name

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"
MAX_TOPOLOGY_DEPTH = 256


def derive_config(global_config: Config, container: Container) -> Config:
    """Return the configuration scoped to the metrics visible in *container*.

    Only the graph metadata directly under *container* is considered; nested
    containers get their own derived config. For each ``(entity_id,
    metric_id)`` pair the first matching global threshold wins and the
    result keeps first-insertion order.
    """

    thresholds = global_config.source.entity.metric_thresholds
    selected: dict[tuple[str, str], MetricThreshold] = {}
    for meta in container.iter_metadata():
        for threshold in thresholds:
            if threshold.key == meta.key and threshold.key not in selected:
                selected[threshold.key] = threshold

    source = global_config.source
    default_config = copy.deepcopy(source.default_config)
    entity = replace(source.entity, metric_thresholds=tuple(selected.values()))
    return Config(source=replace(source, default_config=default_config, entity=entity))


def _materialize_level(
    root: Path,
    containers: Sequence[Container],
    global_config: Config,
    sink: OutputSink,
    config_filename: str,
    ancestors: list[int],
    written: list[Path],
) -> None:
    if len(ancestors) >= MAX_TOPOLOGY_DEPTH:
        raise TopologyCycleError(
            f"topology under {root} nests deeper than {MAX_TOPOLOGY_DEPTH} levels",
            path=root,
        )

    for container in containers:
        if id(container) in ancestors:
            raise TopologyCycleError(
                f"container {container.container_name!r} is nested inside itself under {root}",
                path=root,
            )

        path = root / sanitize_folder_name(container.container_name)
        sink.make_dirs(path)

        scoped = derive_config(global_config, container)
        try:
            text = dump_config(scoped)
        except SerializationError as exc:
            raise SerializationError(
                f"error encoding configuration for {container.container_name!r}: {exc}",
                path=path,
            ) from exc

        config_path = path / config_filename
        sink.write_text(config_path, text)
        written.append(config_path)
        logger.debug(
            "Wrote %s with %d metric thresholds",
            config_path,
            len(scoped.source.entity.metric_thresholds),
        )

        ancestors.append(id(container))
        try:
            for children in container.iter_children():
                _materialize_level(
                    path, children, global_config, sink, config_filename, ancestors, written
                )
        finally:
            ancestors.pop()


def materialize(
    root: Path | str,
    containers: Sequence[Container],
    global_config: Config,
    *,
    sink: OutputSink | None = None,
    config_filename: str = CONFIG_FILENAME,
) -> list[Path]:
    """Create one directory and config file per container under *root*.

    The walk is depth-first and pre-order, siblings in input order. Every
    level filters the full *global_config*; nothing is narrowed on the way
    down. The first failure propagates and already-written output is left
    in place.

    Returns the configuration file paths in the order they were written.
    """

    if sink is None:
        sink = FilesystemSink()
    written: list[Path] = []
    _materialize_level(Path(root), containers, global_config, sink, config_filename, [], written)
    logger.debug("Materialized %d containers under %s", len(written), root)
    return written
