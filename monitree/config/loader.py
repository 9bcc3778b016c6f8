"""Load the global monitoring configuration from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..errors import InputReadError, ParseError
from .models import Config, DefaultConfig, Entity, EntityIds, Incident, MetricThreshold, Source
from .validation import (
    ensure_bool,
    ensure_mapping,
    ensure_sequence,
    optional_float,
    scalar_str,
)

logger = logging.getLogger(__name__)

# Known ``defaultConfig`` keys in document order.
DEFAULT_CONFIG_KEYS = {
    "emailConfigName": "email_config_name",
    "slackConfigName": "slack_config_name",
    "incidentSevTwoConfigName": "incident_sev_two_config_name",
    "incidentSevThreeConfigName": "incident_sev_three_config_name",
    "incidentSevFourConfigName": "incident_sev_four_config_name",
}

INCIDENT_KEYS = ("severity", "enabled")


def _parse_incident(raw: Any, *, name: str) -> Incident:
    data = ensure_mapping(raw, name=name)
    return Incident(
        severity=scalar_str(data.get("severity"), name=f"{name}.severity"),
        enabled=ensure_bool(data.get("enabled"), name=f"{name}.enabled"),
        extra={key: value for key, value in data.items() if key not in INCIDENT_KEYS},
    )


def _parse_default_config(raw: Any, *, name: str) -> DefaultConfig:
    data = ensure_mapping(raw, name=name)
    kwargs: dict[str, Any] = {
        attr: scalar_str(data.get(key), name=f"{name}.{key}")
        for key, attr in DEFAULT_CONFIG_KEYS.items()
    }
    extra = {
        key: value
        for key, value in data.items()
        if key not in DEFAULT_CONFIG_KEYS and key != "incident"
    }
    return DefaultConfig(
        incident=_parse_incident(data.get("incident"), name=f"{name}.incident"),
        extra=extra,
        **kwargs,
    )


def _parse_entity_ids(raw: Any, *, name: str) -> EntityIds:
    data = ensure_mapping(raw, name=name)
    ids = ensure_sequence(data.get("entityIds"), name=f"{name}.entityIds")
    return EntityIds(
        entity_ids=tuple(
            scalar_str(value, name=f"{name}.entityIds[{idx}]") for idx, value in enumerate(ids)
        )
    )


def _parse_threshold(raw: Any, *, name: str) -> MetricThreshold:
    data = ensure_mapping(raw, name=name)
    incident = scalar_str(data.get("incident"), name=f"{name}.incident")
    return MetricThreshold(
        entity_id=scalar_str(data.get("entityId"), name=f"{name}.entityId"),
        metric_id=scalar_str(data.get("metricId"), name=f"{name}.metricId"),
        parent_entity_id=scalar_str(data.get("parentEntityId"), name=f"{name}.parentEntityId"),
        container_name=scalar_str(data.get("containerName"), name=f"{name}.containerName"),
        graph_name=scalar_str(data.get("graphName"), name=f"{name}.graphName"),
        legend_name=scalar_str(data.get("legendName"), name=f"{name}.legendName"),
        min=optional_float(data.get("min"), name=f"{name}.min"),
        max=optional_float(data.get("max"), name=f"{name}.max"),
        incident=incident or None,
    )


def _parse_entity(raw: Any, *, name: str) -> Entity:
    data = ensure_mapping(raw, name=name)
    thresholds = ensure_sequence(data.get("metricThresholds"), name=f"{name}.metricThresholds")
    return Entity(
        name=scalar_str(data.get("name"), name=f"{name}.name"),
        id=scalar_str(data.get("id"), name=f"{name}.id"),
        ignore=_parse_entity_ids(data.get("ignore"), name=f"{name}.ignore"),
        whitelist=_parse_entity_ids(data.get("whitelist"), name=f"{name}.whitelist"),
        metric_thresholds=tuple(
            _parse_threshold(item, name=f"{name}.metricThresholds[{idx}]")
            for idx, item in enumerate(thresholds)
        ),
    )


def config_from_mapping(data: Any) -> Config:
    """Build a :class:`Config` from an already-decoded document.

    Shape problems raise ``TypeError`` naming the offending field.
    """

    root = ensure_mapping(data, name="document")
    source = ensure_mapping(root.get("source"), name="source")
    return Config(
        source=Source(
            default_config=_parse_default_config(
                source.get("defaultConfig"), name="source.defaultConfig"
            ),
            entity=_parse_entity(source.get("entity"), name="source.entity"),
        )
    )


def parse_config(text: str, *, name: str = "<config>") -> Config:
    """Parse YAML *text* into a :class:`Config`."""

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParseError(f"{name} is not valid YAML: {exc}", path=name) from exc
    try:
        return config_from_mapping(data)
    except TypeError as exc:
        raise ParseError(f"{name}: {exc}", path=name) from exc


def load_config(path: Path | str) -> Config:
    """Read and parse the global configuration stored at *path*."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputReadError(f"cannot read {path}: {exc}", path=path) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path} is not valid UTF-8: {exc}", path=path) from exc
    config = parse_config(text, name=str(path))
    logger.debug(
        "Loaded %d metric thresholds from %s",
        len(config.source.entity.metric_thresholds),
        path,
    )
    return config
