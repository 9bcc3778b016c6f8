"""Encode configurations in the same YAML layout they are read from."""

from __future__ import annotations

from typing import Any

import yaml

from ..errors import SerializationError
from .loader import DEFAULT_CONFIG_KEYS
from .models import Config, DefaultConfig, Entity, EntityIds, MetricThreshold

_INT_BOUND_LIMIT = 1e15


def _default_config_to_mapping(default: DefaultConfig) -> dict[str, Any]:
    data: dict[str, Any] = {
        key: getattr(default, attr) for key, attr in DEFAULT_CONFIG_KEYS.items()
    }
    data["incident"] = {
        "severity": default.incident.severity,
        "enabled": default.incident.enabled,
        **default.incident.extra,
    }
    data.update(default.extra)
    return data


def _entity_ids_to_mapping(ids: EntityIds) -> dict[str, Any]:
    return {"entityIds": list(ids.entity_ids)}


def _bound(value: float) -> int | float:
    # Whole-number bounds are written without a trailing ".0".
    if value.is_integer() and abs(value) < _INT_BOUND_LIMIT:
        return int(value)
    return value


def threshold_to_mapping(threshold: MetricThreshold) -> dict[str, Any]:
    """Return the document form of *threshold*; absent optionals are omitted."""

    data: dict[str, Any] = {
        "entityId": threshold.entity_id,
        "metricId": threshold.metric_id,
        "parentEntityId": threshold.parent_entity_id,
        "containerName": threshold.container_name,
        "graphName": threshold.graph_name,
        "legendName": threshold.legend_name,
    }
    if threshold.min is not None:
        data["min"] = _bound(threshold.min)
    if threshold.max is not None:
        data["max"] = _bound(threshold.max)
    if threshold.incident:
        data["incident"] = threshold.incident
    return data


def _entity_to_mapping(entity: Entity) -> dict[str, Any]:
    return {
        "name": entity.name,
        "id": entity.id,
        "ignore": _entity_ids_to_mapping(entity.ignore),
        "whitelist": _entity_ids_to_mapping(entity.whitelist),
        "metricThresholds": [threshold_to_mapping(t) for t in entity.metric_thresholds],
    }


def config_to_mapping(config: Config) -> dict[str, Any]:
    return {
        "source": {
            "defaultConfig": _default_config_to_mapping(config.source.default_config),
            "entity": _entity_to_mapping(config.source.entity),
        }
    }


def dump_config(config: Config) -> str:
    """Return *config* as YAML text with keys in document order."""

    try:
        return yaml.safe_dump(
            config_to_mapping(config),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as exc:
        raise SerializationError(f"cannot encode configuration: {exc}") from exc
