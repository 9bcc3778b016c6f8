"""Typed containers for the global and per-container configurations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Incident:
    severity: str = ""
    enabled: bool = False
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DefaultConfig:
    """Notification settings copied verbatim into every derived config.

    Keys the document carries beyond the known ones are kept in ``extra``.
    """

    email_config_name: str = ""
    slack_config_name: str = ""
    incident_sev_two_config_name: str = ""
    incident_sev_three_config_name: str = ""
    incident_sev_four_config_name: str = ""
    incident: Incident = field(default_factory=Incident)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EntityIds:
    entity_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class MetricThreshold:
    """A threshold rule for one ``(entity_id, metric_id)`` pair.

    ``min``, ``max`` and ``incident`` are ``None`` when the document omits
    them. The descriptive fields are carried along but never matched on.
    """

    entity_id: str
    metric_id: str
    parent_entity_id: str = ""
    container_name: str = ""
    graph_name: str = ""
    legend_name: str = ""
    min: float | None = None
    max: float | None = None
    incident: str | None = None

    @property
    def key(self) -> tuple[str, str]:
        return (self.entity_id, self.metric_id)


@dataclass(frozen=True)
class Entity:
    name: str = ""
    id: str = ""
    ignore: EntityIds = field(default_factory=EntityIds)
    whitelist: EntityIds = field(default_factory=EntityIds)
    metric_thresholds: tuple[MetricThreshold, ...] = ()


@dataclass(frozen=True)
class Source:
    default_config: DefaultConfig = field(default_factory=DefaultConfig)
    entity: Entity = field(default_factory=Entity)


@dataclass(frozen=True)
class Config:
    """In-memory representation of a ``source`` configuration document."""

    source: Source = field(default_factory=Source)
