"""Global configuration loading and encoding for monitree."""

from .loader import load_config, parse_config
from .models import Config, DefaultConfig, Entity, EntityIds, Incident, MetricThreshold, Source
from .serialization import dump_config

__all__ = [
    "Config",
    "DefaultConfig",
    "Entity",
    "EntityIds",
    "Incident",
    "MetricThreshold",
    "Source",
    "dump_config",
    "load_config",
    "parse_config",
]
