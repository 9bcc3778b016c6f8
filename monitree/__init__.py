"""Mirror a monitoring topology into per-container YAML configurations."""

__version__ = "0.1.0"
