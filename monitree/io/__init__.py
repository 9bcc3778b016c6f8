"""Output sinks for generated trees."""

from .output_sink import FilesystemSink, MemorySink, OutputSink

__all__ = ["FilesystemSink", "MemorySink", "OutputSink"]
