"""Command line entry point that builds the monitoring directory tree.

Usage examples:

- Read ``test-1.json`` and ``test-2.yaml`` from the working directory and
  write ``monitoring_structure/``:
    python -m monitree

- Point at other inputs or another output directory:
    python -m monitree --topology topo.json --config global.yaml --output out

Set ``MONITREE_DEBUG=1`` to log every directory and file as it is written.
"""

from __future__ import annotations

import argparse
import logging
import sys

from monitree.config.loader import load_config
from monitree.debug_utils import configure_logging
from monitree.errors import (
    InputReadError,
    MonitreeError,
    ParseError,
)
from monitree.io.output_sink import FilesystemSink
from monitree.materialize.engine import materialize
from monitree.topology.parsing import load_topology

logger = logging.getLogger(__name__)

DEFAULT_TOPOLOGY_FILE = "test-1.json"
DEFAULT_CONFIG_FILE = "test-2.yaml"
DEFAULT_OUTPUT_DIR = "monitoring_structure"

SUCCESS_MESSAGE = "Folder structure and YAML files created successfully!"


def _describe(stage: str, exc: MonitreeError) -> str:
    if isinstance(exc, InputReadError):
        return f"Error reading {stage} file: {exc}"
    if isinstance(exc, ParseError):
        return f"Error parsing {stage}: {exc}"
    return f"Error {stage}: {exc}"


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Mirror a monitoring topology into per-container YAML configurations."
    )
    ap.add_argument(
        "--topology",
        default=DEFAULT_TOPOLOGY_FILE,
        help=f"Topology JSON document (default: {DEFAULT_TOPOLOGY_FILE})",
    )
    ap.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Global YAML configuration (default: {DEFAULT_CONFIG_FILE})",
    )
    ap.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Base output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    args = _build_parser().parse_args(argv)
    configure_logging()

    try:
        topology = load_topology(args.topology)
    except MonitreeError as exc:
        print(_describe("topology", exc))
        return 1
    try:
        config = load_config(args.config)
    except MonitreeError as exc:
        print(_describe("configuration", exc))
        return 1

    sink = FilesystemSink()
    try:
        sink.make_dirs(args.output)
    except MonitreeError as exc:
        print(f"Error creating base directory: {exc}")
        return 1

    try:
        written = materialize(args.output, topology.containers, config, sink=sink)
    except MonitreeError as exc:
        print(f"Error creating structure: {exc}")
        return 1

    logger.info("Wrote %d configuration files under %s", len(written), args.output)
    print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
