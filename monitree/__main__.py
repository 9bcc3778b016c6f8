"""Module entry to expose `python -m monitree` CLI.

Delegates to `monitree.cli.main`.
"""

import sys

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
