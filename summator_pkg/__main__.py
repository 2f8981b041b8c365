"""Main entry point for running summator_pkg as a module.

This allows running Summator with:
    python -m summator_pkg
    python -m summator_pkg --health-check
    python -m summator_pkg -u -e "//;\\n1;2"

This is equivalent to running:
    python -m summator_pkg.cli
    summator
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
