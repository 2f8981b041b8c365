"""Centralized configuration for Summator.

This module defines:
- Input grammar constants (default delimiter, custom delimiter prefix)
- The upper bound above which numbers are left out of the sum
- Integer range accepted for a single token
- Parsing policy and logging defaults

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with SUMMATOR_)
"""

import os
import re

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("summator")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input grammar
DEFAULT_DELIMITER = ","
CUSTOM_DELIMITER_PREFIX = "//"
LINE_BREAK = "\n"

# Numbers strictly greater than this are dropped from the sum (not configurable)
UPPER_BOUND = 1000

# Signed 32-bit range; tokens outside it count as parse failures
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Parsing policy: when true, a malformed token raises ParseError instead of
# collapsing the whole result to 0
STRICT_PARSE = os.getenv("SUMMATOR_STRICT_PARSE", "false").lower() == "true"

# Default log level for the CLI
LOG_LEVEL = os.getenv("SUMMATOR_LOG_LEVEL", "WARNING").upper()

NUMBER_TOKEN_RE = re.compile(r"^[+-]?[0-9]+$")
SEPARATOR_RE = re.compile(r"[,\n]")
