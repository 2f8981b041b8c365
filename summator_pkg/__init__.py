"""Summator package: delimited string summation with parser, API, and CLI."""

__all__ = [
    "config",
    "parser",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "add",
    "add_numbers",
    "find_negatives",
]
