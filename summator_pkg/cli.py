"""Command line interface for Summator."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from .config import LOG_LEVEL, VERSION
from .logging_config import get_logger

logger = get_logger("cli")

DEMO_INPUT = "1,2"


def unescape(text: str) -> str:
    """Turn the shell-typed sequences ``\\n`` and ``\\\\`` into real characters."""
    out = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text) and text[i + 1] in "n\\":
            out.append("\n" if text[i + 1] == "n" else "\\")
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _health_check() -> int:
    """Run health check to verify basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    from .api import add_numbers

    checks = [
        ("Basic summation", "1,2,3", {"ok": True, "result": 6}),
        ("Custom delimiter", "//;\n1;2", {"ok": True, "result": 3}),
        ("Upper bound filter", "2,1001", {"ok": True, "result": 2}),
        (
            "Negative rejection",
            "-1,2,-3",
            {
                "ok": False,
                "negatives": [-1, -3],
                "error": "negative numbers not allowed: -1, -3",
                "error_code": "NEGATIVE_NUMBERS",
            },
        ),
    ]
    checks_passed = 0
    checks_failed = 0

    print("Running Summator health check...")
    print("-" * 50)

    for name, text, expected in checks:
        try:
            got = add_numbers(text, strict=False).to_dict()
        except Exception as e:
            print(f"[FAIL] {name} check failed: {e}")
            checks_failed += 1
            continue
        if got == expected:
            print(f"[OK] {name} works")
            checks_passed += 1
        else:
            print(f"[FAIL] {name} failed: expected {expected}, got {got}")
            checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: dict[str, Any], output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Result dictionary
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res, ensure_ascii=False))
        return
    if not res.get("ok"):
        print("Error:", res.get("error"))
        return
    print(res.get("result"))


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Summator CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="summator")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Sum one input string and exit",
        dest="eval_input",
    )
    parser.add_argument(
        "-u",
        "--unescape",
        action="store_true",
        help="Interpret \\n and \\\\ in the input as a line break and a backslash",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report malformed numbers as errors instead of summing to 0",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=LOG_LEVEL if LOG_LEVEL in ("DEBUG", "INFO", "WARNING", "ERROR") else "WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify basic operations",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    if args.eval_input is None:
        # Demonstration run
        from .parser import add

        print(f"Hello, world!,{add(DEMO_INPUT)}")
        return 0

    from .api import add_numbers

    text = unescape(args.eval_input) if args.unescape else args.eval_input
    logger.debug("Summing input %r", text)
    result = add_numbers(text, strict=True if args.strict else None)
    if not result.ok:
        logger.info("Rejected input %r: %s", text, result.error)
    print_result_pretty(result.to_dict(), args.format)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main_entry())
