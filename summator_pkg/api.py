"""Public API for Summator - returns structured objects without side effects."""

from __future__ import annotations

from .parser import add, parse_numbers
from .types import NegativeNumbersError, ParseError, SumResult, ValidationError


def add_numbers(numbers: str, strict: bool | None = None) -> SumResult:
    """Sum a delimited string of numbers.

    Args:
        numbers: Input string (e.g., "1,2", "//;\\n1;2")
        strict: Optional override of strict token parsing

    Returns:
        SumResult with the total, or with the error and offending negatives

    Example:
        >>> from summator_pkg.api import add_numbers
        >>> add_numbers("1,2,3").total
        6
        >>> add_numbers("-1,2,-3").negatives
        [-1, -3]
    """
    try:
        total = add(numbers, strict=strict)
    except NegativeNumbersError as e:
        return SumResult(
            ok=False, negatives=e.negatives, error=e.message, error_code=e.code
        )
    except (ValidationError, ParseError) as e:
        return SumResult(ok=False, error=e.message, error_code=e.code)
    return SumResult(ok=True, total=total)


def find_negatives(numbers: str) -> list[int]:
    """Return the negative numbers in ``numbers`` without summing.

    Returns an empty list when there are none or when the input does not
    parse.
    """
    if not numbers:
        return []
    parsed = parse_numbers(numbers)
    if parsed is None:
        return []
    return [n for n in parsed if n < 0]
