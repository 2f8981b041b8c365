"""Parsing and summation of delimited number strings.

Input grammar::

    input         := "" | body
    body          := custom_prefix? token_stream
    custom_prefix := "//" delimiter_text "\\n"
    token_stream  := token (("," | "\\n") token)*

The custom delimiter is matched literally. Commas and line breaks keep
working as separators after a custom delimiter is declared.
"""

from __future__ import annotations

from . import config
from .config import (
    CUSTOM_DELIMITER_PREFIX,
    DEFAULT_DELIMITER,
    INT_MAX,
    INT_MIN,
    LINE_BREAK,
    NUMBER_TOKEN_RE,
    SEPARATOR_RE,
    UPPER_BOUND,
)
from .logging_config import get_logger
from .types import NegativeNumbersError, ParseError

logger = get_logger("parser")


def split_delimiter(numbers: str) -> tuple[str, str]:
    """Split a raw input into its delimiter and the text to tokenize.

    Args:
        numbers: Raw input string

    Returns:
        Tuple of (delimiter, body). Without a ``//`` prefix the delimiter is
        a comma and the body is the whole input.
    """
    if not numbers.startswith(CUSTOM_DELIMITER_PREFIX):
        return DEFAULT_DELIMITER, numbers
    start = len(CUSTOM_DELIMITER_PREFIX)
    end = numbers.find(LINE_BREAK, start)
    if end == -1:
        # Prefix never terminated: everything is delimiter, nothing to sum
        return numbers[start:], ""
    return numbers[start:end], numbers[end + 1 :]


def normalize(body: str, delimiter: str) -> str:
    """Replace every occurrence of ``delimiter`` in ``body`` with a comma."""
    return body.replace(delimiter, DEFAULT_DELIMITER)


def tokenize(body: str) -> list[str]:
    """Split normalized text on every comma and line break."""
    return SEPARATOR_RE.split(body)


def parse_token(token: str) -> int | None:
    """Parse one token as a base-10 signed 32-bit integer.

    Surrounding whitespace is ignored. Returns None when the token is not a
    valid integer (empty, non-numeric, or out of range).
    """
    text = token.strip()
    if not NUMBER_TOKEN_RE.match(text):
        return None
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_numbers(numbers: str, strict: bool = False) -> list[int] | None:
    """Parse every number in ``numbers``.

    Args:
        numbers: Raw, non-empty input string
        strict: Raise ParseError on a malformed token instead of returning None

    Returns:
        Parsed numbers in input order, or None if any token failed to parse

    Raises:
        ParseError: If strict is True and a token is malformed
    """
    delimiter, body = split_delimiter(numbers)
    parsed = []
    for token in tokenize(normalize(body, delimiter)):
        value = parse_token(token)
        if value is None:
            if strict:
                raise ParseError(
                    f"invalid number: {token.strip()!r}",
                    code="MALFORMED_TOKEN",
                    token=token,
                )
            logger.debug("Token %r is not an integer, result degrades to 0", token)
            return None
        parsed.append(value)
    return parsed


def add(numbers: str, strict: bool | None = None) -> int:
    """Sum a delimited string of integers.

    Numbers may be separated by commas, line breaks, or a custom delimiter
    declared with a ``//<delimiter>\\n`` prefix. Numbers greater than 1000
    are left out of the sum.

    Args:
        numbers: Input string (e.g., "1,2", "1\\n2,3", "//;\\n1;2")
        strict: Override config.STRICT_PARSE for this call

    Returns:
        The sum. An empty input, or any token that is not an integer (outside
        strict mode), gives 0.

    Raises:
        NegativeNumbersError: If any number is negative
        ParseError: If strict parsing is on and a token is malformed

    Example:
        >>> add("//;\\n1;2,3")
        6
        >>> add("2,1001")
        2
    """
    if not numbers:
        return 0
    if strict is None:
        strict = config.STRICT_PARSE

    parsed = parse_numbers(numbers, strict=strict)
    if parsed is None:
        return 0

    negatives = [n for n in parsed if n < 0]
    if negatives:
        raise NegativeNumbersError(negatives)

    return sum(n for n in parsed if n <= UPPER_BOUND)
