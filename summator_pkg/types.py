"""Result dataclass and exception types for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class SumResult:
    """Result of summing a delimited string of numbers."""

    ok: bool
    total: int | None = None
    negatives: list[int] | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.total is not None:
            result_dict["result"] = self.total
        if self.negatives is not None:
            result_dict["negatives"] = self.negatives
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            parts = ["ok=False", f"error={self.error!r}"]
            if self.negatives is not None:
                parts.append(f"negatives={self.negatives!r}")
            return f"SumResult({', '.join(parts)})"
        return f"SumResult(ok=True, total={self.total!r})"


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class NegativeNumbersError(ValidationError):
    """Raised when the input contains one or more negative numbers.

    ``negatives`` keeps every negative number in the order it appeared in
    the input, so callers can inspect them instead of parsing the message.
    """

    def __init__(self, negatives: list[int]):
        if not negatives:
            raise ValueError("NegativeNumbersError needs at least one negative number")
        self.negatives = list(negatives)
        message = "negative numbers not allowed: " + ", ".join(
            str(n) for n in self.negatives
        )
        super().__init__(message, code="NEGATIVE_NUMBERS")


class ParseError(Exception):
    """Raised when a token cannot be parsed as an integer (strict mode only)."""

    def __init__(self, message: str, code: str = "PARSE_ERROR", token: str | None = None):
        self.message = message
        self.code = code
        self.token = token
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
