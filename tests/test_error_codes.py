"""Test error codes carried by the exception types."""

import unittest

from summator_pkg.parser import add
from summator_pkg.types import NegativeNumbersError, ParseError, ValidationError


class TestErrorCodes(unittest.TestCase):
    """Test that failures carry appropriate error codes."""

    def test_negative_numbers_error_code(self):
        try:
            add("1,-2")
            self.fail("Should have raised NegativeNumbersError")
        except NegativeNumbersError as e:
            self.assertEqual(e.code, "NEGATIVE_NUMBERS")
            self.assertEqual(e.negatives, [-2])

    def test_negative_numbers_error_is_validation_error(self):
        with self.assertRaises(ValidationError):
            add("-5")

    def test_all_negatives_reported_in_order(self):
        with self.assertRaises(NegativeNumbersError) as ctx:
            add("-3,4,-1,-2000")
        self.assertEqual(ctx.exception.negatives, [-3, -1, -2000])
        self.assertEqual(
            ctx.exception.message, "negative numbers not allowed: -3, -1, -2000"
        )

    def test_empty_negative_collection_rejected(self):
        with self.assertRaises(ValueError):
            NegativeNumbersError([])

    def test_malformed_token_error_code(self):
        try:
            add("1,x", strict=True)
            self.fail("Should have raised ParseError")
        except ParseError as e:
            self.assertEqual(e.code, "MALFORMED_TOKEN")
            self.assertEqual(e.token, "x")
            self.assertIn("invalid number", str(e))


if __name__ == "__main__":
    unittest.main()
