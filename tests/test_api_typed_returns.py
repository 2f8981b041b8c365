"""Test that API functions return typed dataclasses."""

from summator_pkg.api import add_numbers, find_negatives
from summator_pkg.types import SumResult


class TestAPITypedReturns:
    """Test that API functions return SumResult."""

    def test_add_numbers_returns_sum_result(self):
        result = add_numbers("1,2,3")
        assert isinstance(result, SumResult)
        assert result.ok is True
        assert result.total == 6
        assert result.negatives is None

    def test_add_numbers_negative_returns_sum_result(self):
        result = add_numbers("-1,2,-3")
        assert isinstance(result, SumResult)
        assert result.ok is False
        assert result.total is None
        assert result.negatives == [-1, -3]
        assert result.error == "negative numbers not allowed: -1, -3"
        assert result.error_code == "NEGATIVE_NUMBERS"

    def test_add_numbers_malformed_defaults_to_zero(self):
        result = add_numbers("1,x,3")
        assert result.ok is True
        assert result.total == 0

    def test_add_numbers_strict(self):
        result = add_numbers("1,x,3", strict=True)
        assert result.ok is False
        assert result.error_code == "MALFORMED_TOKEN"
        assert result.negatives is None

    def test_to_dict(self):
        assert add_numbers("1,2").to_dict() == {"ok": True, "result": 3}
        assert add_numbers("-4").to_dict() == {
            "ok": False,
            "negatives": [-4],
            "error": "negative numbers not allowed: -4",
            "error_code": "NEGATIVE_NUMBERS",
        }

    def test_repr(self):
        assert repr(add_numbers("1,2")) == "SumResult(ok=True, total=3)"
        assert "negatives=[-4]" in repr(add_numbers("-4"))

    def test_find_negatives(self):
        assert find_negatives("1,-2,3,-4") == [-2, -4]
        assert find_negatives("1,2") == []
        assert find_negatives("") == []
        assert find_negatives("-1,x") == []
