"""Tests for request input validation rules."""

import pytest

from digitmath.domain.errors import InvalidInput
from digitmath.domain.validation import require_int, require_string


class TestRequireString:
    def test_returns_string(self):
        assert require_string({"name": "John"}, "name") == "John"

    def test_empty_string_is_still_a_string(self):
        assert require_string({"a": ""}, "a") == ""

    def test_missing_key(self):
        with pytest.raises(InvalidInput, match="Invalid value for missing."):
            require_string({}, "missing")

    @pytest.mark.parametrize("value", [123, None, ["a"]])
    def test_non_string_value(self, value):
        with pytest.raises(InvalidInput):
            require_string({"name": value}, "name")


class TestRequireInt:
    def test_returns_integer(self):
        assert require_int({"age": 30}, "age") == 30

    @pytest.mark.parametrize("value, expected", [("25", 25), (" 7 ", 7), ("-3", -3), ("+4", 4)])
    def test_numeric_string(self, value, expected):
        assert require_int({"age": value}, "age") == expected

    def test_integral_float(self):
        assert require_int({"n": 5.0}, "n") == 5

    @pytest.mark.parametrize("value", ["5.0", "5.", " 5.00 "])
    def test_integral_decimal_string(self, value):
        assert require_int({"n": value}, "n") == 5

    def test_overlong_numeric_string(self):
        with pytest.raises(InvalidInput, match="Invalid value for n."):
            require_int({"n": "1" * 5000}, "n")

    def test_missing_key(self):
        with pytest.raises(InvalidInput, match="Invalid value for missing."):
            require_int({}, "missing")

    @pytest.mark.parametrize("value", ["abc", "", "1.5", "1e2", ".5", 2.5, True, None, "1_000"])
    def test_non_numeric_value(self, value):
        with pytest.raises(InvalidInput):
            require_int({"age": value}, "age")
