"""
Tests for DigitArrayInteger.

Invariants checked:
1. Construction rejects malformed input with InvalidInput
2. Values are always canonical (no leading zeros except "0")
3. add / multiply agree with Python integer arithmetic
4. Identities and commutativity hold
"""

import random

import pytest

from digitmath.domain.digits import DigitArrayInteger
from digitmath.domain.errors import InvalidInput


# =============================================================================
# Construction
# =============================================================================


class TestFromString:
    def test_valid_string(self):
        assert DigitArrayInteger.from_string("123").to_string() == "123"

    def test_digits_stored_least_significant_first(self):
        assert DigitArrayInteger.from_string("123").digits == (3, 2, 1)

    def test_leading_zeros_trimmed(self):
        assert DigitArrayInteger.from_string("007").to_string() == "7"
        assert DigitArrayInteger.from_string("0000").to_string() == "0"

    @pytest.mark.parametrize("value", ["", "12a3", "-5", " 12", "1.5", "١٢"])
    def test_invalid_string(self, value):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_string(value)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_string(123)


class TestFromInt:
    def test_valid_integer(self):
        assert DigitArrayInteger.from_int(456).to_string() == "456"

    def test_zero(self):
        assert DigitArrayInteger.from_int(0) == DigitArrayInteger.zero()

    def test_negative_rejected_with_clear_message(self):
        with pytest.raises(InvalidInput, match="Negative"):
            DigitArrayInteger.from_int(-1)

    def test_beyond_str_conversion_limit(self):
        number = DigitArrayInteger.from_int(10**5000)
        assert number.to_string() == "1" + "0" * 5000
        assert int(number) == 10**5000

    @pytest.mark.parametrize("value", [True, 1.0, "5"])
    def test_non_integer_rejected(self, value):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_int(value)


class TestFromDigits:
    def test_valid_array(self):
        assert DigitArrayInteger.from_digits([3, 2, 1]).to_string() == "123"

    def test_trims_most_significant_zeros(self):
        number = DigitArrayInteger.from_digits([0, 0, 3, 2, 1, 0, 0])
        assert number.to_string() == "12300"
        assert number.digits == (0, 0, 3, 2, 1)

    def test_single_zero_preserved(self):
        assert DigitArrayInteger.from_digits([0]).digits == (0,)
        assert DigitArrayInteger.from_digits([0, 0, 0]).digits == (0,)

    def test_empty_rejected(self):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_digits([])

    @pytest.mark.parametrize("digits", [[1, 2, 10], [-1], [1, 2.0], [True], ["1"]])
    def test_invalid_digit_rejected(self, digits):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_digits(digits)

    def test_string_is_not_a_digit_sequence(self):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_digits("123")

    def test_caller_list_not_aliased(self):
        digits = [3, 2, 1]
        number = DigitArrayInteger.from_digits(digits)
        digits[0] = 9
        assert number.to_string() == "123"


class TestFromJson:
    def test_valid_json_in_natural_order(self):
        assert DigitArrayInteger.from_json("[1, 5]").to_string() == "15"

    def test_leading_zeros_trimmed(self):
        assert DigitArrayInteger.from_json("[0, 0, 4, 2]").to_string() == "42"

    @pytest.mark.parametrize("payload", ['{"a": 1}', "5", '"12"', "[]", "not json", "[1, 2"])
    def test_not_an_array(self, payload):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_json(payload)

    @pytest.mark.parametrize("payload", ['[1, "2"]', "[1, 2.5]", "[true]", "[null]", "[[1]]"])
    def test_non_integer_elements(self, payload):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_json(payload)

    def test_overlong_integer_literal(self):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_json("[" + "1" * 5000 + "]")

    def test_deeply_nested_array(self):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_json("[" * 100000 + "]" * 100000)

    def test_out_of_range_element(self):
        with pytest.raises(InvalidInput):
            DigitArrayInteger.from_json("[1, 12]")

    def test_to_json_round_trip(self):
        number = DigitArrayInteger.from_string("9081")
        assert number.to_json() == "[9,0,8,1]"
        assert DigitArrayInteger.from_json(number.to_json()) == number


class TestDirectConstruction:
    """The dataclass constructor enforces the same invariants."""

    def test_canonical_digits_accepted(self):
        assert DigitArrayInteger((3, 2, 1)).to_string() == "123"

    def test_leading_zero_rejected(self):
        with pytest.raises(InvalidInput):
            DigitArrayInteger((1, 0))

    def test_empty_rejected(self):
        with pytest.raises(InvalidInput):
            DigitArrayInteger(())

    def test_list_copied_into_tuple(self):
        assert DigitArrayInteger([5, 1]).digits == (5, 1)

    def test_immutable(self):
        number = DigitArrayInteger.one()
        with pytest.raises(AttributeError):
            number.digits = (2,)


def test_zero_and_one():
    assert DigitArrayInteger.zero().to_string() == "0"
    assert DigitArrayInteger.one().to_string() == "1"
    assert DigitArrayInteger.zero().is_zero
    assert not DigitArrayInteger.one().is_zero


# =============================================================================
# Arithmetic
# =============================================================================


def _num(value: str) -> DigitArrayInteger:
    return DigitArrayInteger.from_string(value)


class TestAdd:
    def test_without_carry(self):
        assert _num("123").add(_num("456")).to_string() == "579"

    def test_with_carry(self):
        assert _num("999").add(_num("1")).to_string() == "1000"

    def test_different_lengths(self):
        assert _num("5").add(_num("12345")).to_string() == "12350"

    def test_operator(self):
        assert _num("40") + _num("2") == _num("42")

    def test_returns_new_instance(self):
        a = _num("1")
        a.add(_num("1"))
        assert a.to_string() == "1"


class TestMultiply:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("12", "3", "36"),
            ("15", "12", "180"),
            ("999", "0", "0"),
            ("0", "999", "0"),
            ("101", "10", "1010"),
            ("1001", "2002", "2004002"),
            ("99", "99", "9801"),
        ],
    )
    def test_products(self, a, b, expected):
        assert _num(a).multiply(_num(b)).to_string() == expected

    def test_operator(self):
        assert _num("6") * _num("7") == _num("42")

    def test_large_operands(self):
        a = "123456789012345678901234567890"
        b = "987654321098765432109876543210"
        assert _num(a).multiply(_num(b)).to_string() == str(int(a) * int(b))


class TestShift:
    def test_shift_prepends_zeros(self):
        assert _num("12").shift(3).to_string() == "12000"

    def test_shift_by_zero_is_noop(self):
        number = _num("12")
        assert number.shift(0) is number

    def test_shift_of_zero_stays_zero(self):
        assert DigitArrayInteger.zero().shift(4) == DigitArrayInteger.zero()

    def test_negative_shift_rejected(self):
        with pytest.raises(InvalidInput):
            _num("12").shift(-1)


# =============================================================================
# Properties
# =============================================================================


def _sample_values() -> list[int]:
    rng = random.Random(20240601)
    return [0, 1, 9, 10, 99, 100, 1000] + [rng.randrange(0, 10**12) for _ in range(8)]


SAMPLES = _sample_values()


class TestProperties:
    def test_string_round_trip_distinguishes_values(self):
        rendered = {a: DigitArrayInteger.from_int(a).to_string() for a in SAMPLES}
        for a in SAMPLES:
            assert rendered[a] == str(a)
        assert len(set(rendered.values())) == len(set(SAMPLES))

    @pytest.mark.parametrize("a", SAMPLES)
    def test_identities(self, a):
        x = DigitArrayInteger.from_int(a)
        zero = DigitArrayInteger.zero()
        one = DigitArrayInteger.one()

        assert x.add(zero) == x
        assert x.multiply(one) == x
        assert x.multiply(zero) == zero

    def test_commutativity_and_agreement_with_int(self):
        rng = random.Random(7)
        for _ in range(10):
            a, b = rng.randrange(0, 10**8), rng.randrange(0, 10**6)
            x, y = DigitArrayInteger.from_int(a), DigitArrayInteger.from_int(b)

            assert x.add(y) == y.add(x)
            assert x.multiply(y) == y.multiply(x)
            assert int(x.add(y)) == a + b
            assert int(x.multiply(y)) == a * b

    @pytest.mark.parametrize("a", SAMPLES)
    def test_canonical_rendering(self, a):
        rendered = DigitArrayInteger.from_int(a).multiply(DigitArrayInteger.from_int(a)).to_string()
        assert rendered == "0" or not rendered.startswith("0")

    def test_equal_values_hash_equal(self):
        assert hash(_num("00120")) == hash(_num("120"))
        assert {_num("5"), DigitArrayInteger.from_int(5)} == {_num("5")}
