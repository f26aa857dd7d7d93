"""
Digit-array representation of non-negative decimal integers.

A value is stored as a tuple of base-10 digits, least significant first:
123 is kept as (3, 2, 1). Arithmetic uses addition as its only primitive;
multiplication is repeated addition combined with positional shifting.

Design Decisions:
- Frozen dataclass, so every operation returns a new value
- Invariants are checked in __post_init__, so a malformed value is never
  observable no matter how the instance was created
- Named constructors (from_string, from_int, from_digits, from_json) are the
  supported way in; they normalize input before handing it to the dataclass
- add and multiply cannot fail: validity is established once, at construction
"""

import json
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .errors import InvalidInput

BASE = 10

# ASCII only: str.isdigit() and \d would also accept other Unicode digits
_DECIMAL_PATTERN = re.compile(r"[0-9]+")


def _is_integer(value: Any) -> bool:
    """True for real integers; bool is excluded even though it subclasses int."""
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_digits(digits: Sequence[Any]) -> None:
    """Ensure the sequence is non-empty and holds only digits 0-9."""
    if len(digits) == 0:
        raise InvalidInput("Digit array cannot be empty.")

    for digit in digits:
        if not _is_integer(digit) or not 0 <= digit < BASE:
            raise InvalidInput("Digit array must contain only integers between 0 and 9.")


def _trim_leading_zeros(digits: list[int]) -> list[int]:
    """
    Drop redundant most-significant zeros.

    In least-significant-first storage these are trailing elements.
    A lone [0] is kept as the representation of zero.
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits


@dataclass(frozen=True, repr=False)
class DigitArrayInteger:
    """
    Non-negative integer stored as an array of decimal digits.

    Attributes:
        digits: Digits in reverse order (least significant first).
            Never empty, and the last element is non-zero unless the
            value is zero itself.
    """
    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate digit range and canonical form."""
        if not isinstance(self.digits, tuple):
            # Take a private copy so later changes to the caller's list are not seen
            object.__setattr__(self, "digits", tuple(self.digits))

        _validate_digits(self.digits)

        if len(self.digits) > 1 and self.digits[-1] == 0:
            raise InvalidInput("Digit array must not contain leading zeros.")

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_string(cls, number: str) -> "DigitArrayInteger":
        """
        Create a value from its decimal string representation.

        Args:
            number: Non-empty string of ASCII digits, most significant first.
                Leading zeros are accepted and dropped ("007" is 7).

        Raises:
            InvalidInput: If the string is empty or contains anything but 0-9.
        """
        if not isinstance(number, str) or not _DECIMAL_PATTERN.fullmatch(number):
            raise InvalidInput("Invalid number: only the digits 0-9 are allowed.")

        return cls.from_digits([int(char) for char in reversed(number)])

    @classmethod
    def from_int(cls, number: int) -> "DigitArrayInteger":
        """
        Create a value from a machine integer.

        Raises:
            InvalidInput: If the number is negative or not an integer.
        """
        if not _is_integer(number):
            raise InvalidInput(f"Expected an integer, got {type(number).__name__}.")
        if number < 0:
            raise InvalidInput("Negative numbers are not supported.")

        # str() refuses integers over 4300 digits
        digits: list[int] = []
        while True:
            number, digit = divmod(number, BASE)
            digits.append(digit)
            if number == 0:
                break

        return cls(tuple(digits))

    @classmethod
    def from_digits(cls, digits: Sequence[int]) -> "DigitArrayInteger":
        """
        Create a value from digits in reverse order (least significant first).

        Most-significant zeros are trimmed: [0, 0, 3, 2, 1, 0, 0] is 12300.

        Raises:
            InvalidInput: If the sequence is empty or holds a non-digit.
        """
        if not isinstance(digits, Sequence) or isinstance(digits, (str, bytes)):
            raise InvalidInput("Digit array must be a sequence of integers.")

        _validate_digits(digits)
        return cls(tuple(_trim_leading_zeros(list(digits))))

    @classmethod
    def from_json(cls, payload: str) -> "DigitArrayInteger":
        """
        Create a value from a JSON array of digits in natural order.

        The array is read most significant first, as a human writes the
        number: "[1, 5]" is 15.

        Raises:
            InvalidInput: If the payload is not a non-empty JSON array of integers.
        """
        try:
            data = json.loads(payload)
        except (TypeError, ValueError, RecursionError) as exc:
            raise InvalidInput("Invalid JSON array.") from exc

        if not isinstance(data, list) or not data:
            raise InvalidInput("Invalid JSON array.")

        if not all(_is_integer(value) for value in data):
            raise InvalidInput("JSON array must contain only integers.")

        return cls.from_digits(data[::-1])

    @classmethod
    def zero(cls) -> "DigitArrayInteger":
        """The additive identity."""
        return cls((0,))

    @classmethod
    def one(cls) -> "DigitArrayInteger":
        """The multiplicative identity."""
        return cls((1,))

    # =========================================================================
    # Arithmetic
    # =========================================================================

    @property
    def is_zero(self) -> bool:
        return self.digits == (0,)

    def add(self, other: "DigitArrayInteger") -> "DigitArrayInteger":
        """
        Grade-school addition with carry propagation.

        Walks both digit arrays from the least significant position and keeps
        going while either array has digits left or a carry is pending.
        """
        result: list[int] = []
        carry = 0
        longest = max(len(self.digits), len(other.digits))

        position = 0
        while position < longest or carry > 0:
            digit_a = self.digits[position] if position < len(self.digits) else 0
            digit_b = other.digits[position] if position < len(other.digits) else 0

            total = digit_a + digit_b + carry
            result.append(total % BASE)
            carry = total // BASE
            position += 1

        return DigitArrayInteger(tuple(_trim_leading_zeros(result)))

    def multiply(self, other: "DigitArrayInteger") -> "DigitArrayInteger":
        """
        Multiply using addition only.

        For every non-zero digit d at position p of ``other``, this value is
        added to an accumulator d times, the partial product is shifted left
        by p positions, and the result is added to the running total.
        """
        result = DigitArrayInteger.zero()

        for position, digit in enumerate(other.digits):
            if digit == 0:
                continue

            partial = DigitArrayInteger.zero()
            for _ in range(digit):
                partial = partial.add(self)

            result = result.add(partial.shift(position))

        return result

    def shift(self, positions: int) -> "DigitArrayInteger":
        """
        Multiply by 10 ** positions by prepending zero digits.

        Raises:
            InvalidInput: If positions is negative.
        """
        if positions < 0:
            raise InvalidInput("Shift positions must be non-negative.")
        if positions == 0 or self.is_zero:
            return self

        return DigitArrayInteger((0,) * positions + self.digits)

    # =========================================================================
    # Rendering
    # =========================================================================

    def to_string(self) -> str:
        """Canonical decimal string, most significant digit first."""
        return "".join(str(digit) for digit in reversed(self.digits))

    def to_json(self) -> str:
        """JSON array of digits in natural order, as accepted by from_json."""
        return json.dumps(list(reversed(self.digits)), separators=(",", ":"))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DigitArrayInteger('{self.to_string()}')"

    def __int__(self) -> int:
        value = 0
        for digit in reversed(self.digits):
            value = value * BASE + digit
        return value

    def __add__(self, other: object) -> "DigitArrayInteger":
        if not isinstance(other, DigitArrayInteger):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: object) -> "DigitArrayInteger":
        if not isinstance(other, DigitArrayInteger):
            return NotImplemented
        return self.multiply(other)
