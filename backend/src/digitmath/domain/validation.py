"""
Validation rules for raw request input.

Pure functions that pull typed values out of an opaque key/value mapping
(a submitted form, a parsed query, a plain dict in tests). No side effects,
no I/O. Each rule either returns the typed value or raises InvalidInput.
"""

import re
from collections.abc import Mapping
from typing import Any

from .errors import InvalidInput

# Integral decimal notation: "42", "-3", "5.0", "5." (no exponent)
_INTEGER_PATTERN = re.compile(r"([+-]?[0-9]+)(?:\.0*)?")


def _invalid(key: str) -> InvalidInput:
    return InvalidInput(f"Invalid value for {key}.")


def require_string(data: Mapping[str, Any], key: str) -> str:
    """
    Return the string stored under ``key``.

    Raises:
        InvalidInput: If the key is missing or its value is not a string.
    """
    if key not in data or not isinstance(data[key], str):
        raise _invalid(key)

    return data[key]


def require_int(data: Mapping[str, Any], key: str) -> int:
    """
    Return the integer stored under ``key``.

    Accepts integers, floats with an integral value, and strings in
    integral decimal notation such as "42", " 7 ", "-3" or "5.0".
    Exponent notation ("1e2") is rejected. Sign checks are left to the caller.

    Raises:
        InvalidInput: If the key is missing or its value is not numeric.
    """
    if key not in data:
        raise _invalid(key)

    value = data[key]

    if isinstance(value, bool):
        raise _invalid(key)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        match = _INTEGER_PATTERN.fullmatch(value.strip())
        if match:
            try:
                return int(match.group(1))
            except ValueError as exc:
                # int() refuses strings over 4300 digits
                raise _invalid(key) from exc

    raise _invalid(key)
