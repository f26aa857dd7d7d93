"""
Domain package - Core arithmetic with no external dependencies.

This package contains the digit-array integer value type and the
input validation rules that guard every way of constructing one.
"""

from .digits import DigitArrayInteger
from .errors import InvalidInput

__all__ = ["DigitArrayInteger", "InvalidInput"]
