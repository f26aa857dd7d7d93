"""
Factorial computed on digit-array integers.

The service holds no state: every call starts from one and folds
multiply over 2..n, so one instance can be shared by any number of callers.
"""

import logging

from digitmath.domain.digits import DigitArrayInteger
from digitmath.domain.errors import InvalidInput

logger = logging.getLogger(__name__)


class FactorialService:
    """Calculates n! using DigitArrayInteger multiplication."""

    def calculate(self, n: int) -> DigitArrayInteger:
        """
        Compute the product of all integers from 1 to n inclusive.

        Args:
            n: Non-negative integer. 0! and 1! are both 1.

        Returns:
            DigitArrayInteger holding n!.

        Raises:
            InvalidInput: If n is negative or not an integer.
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise InvalidInput(f"Factorial requires an integer, got {type(n).__name__}.")
        if n < 0:
            raise InvalidInput("Factorial is not defined for negative numbers.")

        logger.debug(f"Calculating {n}!")

        result = DigitArrayInteger.one()
        for i in range(2, n + 1):
            result = result.multiply(DigitArrayInteger.from_int(i))

        logger.debug(f"{n}! has {len(result.digits)} digits")
        return result
