"""
Shared service access and request guards for the route modules.
"""

import logging

from digitmath.config import get_settings
from digitmath.domain.errors import InvalidInput
from digitmath.services.factorial import FactorialService

logger = logging.getLogger(__name__)


# Service instance (stateless, so one is shared by every request)
_factorial_service: FactorialService | None = None


def get_factorial_service() -> FactorialService:
    """Get or create the factorial service instance."""
    global _factorial_service
    if _factorial_service is None:
        _factorial_service = FactorialService()
    return _factorial_service


def enforce_factorial_limit(n: int) -> None:
    """
    Reject factorial arguments above the configured limit.

    The arithmetic itself is unbounded; the limit only protects the
    web process from requests that would run for a very long time.

    Raises:
        InvalidInput: If max_factorial_n is set and n exceeds it.
    """
    limit = get_settings().max_factorial_n
    if limit is not None and n > limit:
        logger.warning(f"Rejected factorial request: n={n} exceeds limit {limit}")
        raise InvalidInput(f"n must not exceed {limit}.")
