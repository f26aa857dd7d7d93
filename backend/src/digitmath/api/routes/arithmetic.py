"""
JSON arithmetic endpoints.

InvalidInput raised here is turned into a 400 response by the
application-level exception handler in digitmath.main.
"""

import logging

from fastapi import APIRouter, status

from digitmath.api.dependencies import enforce_factorial_limit, get_factorial_service
from digitmath.api.schemas import (
    BinaryOperationRequest,
    ErrorResponse,
    FactorialRequest,
    OperationEnum,
    OperationResponse,
)
from digitmath.domain.digits import DigitArrayInteger

logger = logging.getLogger(__name__)

router = APIRouter(tags=["arithmetic"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid operand"},
    422: {"description": "Validation error"},
}


def _respond(operation: OperationEnum, value: DigitArrayInteger) -> OperationResponse:
    return OperationResponse(
        operation=operation,
        result=value.to_string(),
        digits=len(value.digits),
    )


# Plain def handlers: FastAPI runs them in the threadpool


@router.post(
    "/add",
    response_model=OperationResponse,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
)
def add(request: BinaryOperationRequest) -> OperationResponse:
    """Add two non-negative integers given as decimal strings."""
    a = DigitArrayInteger.from_string(request.a)
    b = DigitArrayInteger.from_string(request.b)
    return _respond(OperationEnum.ADD, a.add(b))


@router.post(
    "/multiply",
    response_model=OperationResponse,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
)
def multiply(request: BinaryOperationRequest) -> OperationResponse:
    """
    Multiply two non-negative integers given as decimal strings.

    Uses repeated addition, so cost grows with the digit values of ``b``
    as well as the length of both operands.
    """
    a = DigitArrayInteger.from_string(request.a)
    b = DigitArrayInteger.from_string(request.b)
    return _respond(OperationEnum.MULTIPLY, a.multiply(b))


@router.post(
    "/factorial",
    response_model=OperationResponse,
    status_code=status.HTTP_200_OK,
    responses=_ERROR_RESPONSES,
)
def factorial(request: FactorialRequest) -> OperationResponse:
    """Compute n! for a non-negative integer n."""
    enforce_factorial_limit(request.n)
    result = get_factorial_service().calculate(request.n)
    logger.info(f"Computed {request.n}! ({len(result.digits)} digits)")
    return _respond(OperationEnum.FACTORIAL, result)
