"""
Pydantic schemas for API request/response validation.

Numbers travel as decimal strings so values of any length survive JSON
round-trips without precision loss.
"""

from enum import Enum

from pydantic import BaseModel, Field


class OperationEnum(str, Enum):
    """Arithmetic operations exposed by the API."""
    ADD = "add"
    MULTIPLY = "multiply"
    FACTORIAL = "factorial"


# =============================================================================
# Request Schemas
# =============================================================================

class BinaryOperationRequest(BaseModel):
    """Request carrying two operands as decimal strings."""
    a: str = Field(
        ...,
        description="First operand, digits 0-9 only",
        examples=["15"],
    )
    b: str = Field(
        ...,
        description="Second operand, digits 0-9 only",
        examples=["12"],
    )


class FactorialRequest(BaseModel):
    """Request to compute n!."""
    n: int = Field(
        ...,
        description="Non-negative integer",
        examples=[5],
    )


# =============================================================================
# Response Schemas
# =============================================================================

class OperationResponse(BaseModel):
    """Result of an arithmetic operation."""
    operation: OperationEnum
    result: str
    digits: int = Field(description="Number of decimal digits in the result")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: str | None = None
