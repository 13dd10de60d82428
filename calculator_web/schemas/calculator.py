"""Schemas for calculator requests, results and error payloads."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import Field

from .base import BaseSchema, utcnow


class Operation(str, Enum):
    """Supported binary operations, keyed by their URL segment."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @property
    def label(self) -> str:
        return OPERATION_LABELS[self]


OPERATION_LABELS: dict[Operation, str] = {
    Operation.ADD: "Addition",
    Operation.SUBTRACT: "Subtraction",
    Operation.MULTIPLY: "Multiplication",
    Operation.DIVIDE: "Division",
}

OperationLabel = Literal["Addition", "Subtraction", "Multiplication", "Division"]


class CalculationRequest(BaseSchema):
    """Operands for a binary calculation."""

    a: float = Field(..., strict=True, allow_inf_nan=False, description="First number for the calculation")
    b: float = Field(..., strict=True, allow_inf_nan=False, description="Second number for the calculation")


class CalculationResponse(BaseSchema):
    """Result of a calculation."""

    result: float = Field(..., description="The result of the calculation")
    operation: OperationLabel = Field(..., description="The operation that was performed")
    timestamp: datetime = Field(default_factory=utcnow, description="UTC time the calculation was performed")


class ErrorResponse(BaseSchema):
    """Client error with a fixed message."""

    error: str


class ValidationErrorResponse(BaseSchema):
    """Client error raised while validating the request body."""

    error: str = Field(default="Invalid request body")
    detail: list[dict[str, Any]] = Field(default_factory=list)


class ProblemDetails(BaseSchema):
    """Opaque server error payload in RFC 7807 shape."""

    type: str = Field(default="https://tools.ietf.org/html/rfc9110#section-15.6.1")
    title: str = Field(default="An error occurred while processing your request.")
    status: int = Field(default=500)
    detail: str = Field(default="Error performing calculation")
