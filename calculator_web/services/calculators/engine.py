"""Arithmetic engine behind the calculator endpoints."""
from __future__ import annotations

import logging
from typing import Callable

from ...schemas.calculator import Operation

logger = logging.getLogger(__name__)


class CalculatorError(Exception):
    """Base error for calculator failures."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Raised when the divisor is exactly zero."""


class CalculatorEngine:
    """Stateless implementation of the four binary operations.

    Results follow plain IEEE double arithmetic, so finite operands may
    still produce ``inf``; callers that need a finite value check for it.
    """

    def __init__(self) -> None:
        self._dispatch: dict[Operation, Callable[[float, float], float]] = {
            Operation.ADD: self.add,
            Operation.SUBTRACT: self.subtract,
            Operation.MULTIPLY: self.multiply,
            Operation.DIVIDE: self.divide,
        }

    def compute(self, operation: Operation, a: float, b: float) -> float:
        return self._dispatch[Operation(operation)](a, b)

    def add(self, a: float, b: float) -> float:
        result = a + b
        logger.debug("Addition: %s + %s = %s", a, b, result)
        return result

    def subtract(self, a: float, b: float) -> float:
        result = a - b
        logger.debug("Subtraction: %s - %s = %s", a, b, result)
        return result

    def multiply(self, a: float, b: float) -> float:
        result = a * b
        logger.debug("Multiplication: %s * %s = %s", a, b, result)
        return result

    def divide(self, a: float, b: float) -> float:
        """Divide ``a`` by ``b``.

        Only an exact zero divisor is rejected; any other value, however
        small, goes through ordinary IEEE division.
        """
        if b == 0:
            raise DivisionByZeroError("Cannot divide by zero")
        result = a / b
        logger.debug("Division: %s / %s = %s", a, b, result)
        return result
