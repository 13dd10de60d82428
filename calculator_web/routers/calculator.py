from __future__ import annotations

import logging
import math
from typing import Union

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..errors import division_by_zero_response, problem_response
from ..schemas.calculator import (
    CalculationRequest,
    CalculationResponse,
    ErrorResponse,
    Operation,
    ProblemDetails,
    ValidationErrorResponse,
)
from ..services.calculators.engine import CalculatorEngine, DivisionByZeroError

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": Union[ValidationErrorResponse, ErrorResponse], "description": "Malformed request or division by zero"},
    500: {"model": ProblemDetails, "description": "Unexpected calculation failure"},
}

router = APIRouter(prefix="/calculator", tags=["calculator"], responses=ERROR_RESPONSES)


def get_calculator(request: Request) -> CalculatorEngine:
    return request.app.state.calculator_engine


def _reject_zero_divisor(payload: CalculationRequest) -> JSONResponse:
    logger.warning("Division by zero attempted: a=%s b=%s", payload.a, payload.b)
    return division_by_zero_response()


def _calculate(
    operation: Operation,
    payload: CalculationRequest,
    calculator: CalculatorEngine,
) -> CalculationResponse | JSONResponse:
    label = operation.label
    logger.info("%s requested: a=%s b=%s", label, payload.a, payload.b)

    if operation is Operation.DIVIDE and payload.b == 0:
        return _reject_zero_divisor(payload)

    try:
        result = calculator.compute(operation, payload.a, payload.b)
        # JSON has no encoding for inf or nan.
        if not math.isfinite(result):
            logger.error("%s result is not finite (%s): a=%s b=%s", label, result, payload.a, payload.b)
            return problem_response()
        return CalculationResponse(result=result, operation=label)
    except DivisionByZeroError:
        return _reject_zero_divisor(payload)
    except Exception:
        logger.exception("Error performing %s: a=%s b=%s", label.lower(), payload.a, payload.b)
        return problem_response()


@router.post("/add", response_model=CalculationResponse, name="Add", operation_id="Add")
def add(payload: CalculationRequest, calculator: CalculatorEngine = Depends(get_calculator)):
    return _calculate(Operation.ADD, payload, calculator)


@router.post("/subtract", response_model=CalculationResponse, name="Subtract", operation_id="Subtract")
def subtract(payload: CalculationRequest, calculator: CalculatorEngine = Depends(get_calculator)):
    return _calculate(Operation.SUBTRACT, payload, calculator)


@router.post("/multiply", response_model=CalculationResponse, name="Multiply", operation_id="Multiply")
def multiply(payload: CalculationRequest, calculator: CalculatorEngine = Depends(get_calculator)):
    return _calculate(Operation.MULTIPLY, payload, calculator)


@router.post("/divide", response_model=CalculationResponse, name="Divide", operation_id="Divide")
def divide(payload: CalculationRequest, calculator: CalculatorEngine = Depends(get_calculator)):
    return _calculate(Operation.DIVIDE, payload, calculator)
