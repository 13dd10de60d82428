"""Error payload builders and application-wide exception handlers."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .schemas.calculator import ErrorResponse, ProblemDetails, ValidationErrorResponse

logger = logging.getLogger(__name__)

DIVISION_BY_ZERO_MESSAGE = "Division by zero is not allowed"
PROBLEM_MEDIA_TYPE = "application/problem+json"


def division_by_zero_response() -> JSONResponse:
    body = ErrorResponse(error=DIVISION_BY_ZERO_MESSAGE)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def problem_response(detail: str = "Error performing calculation") -> JSONResponse:
    """Build a 500 response that carries no internal exception details."""
    body = ProblemDetails(detail=detail)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies are client errors; report them as 400 rather than FastAPI's 422.
    errors = exc.errors()
    logger.info("Rejected malformed request to %s: %d validation error(s)", request.url.path, len(errors))
    body = ValidationErrorResponse(detail=jsonable_encoder(errors, exclude={"input", "url"}))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def body_parsing_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # Undecodable calculator bodies (bad UTF-8, oversized int literals) surface as a bare 400.
    if exc.status_code == status.HTTP_400_BAD_REQUEST and "/calculator/" in request.url.path:
        logger.info("Rejected unparsable request body to %s: %s", request.url.path, exc.detail)
        body = ValidationErrorResponse(detail=[{"type": "body_parsing", "loc": ["body"], "msg": str(exc.detail)}])
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())
    return await http_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, body_parsing_handler)
