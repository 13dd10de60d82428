"""Entry point for the calculator FastAPI service."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .errors import register_exception_handlers
from .routers import calculator, health, pages
from .services.calculators.engine import CalculatorEngine
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)

    logger.info("Starting calculator service in %s mode", settings.environment)
    if settings.docs_enabled:
        logger.info("Interactive API docs available at %s", app.docs_url)

    yield

    logger.info("Calculator service stopped")


def with_prefix(prefix: str, path: str) -> str:
    prefix = prefix.rstrip("/")
    if not prefix:
        return path
    return f"{prefix}{path}"


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    docs_enabled = settings.docs_enabled
    app = FastAPI(
        title=settings.project_name,
        description="Add, subtract, multiply and divide two numbers over JSON.",
        debug=settings.debug,
        lifespan=lifespan,
        docs_url=with_prefix(settings.api_prefix, "/docs") if docs_enabled else None,
        redoc_url=with_prefix(settings.api_prefix, "/redoc") if docs_enabled else None,
        openapi_url=with_prefix(settings.api_prefix, "/openapi.json") if docs_enabled else None,
    )
    app.state.settings = settings
    app.state.calculator_engine = CalculatorEngine()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    api_router = APIRouter()
    api_router.include_router(calculator.router)

    app.include_router(api_router, prefix=settings.api_prefix.rstrip("/"))
    app.include_router(health.router)
    app.include_router(pages.router)
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn using the configured address."""
    settings = get_settings()
    uvicorn.run(
        "calculator_web.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
