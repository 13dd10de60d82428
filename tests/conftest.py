"""Shared fixtures for the calculator service tests."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from calculator_web.config import Settings
from calculator_web.main import create_app


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    assert parsed.tzinfo is not None
    return parsed.astimezone(timezone.utc)


@pytest.fixture
def parse_timestamp() -> Callable[[str], datetime]:
    """Parse an ISO-8601 timestamp as emitted by the API."""
    return _parse_timestamp


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, environment="local", api_prefix="/api")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    yield TestClient(app)
    app.dependency_overrides.clear()
