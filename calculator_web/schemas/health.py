from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from .base import BaseSchema, utcnow


class HealthResponse(BaseSchema):
    """Liveness probe payload."""

    status: Literal["healthy"] = Field(default="healthy")
    timestamp: datetime = Field(default_factory=utcnow)
