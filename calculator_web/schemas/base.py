"""Common pydantic schema utilities."""
from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """Base schema with shared config."""

    class Config:
        populate_by_name = True
        frozen = True
