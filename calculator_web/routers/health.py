from __future__ import annotations

from fastapi import APIRouter

from ..schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, name="HealthCheck", operation_id="HealthCheck")
async def health() -> HealthResponse:
    return HealthResponse()
