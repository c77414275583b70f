"""Health and readiness endpoints.

  /health (liveness): answers as long as the process can serve a request.
  /ready (readiness): also round-trips the database when one is
    configured; 503 tells the load balancer to stop routing here without
    restarting the container.
"""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Response
from pydantic import BaseModel

from servicehub.db import engine as db_engine

router = APIRouter(tags=["health"])


class HealthOut(BaseModel):
    status: str
    message: str
    timestamp: str


@router.get("/health", response_model=HealthOut)
async def health() -> HealthOut:
    return HealthOut(
        status="ok",
        message="Server running",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def ready() -> Response:
    if not await db_engine.ping():
        return Response(status_code=503)
    return Response(status_code=200)
