"""Prometheus metrics endpoint.

Prometheus pulls GET /metrics on its scrape interval and gets plain text
in the exposition format (not JSON).  The route is hidden from the
OpenAPI docs; restrict it at the ingress in production.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["observability"])


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
