from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from servicehub.api.auth import router as auth_router
from servicehub.api.errors import install_error_handlers
from servicehub.api.health import router as health_router
from servicehub.api.invite import router as invite_router
from servicehub.api.metrics_endpoint import router as metrics_router
from servicehub.api.organization import router as organization_router
from servicehub.api.users import router as users_router
from servicehub.core.config import SETTINGS
from servicehub.core.logging import setup_logging
from servicehub.db.engine import lifespan_db
from servicehub.middleware.metrics import MetricsMiddleware
from servicehub.middleware.request_context import (
    RequestContextMiddleware,
    install_request_id_filter,
)

# Configure logging before anything else runs.
setup_logging(SETTINGS.log_level, json_format=SETTINGS.log_json)
install_request_id_filter()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    async with lifespan_db():
        yield


app = FastAPI(
    title="ServiceHub API",
    description="Internship backend APIs",
    version="1.0",
    lifespan=lifespan,
    docs_url="/api-docs",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middleware execution order: last-added runs first (outermost layer).
# RequestContext (outermost) → Metrics → CORS → route handler
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestContextMiddleware)

install_error_handlers(app)

app.include_router(metrics_router)
app.include_router(health_router)
app.include_router(users_router)
app.include_router(auth_router)
app.include_router(organization_router)
app.include_router(invite_router)

logger.info(
    "servicehub started  env=%s log_level=%s port=%d store=%s",
    SETTINGS.app_env,
    SETTINGS.log_level,
    SETTINGS.port,
    "postgres" if SETTINGS.database_url else "memory",
)
