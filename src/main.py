"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance and wires the
middleware, exception handlers and routers of the gateway control plane.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_enforcer, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import (
    TRACE_HEADER,
    TraceMiddleware,
)
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers
from src.presentation.routers.api.v1.routes.derivations import ensure_all_routes_gated
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Load the Casbin policy and check every v1 route is gated,
      so a bad policy file or an ungated route fails fast
    - Shutdown: Dispose the database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    get_enforcer()
    permission_map = ensure_all_routes_gated(ROUTE_REGISTRY)
    logger.info(
        "application_started",
        gated_routes=len(permission_map),
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await get_database().close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Management API for gateway Apis, Resources and Operations",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[TRACE_HEADER, "Location"],
)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

# Non-versioned system endpoints, then API v1 (generated from ROUTE_REGISTRY)
app.include_router(system_router)
app.include_router(v1_router)
