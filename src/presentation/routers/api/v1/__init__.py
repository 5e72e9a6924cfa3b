"""API v1 routers.

RESTful resource-based endpoints for the gateway catalog. All routes are
generated from the Route Metadata Registry at startup; ROUTE_REGISTRY in
routes/registry.py is the complete route catalog.

Resources:
    /api/v1/apis                                              - Api management
    /api/v1/apis/{api_id}/resources                           - Resource management
    /api/v1/apis/{api_id}/resources/{resource_id}/operations  - Operation management
    /api/v1/apis/{api_id}/operations                          - Operations of an Api
    /api/v1/environments                                      - Environments
    /api/v1/plans                                             - Plans
    /api/v1/developers                                        - Developers
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

# Create v1 router and generate all routes from registry
v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
