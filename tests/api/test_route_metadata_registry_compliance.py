"""Registry compliance tests - prevent drift and ensure completeness.

These tests ensure the Route Metadata Registry remains the single source of truth
by validating that:
1. All FastAPI routes are registered in the registry (no orphans)
2. All registry entries generate actual routes (no dead entries)
3. Every route passes through the Access Gate
4. Status codes and idempotency agree with the HTTP verb

If these tests fail, it means the registry has drifted from actual implementation.
"""

import re
from dataclasses import replace

import pytest

from src.domain.enums import Action, EntityKind
from src.main import app
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.routes.derivations import (
    build_permission_map,
    ensure_all_routes_gated,
    find_ungated_routes,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    HTTPMethod,
    IdempotencyLevel,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY


# =============================================================================
# Test Class 1: Route Completeness
# =============================================================================


@pytest.mark.unit
class TestRegistryCompleteness:
    """Verify registry and FastAPI routes are in sync."""

    def test_all_routes_are_registered(self):
        """Every FastAPI route must have a registry entry and vice versa."""
        actual_routes = {
            f"{method} {route.path}"
            for route in v1_router.routes
            if hasattr(route, "methods")
            for method in route.methods
            if method not in {"HEAD", "OPTIONS"}
        }
        expected_routes = {
            f"{entry.method.value} /api/v1{entry.path}" for entry in ROUTE_REGISTRY
        }

        assert actual_routes - expected_routes == set(), "routes missing from registry"
        assert expected_routes - actual_routes == set(), "registry entries not routed"

    def test_registry_size(self):
        assert len(ROUTE_REGISTRY) == 28

    def test_operation_ids_are_unique(self):
        operation_ids = [entry.operation_id for entry in ROUTE_REGISTRY]

        assert all(operation_ids)
        assert len(operation_ids) == len(set(operation_ids))

    def test_all_routes_have_tags_and_callable_handlers(self):
        for entry in ROUTE_REGISTRY:
            assert entry.tags, f"{entry.method.value} {entry.path} has no tags"
            assert callable(entry.handler)
            assert entry.resource


# =============================================================================
# Test Class 2: Access Gate Coverage
# =============================================================================


@pytest.mark.unit
class TestAccessGateCoverage:
    """Verify every route is gated by an (entity kind, action) pair."""

    def test_no_ungated_routes(self):
        assert find_ungated_routes(ROUTE_REGISTRY) == []

    def test_permission_map_covers_registry(self):
        table = build_permission_map(ROUTE_REGISTRY)

        assert len(table) == len(ROUTE_REGISTRY)

    @pytest.mark.parametrize(
        ("endpoint", "expected"),
        [
            ("DELETE /api/v1/apis/{api_id}", (EntityKind.APIS, Action.DELETE)),
            ("GET /api/v1/apis", (EntityKind.APIS, Action.READ)),
            (
                "POST /api/v1/apis/{api_id}/resources",
                (EntityKind.RESOURCES, Action.CREATE),
            ),
            (
                "PUT /api/v1/apis/{api_id}/resources/{resource_id}"
                "/operations/{operation_id}",
                (EntityKind.OPERATIONS, Action.UPDATE),
            ),
            (
                "GET /api/v1/apis/{api_id}/operations",
                (EntityKind.OPERATIONS, Action.READ),
            ),
            ("POST /api/v1/developers", (EntityKind.DEVELOPERS, Action.CREATE)),
        ],
    )
    def test_permission_map_entries(self, endpoint, expected):
        assert build_permission_map(ROUTE_REGISTRY)[endpoint] == expected

    @pytest.mark.parametrize(
        ("method", "action"),
        [
            (HTTPMethod.GET, Action.READ),
            (HTTPMethod.POST, Action.CREATE),
            (HTTPMethod.PUT, Action.UPDATE),
            (HTTPMethod.DELETE, Action.DELETE),
        ],
    )
    def test_action_follows_http_verb(self, method, action):
        for entry in ROUTE_REGISTRY:
            if entry.method == method:
                assert entry.auth_policy.action == action

    def test_startup_check_returns_permission_map(self):
        assert ensure_all_routes_gated(ROUTE_REGISTRY) == build_permission_map(
            ROUTE_REGISTRY
        )

    def test_startup_check_rejects_public_route(self):
        opened = replace(
            ROUTE_REGISTRY[0],
            auth_policy=AuthPolicy(level=AuthLevel.PUBLIC, rationale="open"),
        )

        with pytest.raises(RuntimeError, match=re.escape(opened.path)):
            ensure_all_routes_gated([opened, *ROUTE_REGISTRY[1:]])

    def test_permission_policy_requires_kind_and_action(self):
        with pytest.raises(ValueError):
            AuthPolicy(level=AuthLevel.PERMISSION, action=Action.READ)


# =============================================================================
# Test Class 3: Status Codes and Idempotency
# =============================================================================


@pytest.mark.unit
class TestVerbConventions:
    def test_deletes_are_idempotent_no_content(self):
        deletes = [e for e in ROUTE_REGISTRY if e.method == HTTPMethod.DELETE]

        assert deletes
        for entry in deletes:
            assert entry.status_code == 204
            assert entry.idempotency == IdempotencyLevel.IDEMPOTENT

    def test_creates_return_created(self):
        for entry in ROUTE_REGISTRY:
            if entry.method == HTTPMethod.POST:
                assert entry.status_code == 201
                assert entry.idempotency == IdempotencyLevel.NON_IDEMPOTENT

    def test_reads_are_safe(self):
        for entry in ROUTE_REGISTRY:
            if entry.method == HTTPMethod.GET:
                assert entry.idempotency == IdempotencyLevel.SAFE

    def test_openapi_documents_idempotency(self):
        paths = app.openapi()["paths"]

        for entry in ROUTE_REGISTRY:
            documented = paths[f"/api/v1{entry.path}"][entry.method.value.lower()]
            assert documented["x-idempotency"] == entry.idempotency.value
