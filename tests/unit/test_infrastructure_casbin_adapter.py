"""Unit tests for the Casbin access gate.

Runs the real Enforcer against the shipped model.conf and policy.csv, so
the role hierarchy under test is the one the application loads.

Role hierarchy:
    admin > operator > viewer
"""

from unittest.mock import Mock

import casbin
import pytest

from src.core.config import settings
from src.domain.enums import Action, EntityKind
from src.infrastructure.authorization.casbin_adapter import CasbinAdapter
from tests.fakes import RecordingLogger


@pytest.fixture(scope="module")
def enforcer() -> casbin.Enforcer:
    return casbin.Enforcer(settings.casbin_model_path, settings.casbin_policy_path)


@pytest.fixture
def adapter(enforcer, logger) -> CasbinAdapter:
    return CasbinAdapter(enforcer=enforcer, logger=logger)


@pytest.mark.unit
class TestRolePrivileges:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind", list(EntityKind))
    async def test_viewer_reads_every_kind(self, adapter, kind):
        assert await adapter.check_permission(["viewer"], kind.value, "read")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["create", "update", "delete"])
    async def test_viewer_cannot_write(self, adapter, action):
        assert not await adapter.check_permission(["viewer"], "operations", action)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["read", "create", "update"])
    async def test_operator_inherits_read_and_writes(self, adapter, action):
        assert await adapter.check_permission(["operator"], "apis", action)

    @pytest.mark.asyncio
    async def test_operator_cannot_delete(self, adapter):
        assert not await adapter.check_permission(["operator"], "apis", "delete")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", list(Action))
    async def test_admin_has_every_action(self, adapter, action):
        assert await adapter.check_permission(["admin"], "developers", action.value)

    @pytest.mark.asyncio
    async def test_any_role_suffices(self, adapter):
        assert await adapter.check_permission(["viewer", "admin"], "plans", "delete")

    @pytest.mark.asyncio
    async def test_unknown_role_and_empty_roles_denied(self, adapter):
        assert not await adapter.check_permission(["guest"], "apis", "read")
        assert not await adapter.check_permission([], "apis", "read")

    @pytest.mark.asyncio
    async def test_decision_is_logged(self, adapter, logger):
        await adapter.check_permission(["viewer"], "apis", "read")

        level, message, context = logger.records[-1]
        assert (level, message) == ("info", "authorization_check")
        assert context["allowed"] is True


@pytest.mark.unit
class TestEnforcerFailure:
    @pytest.mark.asyncio
    async def test_enforcer_error_denies(self):
        broken = Mock()
        broken.enforce.side_effect = RuntimeError("policy unavailable")
        logger = RecordingLogger()
        adapter = CasbinAdapter(enforcer=broken, logger=logger)

        allowed = await adapter.check_permission(["admin"], "apis", "delete")

        assert allowed is False
        assert logger.messages("error") == ["authorization_check_error"]
