"""Authorization dependency factories.

Casbin RBAC enforcement for the Access Gate. The enforcer loads the model
and the role policy from files on first use and is shared for the life of
the process.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from casbin import Enforcer

    from src.domain.protocols.authorization_protocol import AuthorizationProtocol


# ============================================================================
# Authorization (Casbin RBAC)
# ============================================================================


@lru_cache()
def get_enforcer() -> "Enforcer":
    """Get Casbin Enforcer singleton (app-scoped).

    Created lazily so that test clients which skip the application
    lifespan still get a ready enforcer.

    Returns:
        Enforcer loaded from settings.casbin_model_path and
        settings.casbin_policy_path.
    """
    import casbin

    enforcer = casbin.Enforcer(
        settings.casbin_model_path,
        settings.casbin_policy_path,
    )

    get_logger().info(
        "casbin_enforcer_initialized",
        model_path=settings.casbin_model_path,
        policy_path=settings.casbin_policy_path,
    )

    return enforcer


def get_authorization() -> "AuthorizationProtocol":
    """Get authorization adapter.

    Returns:
        CasbinAdapter implementing AuthorizationProtocol.

    Usage:
        @router.get("/apis")
        async def list_apis(
            auth: AuthorizationProtocol = Depends(get_authorization),
            user: CurrentUser = Depends(get_current_user),
        ):
            if not await auth.check_permission(user.roles, "apis", "read"):
                raise HTTPException(403, "Permission denied")
            ...
    """
    from src.infrastructure.authorization.casbin_adapter import CasbinAdapter

    return CasbinAdapter(enforcer=get_enforcer(), logger=get_logger())
