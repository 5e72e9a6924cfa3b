"""Commands - Write operations that change catalog state.

Commands are immutable dataclasses with imperative names (CreateOperation,
DeleteApi). Each has a handler in commands/handlers/.
"""

from src.application.commands.api_commands import CreateApi, DeleteApi, UpdateApi
from src.application.commands.developer_commands import (
    CreateDeveloper,
    DeleteDeveloper,
)
from src.application.commands.environment_commands import (
    CreateEnvironment,
    DeleteEnvironment,
)
from src.application.commands.operation_commands import (
    CreateOperation,
    DeleteOperation,
    UpdateOperation,
)
from src.application.commands.plan_commands import CreatePlan, DeletePlan
from src.application.commands.resource_commands import (
    CreateResource,
    DeleteResource,
    UpdateResource,
)

__all__ = [
    "CreateApi",
    "CreateDeveloper",
    "CreateEnvironment",
    "CreateOperation",
    "CreatePlan",
    "CreateResource",
    "DeleteApi",
    "DeleteDeveloper",
    "DeleteEnvironment",
    "DeleteOperation",
    "DeletePlan",
    "DeleteResource",
    "UpdateApi",
    "UpdateOperation",
    "UpdateResource",
]
