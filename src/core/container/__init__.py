"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_create_operation_handler

The container is organized into modules by concern:
- infrastructure: Core services (db, logging, ids, security)
- repositories: Repository factories and the hierarchy resolver
- catalog_handlers: Api, Resource and Operation handler factories
- directory_handlers: Environment, Plan and Developer handler factories
- authorization: Casbin RBAC
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_id_generator,
    get_logger,
    get_password_service,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_api_repository,
    get_developer_repository,
    get_environment_repository,
    get_hierarchy_resolver,
    get_operation_repository,
    get_plan_repository,
    get_resource_repository,
)

# Catalog handlers
from src.core.container.catalog_handlers import (
    get_create_api_handler,
    get_create_operation_handler,
    get_create_resource_handler,
    get_delete_api_handler,
    get_delete_operation_handler,
    get_delete_resource_handler,
    get_get_api_handler,
    get_get_operation_handler,
    get_get_resource_handler,
    get_list_apis_handler,
    get_list_operations_by_api_handler,
    get_list_operations_handler,
    get_list_resources_handler,
    get_update_api_handler,
    get_update_operation_handler,
    get_update_resource_handler,
)

# Directory handlers
from src.core.container.directory_handlers import (
    get_create_developer_handler,
    get_create_environment_handler,
    get_create_plan_handler,
    get_delete_developer_handler,
    get_delete_environment_handler,
    get_delete_plan_handler,
    get_find_developer_by_credentials_handler,
    get_get_developer_handler,
    get_get_environment_handler,
    get_get_plan_handler,
    get_list_developers_handler,
    get_list_environments_handler,
    get_list_plans_handler,
)

# Authorization (Casbin RBAC)
from src.core.container.authorization import get_authorization, get_enforcer

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_id_generator",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Repositories
    "get_api_repository",
    "get_resource_repository",
    "get_operation_repository",
    "get_environment_repository",
    "get_plan_repository",
    "get_developer_repository",
    "get_hierarchy_resolver",
    # Catalog handlers
    "get_create_api_handler",
    "get_get_api_handler",
    "get_list_apis_handler",
    "get_update_api_handler",
    "get_delete_api_handler",
    "get_create_resource_handler",
    "get_get_resource_handler",
    "get_list_resources_handler",
    "get_update_resource_handler",
    "get_delete_resource_handler",
    "get_create_operation_handler",
    "get_get_operation_handler",
    "get_list_operations_handler",
    "get_list_operations_by_api_handler",
    "get_update_operation_handler",
    "get_delete_operation_handler",
    # Directory handlers
    "get_create_environment_handler",
    "get_get_environment_handler",
    "get_list_environments_handler",
    "get_delete_environment_handler",
    "get_create_plan_handler",
    "get_get_plan_handler",
    "get_list_plans_handler",
    "get_delete_plan_handler",
    "get_create_developer_handler",
    "get_get_developer_handler",
    "get_list_developers_handler",
    "get_delete_developer_handler",
    "get_find_developer_by_credentials_handler",
    # Authorization
    "get_enforcer",
    "get_authorization",
]
