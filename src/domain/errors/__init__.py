"""Domain errors package.

Usage:
    from src.domain.errors import CatalogError, api_not_found
"""

from src.domain.errors.catalog_errors import (
    CatalogError,
    api_not_found,
    developer_already_exists,
    developer_not_found,
    environment_not_found,
    invalid_credentials,
    operation_not_found,
    plan_not_found,
    resource_not_found,
)

__all__ = [
    "CatalogError",
    "api_not_found",
    "developer_already_exists",
    "developer_not_found",
    "environment_not_found",
    "invalid_credentials",
    "operation_not_found",
    "plan_not_found",
    "resource_not_found",
]
