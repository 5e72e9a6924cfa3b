"""Queries - Read operations that fetch catalog data.

Queries are immutable dataclasses with question-like names (GetOperation,
ListApis). They NEVER change state.
"""

from src.application.queries.api_queries import GetApi, ListApis
from src.application.queries.developer_queries import (
    FindDeveloperByCredentials,
    GetDeveloper,
    ListDevelopers,
)
from src.application.queries.environment_queries import (
    GetEnvironment,
    ListEnvironments,
)
from src.application.queries.operation_queries import (
    GetOperation,
    ListOperations,
    ListOperationsByApi,
)
from src.application.queries.plan_queries import GetPlan, ListPlans
from src.application.queries.resource_queries import GetResource, ListResources

__all__ = [
    "FindDeveloperByCredentials",
    "GetApi",
    "GetDeveloper",
    "GetEnvironment",
    "GetOperation",
    "GetPlan",
    "GetResource",
    "ListApis",
    "ListDevelopers",
    "ListEnvironments",
    "ListOperations",
    "ListOperationsByApi",
    "ListPlans",
    "ListResources",
]
