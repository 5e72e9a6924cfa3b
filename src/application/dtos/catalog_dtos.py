"""Catalog DTOs (Data Transfer Objects).

Result dataclasses returned by catalog command and query handlers. Each is
built explicitly from its entity by a ``from_entity`` classmethod so the
presentation layer never sees domain entities (or password hashes).

DTOs:
    - ApiResult
    - ResourceResult
    - OperationResult: includes the Operation's hierarchical location
    - EnvironmentResult
    - PlanResult
    - DeveloperResult: never carries the credential
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.entities import Api, Developer, Environment, Operation, Plan, Resource


@dataclass(frozen=True, kw_only=True)
class ApiResult:
    """Api as returned to callers."""

    id: str
    name: str
    version: str
    base_path: str
    description: str | None
    cors: bool
    status: str
    environment_ids: list[str]
    plan_ids: list[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, api: Api) -> "ApiResult":
        return cls(
            id=api.id,
            name=api.name,
            version=api.version,
            base_path=api.base_path,
            description=api.description,
            cors=api.cors,
            status=api.status.value,
            environment_ids=list(api.environment_ids),
            plan_ids=list(api.plan_ids),
            created_at=api.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class ResourceResult:
    """Resource as returned to callers."""

    id: str
    api_id: str
    name: str
    description: str | None
    created_at: datetime

    @classmethod
    def from_entity(cls, resource: Resource) -> "ResourceResult":
        return cls(
            id=resource.id,
            api_id=resource.api_id,
            name=resource.name,
            description=resource.description,
            created_at=resource.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class OperationResult:
    """Operation as returned to callers.

    Attributes:
        location: Hierarchical path of the Operation, relative to the API
            version prefix (``/apis/{api_id}/resources/{resource_id}/operations/{id}``).
    """

    id: str
    api_id: str
    resource_id: str
    method: str
    path: str
    description: str | None
    created_at: datetime
    location: str

    @classmethod
    def from_entity(cls, operation: Operation) -> "OperationResult":
        return cls(
            id=operation.id,
            api_id=operation.api_id,
            resource_id=operation.resource_id,
            method=operation.method.value,
            path=operation.path,
            description=operation.description,
            created_at=operation.created_at,
            location=operation.location,
        )


@dataclass(frozen=True, kw_only=True)
class EnvironmentResult:
    """Environment as returned to callers."""

    id: str
    name: str
    inbound_url: str
    outbound_url: str
    description: str | None
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, environment: Environment) -> "EnvironmentResult":
        return cls(
            id=environment.id,
            name=environment.name,
            inbound_url=environment.inbound_url,
            outbound_url=environment.outbound_url,
            description=environment.description,
            status=environment.status.value,
            created_at=environment.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class PlanResult:
    """Plan as returned to callers."""

    id: str
    name: str
    description: str | None
    is_default: bool
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, plan: Plan) -> "PlanResult":
        return cls(
            id=plan.id,
            name=plan.name,
            description=plan.description,
            is_default=plan.is_default,
            status=plan.status.value,
            created_at=plan.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class DeveloperResult:
    """Developer as returned to callers (no credential)."""

    id: str
    name: str
    email: str
    status: str
    created_at: datetime

    @classmethod
    def from_entity(cls, developer: Developer) -> "DeveloperResult":
        return cls(
            id=developer.id,
            name=developer.name,
            email=developer.email,
            status=developer.status.value,
            created_at=developer.created_at,
        )
