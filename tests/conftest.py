"""Pytest configuration shared by every test layer.

This configuration ensures:
1. Settings load in testing mode (JSON logs, fast bcrypt) before any
   application module is imported
2. Unit tests get in-memory repositories and a recording logger
3. Integration tests get a fresh in-memory SQLite database per test
4. API tests get the real app wired to a per-test SQLite file
"""

import asyncio
import os
from collections.abc import AsyncGenerator, Callable, Generator
from pathlib import Path

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from src.application.services.hierarchy_resolver import HierarchyResolver  # noqa: E402
from src.core.container import (  # noqa: E402
    get_database,
    get_db_session,
    get_token_service,
)
from src.infrastructure.persistence.database import Database  # noqa: E402
from tests.fakes import (  # noqa: E402
    InMemoryApiRepository,
    InMemoryDeveloperRepository,
    InMemoryEnvironmentRepository,
    InMemoryOperationRepository,
    InMemoryPlanRepository,
    InMemoryResourceRepository,
    RecordingLogger,
    SequentialIdGenerator,
)


# =============================================================================
# Unit test doubles
# =============================================================================


@pytest.fixture
def api_repo() -> InMemoryApiRepository:
    return InMemoryApiRepository()


@pytest.fixture
def resource_repo() -> InMemoryResourceRepository:
    return InMemoryResourceRepository()


@pytest.fixture
def operation_repo() -> InMemoryOperationRepository:
    return InMemoryOperationRepository()


@pytest.fixture
def environment_repo() -> InMemoryEnvironmentRepository:
    return InMemoryEnvironmentRepository()


@pytest.fixture
def plan_repo() -> InMemoryPlanRepository:
    return InMemoryPlanRepository()


@pytest.fixture
def developer_repo() -> InMemoryDeveloperRepository:
    return InMemoryDeveloperRepository()


@pytest.fixture
def resolver(
    api_repo: InMemoryApiRepository,
    resource_repo: InMemoryResourceRepository,
    operation_repo: InMemoryOperationRepository,
) -> HierarchyResolver:
    return HierarchyResolver(api_repo, resource_repo, operation_repo)


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


# =============================================================================
# Integration: in-memory SQLite
# =============================================================================


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory database with the catalog schema."""
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """One unit of work against the test database (commits on exit)."""
    async with database.get_session() as db_session:
        yield db_session


# =============================================================================
# API: real app + per-test SQLite file
# =============================================================================


async def _create_schema(db: Database) -> None:
    await db.create_all()
    await db.close()


@pytest.fixture
def client(tmp_path: Path) -> Generator[TestClient, None, None]:
    """TestClient bound to a fresh SQLite file.

    Each request gets its own session from the test database, exactly as
    get_db_session does in production.
    """
    from src.main import app

    test_db = Database(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    asyncio.run(_create_schema(test_db))

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with test_db.get_session() as db_session:
            yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_database] = lambda: test_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """Build an Authorization header for a caller holding ``roles``."""

    def _headers(*roles: str) -> dict[str, str]:
        token = get_token_service().generate_access_token(
            user_id="ops-1",
            email="ops@example.com",
            roles=list(roles),
        )
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def admin_headers(auth_headers: Callable[..., dict[str, str]]) -> dict[str, str]:
    return auth_headers("admin")


@pytest.fixture
def operator_headers(auth_headers: Callable[..., dict[str, str]]) -> dict[str, str]:
    return auth_headers("operator")


@pytest.fixture
def viewer_headers(auth_headers: Callable[..., dict[str, str]]) -> dict[str, str]:
    return auth_headers("viewer")
