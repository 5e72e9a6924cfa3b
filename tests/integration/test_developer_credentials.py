"""Integration tests for developer registration and credential checks.

Runs the container-built handlers against a real database with the real
bcrypt service, so the stored hash is the one the credential query verifies.

Tests cover:
- Register, then authenticate with the same password (case-insensitive email)
- Wrong password and unknown email give the same error
"""

import pytest

from src.application.commands import CreateDeveloper
from src.application.queries import FindDeveloperByCredentials
from src.core.container import (
    get_create_developer_handler,
    get_find_developer_by_credentials_handler,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.persistence.repositories import DeveloperRepository


@pytest.mark.integration
class TestDeveloperCredentials:
    @pytest.mark.asyncio
    async def test_register_then_authenticate(self, session):
        repo = DeveloperRepository(session)
        create = await get_create_developer_handler(developer_repo=repo)
        find = await get_find_developer_by_credentials_handler(developer_repo=repo)

        created = await create.handle(
            CreateDeveloper(name="Ada", email="ada@example.com", password="s3cretpass")
        )
        result = await find.handle(
            FindDeveloperByCredentials(email="ADA@example.com", password="s3cretpass")
        )
        stored = await repo.find_by_email("ada@example.com")

        assert isinstance(created, Success)
        assert isinstance(result, Success)
        assert result.value.id == created.value.id
        assert stored.password_hash.startswith("$2b$")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("email", "password"),
        [("ada@example.com", "wrong-pass"), ("nobody@example.com", "s3cretpass")],
    )
    async def test_rejections_are_indistinguishable(self, session, email, password):
        repo = DeveloperRepository(session)
        create = await get_create_developer_handler(developer_repo=repo)
        find = await get_find_developer_by_credentials_handler(developer_repo=repo)
        await create.handle(
            CreateDeveloper(name="Ada", email="ada@example.com", password="s3cretpass")
        )

        result = await find.handle(
            FindDeveloperByCredentials(email=email, password=password)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
