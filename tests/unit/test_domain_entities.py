"""Unit tests for catalog domain entities.

Tests cover:
- Field normalisation in __post_init__
- InvalidFieldError for rejected fields
- Hierarchy helpers (location, belongs_to)
- dataclasses.replace re-running validation
"""

from dataclasses import replace

import pytest

from src.domain.entities import Api, Developer, Environment, Operation, Plan, Resource
from src.domain.enums import HttpMethod, Status
from src.domain.validators import InvalidFieldError


@pytest.mark.unit
class TestApi:
    def test_defaults(self):
        api = Api(id="a1", name="Store", version="v1", base_path="/store")

        assert api.status == Status.ACTIVE
        assert api.cors is True
        assert api.environment_ids == []
        assert api.created_at.tzinfo is not None
        assert api.is_active()

    def test_blank_description_normalised(self):
        api = Api(id="a1", name="Store", version="v1", base_path="/s", description="")

        assert api.description is None

    def test_invalid_base_path(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            Api(id="a1", name="Store", version="v1", base_path="store")

        assert exc_info.value.field == "base_path"

    def test_duplicate_plan_reference(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            Api(
                id="a1",
                name="Store",
                version="v1",
                base_path="/s",
                plan_ids=["p1", "p1"],
            )

        assert exc_info.value.field == "plan_ids"


@pytest.mark.unit
class TestResource:
    def test_belongs_to(self):
        resource = Resource(id="r1", api_id="a1", name="orders")

        assert resource.belongs_to("a1")
        assert not resource.belongs_to("a2")

    def test_name_required(self):
        with pytest.raises(InvalidFieldError):
            Resource(id="r1", api_id="a1", name=" ")


@pytest.mark.unit
class TestOperation:
    def test_method_parsed_from_text(self):
        operation = Operation(
            id="o1", api_id="a1", resource_id="r1", method="post", path="/x"
        )

        assert operation.method == HttpMethod.POST

    def test_location(self):
        operation = Operation(
            id="o1", api_id="a1", resource_id="r1", method=HttpMethod.GET, path="/x"
        )

        assert operation.location == "/apis/a1/resources/r1/operations/o1"

    def test_belongs_to_requires_both_links(self):
        operation = Operation(
            id="o1", api_id="a1", resource_id="r1", method=HttpMethod.GET, path="/x"
        )

        assert operation.belongs_to("a1", "r1")
        assert not operation.belongs_to("a1", "r2")
        assert not operation.belongs_to("a2", "r1")

    def test_replace_revalidates(self):
        operation = Operation(
            id="o1", api_id="a1", resource_id="r1", method=HttpMethod.GET, path="/x"
        )

        with pytest.raises(InvalidFieldError) as exc_info:
            replace(operation, path="/**/x")

        assert exc_info.value.field == "path"

    def test_replace_keeps_identity_and_created_at(self):
        operation = Operation(
            id="o1", api_id="a1", resource_id="r1", method=HttpMethod.GET, path="/x"
        )

        updated = replace(operation, method="DELETE", path="/y")

        assert updated.id == "o1"
        assert updated.created_at == operation.created_at
        assert updated.method == HttpMethod.DELETE


@pytest.mark.unit
class TestDirectoryEntities:
    def test_environment_rejects_relative_url(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            Environment(
                id="e1",
                name="sandbox",
                inbound_url="https://sandbox.example.com",
                outbound_url="/upstream",
            )

        assert exc_info.value.field == "outbound_url"

    def test_plan_defaults(self):
        plan = Plan(id="p1", name="gold")

        assert plan.is_default is False
        assert plan.status == Status.ACTIVE

    def test_developer_email_lowercased(self):
        developer = Developer(
            id="d1", name="Ada", email="Ada@Example.com", password_hash="h"
        )

        assert developer.email == "ada@example.com"

    def test_developer_repr_hides_hash(self):
        developer = Developer(
            id="d1", name="Ada", email="a@b.io", password_hash="bcrypt-secret-hash"
        )

        assert "bcrypt-secret-hash" not in repr(developer)

    def test_inactive_developer(self):
        developer = Developer(
            id="d1",
            name="Ada",
            email="a@b.io",
            password_hash="h",
            status=Status.INACTIVE,
        )

        assert not developer.is_active()
