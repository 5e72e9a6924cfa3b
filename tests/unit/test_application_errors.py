"""Unit tests for domain → application error mapping and RFC 7807 rendering."""

import json

import pytest
from starlette.requests import Request

from src.application.errors import ApplicationErrorCode, to_application_error
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.domain.errors import (
    api_not_found,
    developer_already_exists,
    invalid_credentials,
    operation_not_found,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


def _request(path: str = "/api/v1/apis/a1") -> Request:
    return Request({"type": "http", "method": "GET", "path": path, "headers": []})


@pytest.mark.unit
class TestToApplicationError:
    def test_validation_error_for_command(self):
        error = ValidationError(
            code=ErrorCode.INVALID_PATH, message="bad", field="path"
        )

        assert (
            to_application_error(error).code
            == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        )

    def test_validation_error_for_query(self):
        error = ValidationError(code=ErrorCode.INVALID_PAGINATION, message="bad")

        assert (
            to_application_error(error, is_query=True).code
            == ApplicationErrorCode.QUERY_VALIDATION_FAILED
        )

    def test_not_found_carries_details(self):
        app_error = to_application_error(api_not_found("a1"))

        assert app_error.code == ApplicationErrorCode.NOT_FOUND
        assert app_error.details == {"resource_type": "Api", "resource_id": "a1"}

    def test_conflict(self):
        assert (
            to_application_error(developer_already_exists()).code
            == ApplicationErrorCode.CONFLICT
        )

    def test_authentication(self):
        assert (
            to_application_error(invalid_credentials()).code
            == ApplicationErrorCode.UNAUTHORIZED
        )

    def test_unclassified_domain_error(self):
        error = DomainError(code=ErrorCode.VALIDATION_FAILED, message="boom")

        assert (
            to_application_error(error, is_query=True).code
            == ApplicationErrorCode.QUERY_FAILED
        )


@pytest.mark.unit
class TestErrorResponseBuilder:
    def test_not_found_response(self):
        response = ErrorResponseBuilder.from_domain_error(
            error=operation_not_found("o9"),
            request=_request("/api/v1/apis/a1/resources/r1/operations/o9"),
            trace_id="trace-123",
            is_query=True,
        )

        body = json.loads(response.body)
        assert response.status_code == 404
        assert body["title"] == "Resource Not Found"
        assert body["detail"] == "Operation not found"
        assert body["instance"] == "/api/v1/apis/a1/resources/r1/operations/o9"
        assert body["trace_id"] == "trace-123"
        assert body["type"].endswith("/errors/not_found")
        assert "errors" not in body

    def test_validation_response_lists_field(self):
        response = ErrorResponseBuilder.from_domain_error(
            error=ValidationError(
                code=ErrorCode.INVALID_HTTP_METHOD,
                message="Unsupported method",
                field="method",
            ),
            request=_request(),
            trace_id="",
        )

        body = json.loads(response.body)
        assert response.status_code == 400
        assert body["errors"] == [
            {
                "field": "method",
                "code": "invalid_http_method",
                "message": "Unsupported method",
            }
        ]
        assert "trace_id" not in body

    @pytest.mark.parametrize(
        ("code", "status"),
        [
            (ApplicationErrorCode.COMMAND_VALIDATION_FAILED, 400),
            (ApplicationErrorCode.QUERY_VALIDATION_FAILED, 400),
            (ApplicationErrorCode.UNAUTHORIZED, 401),
            (ApplicationErrorCode.FORBIDDEN, 403),
            (ApplicationErrorCode.NOT_FOUND, 404),
            (ApplicationErrorCode.CONFLICT, 409),
            (ApplicationErrorCode.QUERY_FAILED, 500),
        ],
    )
    def test_status_mapping(self, code, status):
        assert ErrorResponseBuilder.get_status_code(code) == status
