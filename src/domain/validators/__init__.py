"""Validators package exports."""

from src.domain.validators.functions import (
    InvalidFieldError,
    parse_http_method,
    validate_base_path,
    validate_email,
    validate_http_url,
    validate_operation_path,
    validate_optional_text,
    validate_password,
    validate_required_text,
    validate_unique_ids,
)

__all__ = [
    "InvalidFieldError",
    "parse_http_method",
    "validate_base_path",
    "validate_email",
    "validate_http_url",
    "validate_operation_path",
    "validate_optional_text",
    "validate_password",
    "validate_required_text",
    "validate_unique_ids",
]
