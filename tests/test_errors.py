"""Tests for the API error taxonomy"""
import pytest
from fastapi import status

from storefront.core.errors import (
    ApiError,
    ConflictError,
    ForbiddenError,
    InternalError,
    InvalidRequestError,
    NotFoundError,
    UnauthorizedError,
)


@pytest.mark.parametrize("error_class, expected_status", [
    (InvalidRequestError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
])
def test_error_status_codes(error_class, expected_status):
    error = error_class("boom")

    assert isinstance(error.status_code, int)
    assert error.to_dict() == {"code": expected_status, "message": "boom"}


def test_default_message():
    assert InternalError().to_dict() == {"code": 500, "message": "Internal Server Error"}


def test_status_code_override():
    error = ApiError("Teapot", status_code=418)

    assert error.to_dict() == {"code": 418, "message": "Teapot"}
