"""
Application error taxonomy.

Every error raised by the service layer carries the HTTP status the API
should answer with and a human-readable message. The exception handler
registered in ``storefront.main`` renders them as ``{"code", "message"}``.
"""

from typing import Optional

from fastapi import status


class ApiError(Exception):
    """Base application error with an HTTP-style status code"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        if status_code is not None:
            self.status_code = status_code
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"code": self.status_code, "message": self.message}


class InvalidRequestError(ApiError):
    """Business-rule violation (400)"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


class UnauthorizedError(ApiError):
    """Missing or invalid credentials (401)"""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class ForbiddenError(ApiError):
    """Authenticated but not allowed (403)"""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFoundError(ApiError):
    """Referenced resource does not exist (404)"""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"


class ConflictError(ApiError):
    """Stale write against a newer document version (409)"""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InternalError(ApiError):
    """Unexpected store-level failure (500)"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"
