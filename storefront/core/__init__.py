# Core configuration and errors

from .config import Settings, get_settings
from .errors import (
    ApiError,
    ConflictError,
    ForbiddenError,
    InternalError,
    InvalidRequestError,
    NotFoundError,
    UnauthorizedError,
)

__all__ = [
    "Settings",
    "get_settings",
    "ApiError",
    "ConflictError",
    "ForbiddenError",
    "InternalError",
    "InvalidRequestError",
    "NotFoundError",
    "UnauthorizedError",
]
