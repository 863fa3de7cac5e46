# Authentication

from .auth import (
    AuthDependency,
    create_access_token,
    decode_access_token,
    get_current_user,
    require_own_account,
)

__all__ = [
    "AuthDependency",
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "require_own_account",
]
