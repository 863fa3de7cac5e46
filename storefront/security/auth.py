"""
Bearer token authentication

Resolves the ``Authorization: Bearer <jwt>`` header to a stored User.
Tokens are HS256 JWTs whose ``sub`` is the user id.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.config import Settings
from ..core.errors import ForbiddenError, UnauthorizedError
from ..models.user import User

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, settings: Settings) -> str:
    """Mint an access token for a user"""
    now = datetime.now(timezone.utc)
    expires = now + timedelta(minutes=settings.jwt_access_expiration_minutes)

    payload = {
        "sub": user_id,
        "type": ACCESS_TOKEN_TYPE,
        "iat": int(now.timestamp()),
        "exp": int(expires.timestamp()),
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> str:
    """Validate an access token and return the user id it was issued to"""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError as e:
        logger.info(f"Rejected token: {e}")
        raise UnauthorizedError("Please authenticate") from e

    if payload.get("type") != ACCESS_TOKEN_TYPE or not payload.get("sub"):
        raise UnauthorizedError("Please authenticate")

    return payload["sub"]


class AuthDependency:
    """
    FastAPI dependency returning the authenticated User.

    With ``match_path_user`` set, the route's ``user_id`` path parameter must
    be the caller's own id.
    """

    def __init__(self, match_path_user: bool = False):
        self.match_path_user = match_path_user

    async def __call__(
        self,
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> User:
        if credentials is None or credentials.scheme.lower() != "bearer":
            raise UnauthorizedError("Please authenticate")

        settings: Settings = request.app.state.settings
        user_id = decode_access_token(credentials.credentials, settings)

        user = request.app.state.users.get_by_id(user_id)
        if not user:
            raise UnauthorizedError("Please authenticate")

        if self.match_path_user and request.path_params.get("user_id") != user.id:
            raise ForbiddenError("User not authorized to access this resource")

        return user


# Dependency instances
get_current_user = AuthDependency()
require_own_account = AuthDependency(match_path_user=True)
