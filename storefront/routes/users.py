"""User account routes"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from ..core.errors import ConflictError
from ..database.store import VersionConflictError
from ..models.user import AddressResponse, UpdateAddressRequest, User, UserResponse
from ..security.auth import require_own_account

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/{user_id}")
def get_user(
    user_id: str,
    q: Optional[str] = Query(None, description="Pass 'address' to fetch only the address"),
    user: User = Depends(require_own_account),
):
    """Get the caller's own account"""
    if q == "address":
        return AddressResponse(address=user.address)
    return UserResponse(**user.model_dump())


@router.put("/{user_id}/address", response_model=AddressResponse)
def set_address(
    user_id: str,
    body: UpdateAddressRequest,
    request: Request,
    user: User = Depends(require_own_account),
):
    """Set the shipping address used at checkout"""
    try:
        saved = request.app.state.users.save(user.model_copy(update={"address": body.address}))
    except VersionConflictError as e:
        logger.warning(str(e))
        raise ConflictError("Account was modified concurrently, retry the request") from e
    logger.info(f"Address updated for {saved.email}")
    return AddressResponse(address=saved.address)
