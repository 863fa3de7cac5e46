"""User account models"""

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A storefront account.

    ``default_address`` is the sentinel stored until the user sets a real
    shipping address; it is copied from settings when the user is created.
    """
    id: str
    email: str
    name: str
    wallet_money: float = 500
    address: str = "ADDRESS_NOT_SET"
    default_address: str = Field(default="ADDRESS_NOT_SET", exclude=True)
    version: int = 0

    def has_non_default_address(self) -> bool:
        """True once the user has replaced the default address"""
        return self.address != self.default_address


class UserResponse(BaseModel):
    """Public view of a user account"""
    id: str
    email: str
    name: str
    wallet_money: float
    address: str


class UpdateAddressRequest(BaseModel):
    """Request to set the shipping address"""
    address: str = Field(min_length=20, max_length=256)


class AddressResponse(BaseModel):
    address: str
