# Storefront Models

from .product import Product, ProductCategory, ProductListResponse
from .cart import (
    Cart,
    CartItem,
    AddToCartRequest,
    UpdateCartItemRequest,
    RemoveCartItemRequest,
)
from .user import User, UserResponse, UpdateAddressRequest, AddressResponse

__all__ = [
    "Product",
    "ProductCategory",
    "ProductListResponse",
    "Cart",
    "CartItem",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "RemoveCartItemRequest",
    "User",
    "UserResponse",
    "UpdateAddressRequest",
    "AddressResponse",
]
