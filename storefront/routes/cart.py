"""Cart API routes"""

from fastapi import APIRouter, Depends, Request, Response, status

from ..models.cart import (
    Cart,
    AddToCartRequest,
    UpdateCartItemRequest,
    RemoveCartItemRequest,
)
from ..models.user import User
from ..security.auth import get_current_user
from ..services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"])


def get_cart_service(request: Request) -> CartService:
    """Cart service built at startup"""
    return request.app.state.cart_service


@router.get("", response_model=Cart)
def get_cart(
    user: User = Depends(get_current_user),
    cart_service: CartService = Depends(get_cart_service),
):
    """Get the current user's cart"""
    return cart_service.get_cart_by_user(user)


@router.post("", response_model=Cart, status_code=status.HTTP_201_CREATED)
def add_product_to_cart(
    request: AddToCartRequest,
    user: User = Depends(get_current_user),
    cart_service: CartService = Depends(get_cart_service),
):
    """Add a new product to the cart, creating the cart on first use"""
    return cart_service.add_product_to_cart(user, request.product_id, request.quantity)


@router.put("", response_model=Cart)
def update_product_in_cart(
    request: UpdateCartItemRequest,
    user: User = Depends(get_current_user),
    cart_service: CartService = Depends(get_cart_service),
):
    """Set the quantity of a product in the cart. Quantity 0 removes it."""
    return cart_service.update_product_in_cart(user, request.product_id, request.quantity)


@router.delete("", response_model=Cart)
def delete_product_from_cart(
    request: RemoveCartItemRequest,
    user: User = Depends(get_current_user),
    cart_service: CartService = Depends(get_cart_service),
):
    """Remove a product from the cart"""
    return cart_service.delete_product_from_cart(user, request.product_id)


@router.post("/checkout", status_code=status.HTTP_204_NO_CONTENT)
def checkout(
    user: User = Depends(get_current_user),
    cart_service: CartService = Depends(get_cart_service),
):
    """Pay for the cart from the wallet and empty it"""
    cart_service.checkout(user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
