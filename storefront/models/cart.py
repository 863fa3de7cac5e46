"""Cart models for the storefront"""

from pydantic import BaseModel, ConfigDict, Field

from .product import Product


class CartItem(BaseModel):
    """One product line in a cart. ``product`` is a snapshot taken when added."""
    product: Product
    quantity: int = Field(gt=0)

    @property
    def subtotal(self) -> float:
        return self.product.cost * self.quantity


class Cart(BaseModel):
    """Shopping cart, one per user, keyed by email"""
    email: str
    cart_items: list[CartItem] = []
    payment_option: str = "PAYMENT_OPTION_DEFAULT"
    version: int = 0

    @property
    def total(self) -> float:
        return sum(item.subtotal for item in self.cart_items)


class _CartRequest(BaseModel):
    # Clients send camelCase (productId); snake_case is accepted too
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId", min_length=1)


class AddToCartRequest(_CartRequest):
    """Request to add a product to the cart"""
    quantity: int = Field(default=1, gt=0)


class UpdateCartItemRequest(_CartRequest):
    """Request to change a line's quantity; 0 removes the line"""
    quantity: int = Field(ge=0)


class RemoveCartItemRequest(_CartRequest):
    """Request to remove a product from the cart"""
