"""
Cart Service

Business rules for a user's cart: add, update and remove product lines, and
check out. Every mutating call is one read-modify-write cycle run inside a
store transaction, so a failed call leaves nothing behind.
"""

import logging
from typing import Optional

from ..core.errors import ConflictError, InternalError, InvalidRequestError, NotFoundError
from ..database.carts import CartDatabase
from ..database.products import ProductDatabase
from ..database.store import DocumentStore, StoreError, VersionConflictError
from ..database.users import UserDatabase
from ..models.cart import Cart, CartItem
from ..models.product import Product
from ..models.user import User

logger = logging.getLogger(__name__)

NO_CART = "User does not have a cart"
NO_CART_FOR_UPDATE = "User does not have a cart. Use POST to create cart and add a product"
PRODUCT_ALREADY_IN_CART = (
    "Product already in cart. Use the cart sidebar to update or remove product from cart"
)
PRODUCT_NOT_IN_DATABASE = "Product doesn't exist in database"
PRODUCT_NOT_IN_CART = "Product not in cart"
NO_PRODUCTS_IN_CART = "No products in cart"
INSUFFICIENT_BALANCE = "Insufficient Balance"
NO_ADDRESS_SET = "No address set"
INVALID_QUANTITY = "Quantity must be at least 1"
NEGATIVE_QUANTITY = "Quantity cannot be negative"
CONCURRENT_MODIFICATION = "Cart was modified concurrently, retry the request"


def find_cart_item(cart_items: list[CartItem], product_id: str) -> Optional[CartItem]:
    """Return the line holding ``product_id``, comparing ids as strings"""
    return next(
        (item for item in cart_items if str(item.product.id) == str(product_id)),
        None,
    )


def is_product_in_cart(cart_items: list[CartItem], product_id: str) -> bool:
    return find_cart_item(cart_items, product_id) is not None


class CartService:
    """
    Cart operations for an authenticated user.

    The service holds no state of its own; the store handle and databases
    are created once at startup and passed in.
    """

    def __init__(
        self,
        store: DocumentStore,
        carts: CartDatabase,
        products: ProductDatabase,
        users: UserDatabase,
    ):
        self.store = store
        self.carts = carts
        self.products = products
        self.users = users

    def get_cart_by_user(self, user: User) -> Cart:
        """Fetch the user's cart; NotFoundError if they have none"""
        cart = self.carts.find_by_email(user.email)
        if not cart:
            raise NotFoundError(NO_CART)
        return cart

    def add_product_to_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        """
        Add a new product line to the user's cart, creating the cart if needed.

        Raises:
            InvalidRequestError: product already in cart, or not in the catalog
            InternalError: the cart could not be created
        """
        self._check_quantity(quantity)

        with self.store.transaction():
            cart = self.carts.find_by_email(user.email)
            if not cart:
                cart = self._create_cart(user)

            if is_product_in_cart(cart.cart_items, product_id):
                raise InvalidRequestError(PRODUCT_ALREADY_IN_CART)

            product = self._get_product(product_id)

            cart.cart_items.append(CartItem(product=product, quantity=quantity))
            return self._save(cart)

    def update_product_in_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        """
        Replace the quantity of a product already in the cart. Quantity 0
        removes the line once the same preconditions have passed.

        Raises:
            InvalidRequestError: no cart, product not in catalog, or not in cart
        """
        if quantity < 0:
            raise InvalidRequestError(NEGATIVE_QUANTITY)

        with self.store.transaction():
            cart = self.carts.find_by_email(user.email)
            if not cart:
                raise InvalidRequestError(NO_CART_FOR_UPDATE)

            self._get_product(product_id)

            item = find_cart_item(cart.cart_items, product_id)
            if not item:
                raise InvalidRequestError(PRODUCT_NOT_IN_CART)

            if quantity == 0:
                cart.cart_items = [i for i in cart.cart_items if i is not item]
            else:
                item.quantity = quantity
            return self._save(cart)

    def delete_product_from_cart(self, user: User, product_id: str) -> Cart:
        """
        Remove a product line from the cart.

        Raises:
            InvalidRequestError: no cart, or product not in cart
        """
        with self.store.transaction():
            cart = self.carts.find_by_email(user.email)
            if not cart:
                raise InvalidRequestError(NO_CART)

            if not is_product_in_cart(cart.cart_items, product_id):
                raise InvalidRequestError(PRODUCT_NOT_IN_CART)

            cart.cart_items = [
                item for item in cart.cart_items if str(item.product.id) != str(product_id)
            ]
            return self._save(cart)

    def checkout(self, user: User) -> None:
        """
        Check out the user's cart.

        Preconditions are evaluated in order and the first failure wins:
        cart exists, cart is not empty, wallet covers the total, address set.
        On success the cart is emptied and the wallet debited in one
        transaction; ``user`` is updated in place with the new balance.

        Raises:
            NotFoundError: user has no cart
            InvalidRequestError: empty cart, insufficient balance, or no address
        """
        with self.store.transaction():
            cart = self.get_cart_by_user(user)

            if not cart.cart_items:
                raise InvalidRequestError(NO_PRODUCTS_IN_CART)

            total = cart.total

            if user.wallet_money < total:
                logger.info(f"Checkout rejected for {user.email}: balance {user.wallet_money} < {total}")
                raise InvalidRequestError(INSUFFICIENT_BALANCE)

            if not user.has_non_default_address():
                logger.info(f"Checkout rejected for {user.email}: no address set")
                raise InvalidRequestError(NO_ADDRESS_SET)

            cart.cart_items = []
            debited = user.model_copy(update={"wallet_money": user.wallet_money - total})

            self._save(cart)
            saved_user = self._save_user(debited)

        user.wallet_money = saved_user.wallet_money
        user.version = saved_user.version
        logger.info(f"Checkout complete for {user.email}: charged {total}, balance {user.wallet_money}")

    def _check_quantity(self, quantity: int) -> None:
        if quantity < 1:
            raise InvalidRequestError(INVALID_QUANTITY)

    def _get_product(self, product_id: str) -> Product:
        product = self.products.find_by_id(product_id)
        if not product:
            raise InvalidRequestError(PRODUCT_NOT_IN_DATABASE)
        return product

    def _create_cart(self, user: User) -> Cart:
        try:
            return self.carts.create(user.email)
        except StoreError as e:
            logger.error(f"Cart creation failed for {user.email}: {e}")
            raise InternalError() from e

    def _save(self, cart: Cart) -> Cart:
        try:
            return self.carts.save(cart)
        except VersionConflictError as e:
            logger.warning(str(e))
            raise ConflictError(CONCURRENT_MODIFICATION) from e
        except StoreError as e:
            logger.error(f"Store write failed: {e}")
            raise InternalError() from e

    def _save_user(self, user: User) -> User:
        try:
            return self.users.save(user)
        except VersionConflictError as e:
            logger.warning(str(e))
            raise ConflictError(CONCURRENT_MODIFICATION) from e
        except StoreError as e:
            logger.error(f"Store write failed: {e}")
            raise InternalError() from e
