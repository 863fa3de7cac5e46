"""Cart storage, one document per user keyed by email"""

import logging
from typing import Optional

from ..models.cart import Cart
from .store import DocumentStore

logger = logging.getLogger(__name__)


class CartDatabase:
    """Cart documents in the ``carts`` collection"""

    COLLECTION = "carts"

    def __init__(self, store: DocumentStore, default_payment_option: str = "PAYMENT_OPTION_DEFAULT"):
        self.store = store
        self.default_payment_option = default_payment_option

    def find_by_email(self, email: str) -> Optional[Cart]:
        """Get a user's cart"""
        document = self.store.find_one(self.COLLECTION, email)
        return Cart.model_validate(document) if document else None

    def create(self, email: str) -> Cart:
        """Create an empty cart for a user"""
        cart = Cart(email=email, payment_option=self.default_payment_option)
        document = self.store.insert(self.COLLECTION, email, cart.model_dump(mode="json"))
        logger.info(f"Created cart for {email}")
        return Cart.model_validate(document)

    def save(self, cart: Cart) -> Cart:
        """Persist the whole cart; fails if it changed since it was read"""
        document = self.store.replace(
            self.COLLECTION,
            cart.email,
            cart.model_dump(mode="json"),
            expected_version=cart.version,
        )
        return Cart.model_validate(document)
