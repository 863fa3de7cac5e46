"""User account storage"""

import uuid
from typing import Optional

from ..models.user import User
from .store import DocumentStore, DuplicateKeyError


class UserDatabase:
    """User documents keyed by id, with a unique email index"""

    COLLECTION = "users"
    EMAIL_INDEX = "users_by_email"

    def __init__(
        self,
        store: DocumentStore,
        default_wallet_money: float = 500,
        default_address: str = "ADDRESS_NOT_SET",
    ):
        self.store = store
        self.default_wallet_money = default_wallet_money
        self.default_address = default_address

    def _to_user(self, document: Optional[dict]) -> Optional[User]:
        if not document:
            return None
        return User.model_validate({**document, "default_address": self.default_address})

    def create(
        self,
        email: str,
        name: str,
        wallet_money: Optional[float] = None,
        address: Optional[str] = None,
    ) -> User:
        """Create a user; the email must not be taken"""
        user = User(
            id=uuid.uuid4().hex,
            email=email,
            name=name,
            wallet_money=self.default_wallet_money if wallet_money is None else wallet_money,
            address=address or self.default_address,
            default_address=self.default_address,
        )
        with self.store.transaction():
            if self.store.find_one(self.EMAIL_INDEX, email):
                raise DuplicateKeyError(self.EMAIL_INDEX, email)
            self.store.insert(self.EMAIL_INDEX, email, {"user_id": user.id})
            document = self.store.insert(self.COLLECTION, user.id, user.model_dump())
        return self._to_user(document)

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID"""
        return self._to_user(self.store.find_one(self.COLLECTION, user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by email"""
        entry = self.store.find_one(self.EMAIL_INDEX, email)
        return self.get_by_id(entry["user_id"]) if entry else None

    def save(self, user: User) -> User:
        """Persist the whole user document"""
        document = self.store.replace(
            self.COLLECTION,
            user.id,
            user.model_dump(),
            expected_version=user.version,
        )
        return self._to_user(document)
