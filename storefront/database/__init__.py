# Database modules

from .store import (
    DocumentStore,
    StoreError,
    DuplicateKeyError,
    DocumentNotFoundError,
    VersionConflictError,
)
from .products import ProductDatabase
from .carts import CartDatabase
from .users import UserDatabase

__all__ = [
    "DocumentStore",
    "StoreError",
    "DuplicateKeyError",
    "DocumentNotFoundError",
    "VersionConflictError",
    "ProductDatabase",
    "CartDatabase",
    "UserDatabase",
]
