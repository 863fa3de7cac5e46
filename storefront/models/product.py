"""Product models for the storefront catalog"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class ProductCategory(str, Enum):
    ELECTRONICS = "Electronics"
    FASHION = "Fashion"
    HOME = "Home & Kitchen"
    SPORTS = "Sports"
    BOOKS = "Books"


class Product(BaseModel):
    """Product in the catalog"""
    id: str
    name: str
    category: ProductCategory
    cost: float = Field(ge=0)
    rating: int = Field(default=5, ge=0, le=5)
    image: Optional[str] = None

    class Config:
        from_attributes = True


class ProductListResponse(BaseModel):
    """Response from product listing"""
    products: list[Product]
    total: int
    limit: int
    offset: int
