"""Product catalog"""

from typing import Mapping, Optional
from ..models.product import Product, ProductCategory

# Demo product catalog
PRODUCTS: dict[str, Product] = {
    "5f7a1c2b9d3e4a0012ab0001": Product(
        id="5f7a1c2b9d3e4a0012ab0001",
        name="Sony WH-1000XM5 Wireless Headphones",
        category=ProductCategory.ELECTRONICS,
        cost=349,
        rating=5,
        image="https://static.storefront.dev/images/sony-headphones.jpg",
    ),
    "5f7a1c2b9d3e4a0012ab0002": Product(
        id="5f7a1c2b9d3e4a0012ab0002",
        name="Samsung Galaxy Tab S9",
        category=ProductCategory.ELECTRONICS,
        cost=799,
        rating=4,
        image="https://static.storefront.dev/images/galaxy-tab.jpg",
    ),
    "5f7a1c2b9d3e4a0012ab0003": Product(
        id="5f7a1c2b9d3e4a0012ab0003",
        name="Patagonia Better Sweater Jacket",
        category=ProductCategory.FASHION,
        cost=139,
        rating=4,
        image="https://static.storefront.dev/images/patagonia-sweater.jpg",
    ),
    "5f7a1c2b9d3e4a0012ab0004": Product(
        id="5f7a1c2b9d3e4a0012ab0004",
        name="Nike Air Max 90",
        category=ProductCategory.FASHION,
        cost=130,
        rating=4,
        image="https://static.storefront.dev/images/airmax90.jpg",
    ),
    "5f7a1c2b9d3e4a0012ab0005": Product(
        id="5f7a1c2b9d3e4a0012ab0005",
        name="KitchenAid Stand Mixer",
        category=ProductCategory.HOME,
        cost=449,
        rating=5,
        image="https://static.storefront.dev/images/kitchenaid.jpg",
    ),
    "5f7a1c2b9d3e4a0012ab0006": Product(
        id="5f7a1c2b9d3e4a0012ab0006",
        name="Yeti Tundra 45 Cooler",
        category=ProductCategory.SPORTS,
        cost=325,
        rating=4,
        image="https://static.storefront.dev/images/yeti-cooler.jpg",
    ),
    "5f7a1c2b9d3e4a0012ab0007": Product(
        id="5f7a1c2b9d3e4a0012ab0007",
        name="Atomic Habits by James Clear",
        category=ProductCategory.BOOKS,
        cost=25,
        rating=5,
        image="https://static.storefront.dev/images/atomic-habits.jpg",
    ),
}


class ProductDatabase:
    """Read-only product catalog"""

    def __init__(self, products: Optional[Mapping[str, Product]] = None):
        source = PRODUCTS if products is None else products
        self.products = {str(pid): p for pid, p in source.items()}

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        product = self.products.get(str(product_id))
        return product.model_copy(deep=True) if product else None

    def list_products(
        self,
        category: Optional[ProductCategory] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Product], int]:
        """
        List catalog products.

        Returns:
            Tuple of (page of products, total count)
        """
        results = list(self.products.values())

        if category:
            results = [p for p in results if p.category == category]

        total = len(results)
        return results[offset : offset + limit], total
