"""Product API routes"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from ..core.errors import NotFoundError
from ..database.products import ProductDatabase
from ..models.product import Product, ProductCategory, ProductListResponse

router = APIRouter(prefix="/products", tags=["Products"])


def get_product_db(request: Request) -> ProductDatabase:
    return request.app.state.products


@router.get("", response_model=ProductListResponse)
async def list_products(
    category: Optional[ProductCategory] = Query(None, description="Filter by category"),
    limit: int = Query(20, ge=1, le=100, description="Max results"),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
    product_db: ProductDatabase = Depends(get_product_db),
):
    """List the catalog. Public."""
    products, total = product_db.list_products(category=category, limit=limit, offset=offset)

    return ProductListResponse(
        products=products,
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    product_db: ProductDatabase = Depends(get_product_db),
):
    """Get a product by ID. Public."""
    product = product_db.find_by_id(product_id)
    if not product:
        raise NotFoundError("Product not found")
    return product
