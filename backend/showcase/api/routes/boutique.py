"""Boutique Routes — public product listing.

Invariants:
    - Only active products are listed; featured first, then newest
"""

from fastapi import APIRouter, Depends, Query

from showcase.api.dependencies import get_product_catalog
from showcase.core.domain_types import ProductCategory
from showcase.schemas.product import ProductRead
from showcase.services.catalog import ProductCatalog

router = APIRouter(prefix="/api/v1/boutique", tags=["boutique"])


@router.get("/products", response_model=list[ProductRead])
async def list_products(
    category: ProductCategory | None = Query(None),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    return await catalog.list_active(category.value if category else None)
