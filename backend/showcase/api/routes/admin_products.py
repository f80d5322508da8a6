"""Admin Product Routes — boutique CRUD and visibility toggles.

Invariants:
    - Every route requires an admin bearer token (router-level dependency)
    - toggle-active / toggle-featured flip exactly one field and return the product
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from showcase.api.dependencies import get_product_catalog, require_admin
from showcase.schemas.product import ProductCreate, ProductRead, ProductUpdate
from showcase.services.catalog import ProductCatalog

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/admin/products",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=list[ProductRead])
async def list_products(catalog: ProductCatalog = Depends(get_product_catalog)):
    """All products, newest first."""
    return await catalog.list_all()


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate, catalog: ProductCatalog = Depends(get_product_catalog),
):
    return await catalog.create(body)


@router.patch("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: UUID, body: ProductUpdate,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    return await catalog.update(product_id, body)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: UUID, catalog: ProductCatalog = Depends(get_product_catalog),
):
    await catalog.delete(product_id)


@router.post("/{product_id}/toggle-active", response_model=ProductRead)
async def toggle_active(
    product_id: UUID, catalog: ProductCatalog = Depends(get_product_catalog),
):
    return await catalog.toggle_active(product_id)


@router.post("/{product_id}/toggle-featured", response_model=ProductRead)
async def toggle_featured(
    product_id: UUID, catalog: ProductCatalog = Depends(get_product_catalog),
):
    return await catalog.toggle_featured(product_id)
