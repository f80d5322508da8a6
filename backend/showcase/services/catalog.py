"""Catalog Services — CRUD over boutique products and marketplace sites.

Invariants:
    - Every mutation commits immediately; the store is the sole source of truth
    - toggle_active / toggle_featured flip exactly one column and nothing else
    - Public listings never expose inactive products or non-available sites
    - Listings are newest first (boutique: featured first, then newest)

Design Decisions:
    - Two small classes sharing one AsyncSession: routes stay free of query code
    - Updates apply model_dump(exclude_unset=True): unset fields are never written
    - Product edits are checked against the stored row: an affiliate product always keeps a URL
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.core.domain_types import SiteStatus
from showcase.core.errors import FormValidationError, ResourceNotFoundError
from showcase.models.marketplace_site import MarketplaceSite
from showcase.models.product import Product
from showcase.schemas.marketplace import SiteCreate, SiteUpdate
from showcase.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductCatalog:
    """Boutique products."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_or_404(self, product_id: UUID) -> Product:
        product = await self.db.get(Product, product_id)
        if not product:
            raise ResourceNotFoundError("Product", str(product_id))
        return product

    async def list_all(self) -> list[Product]:
        result = await self.db.execute(
            select(Product).order_by(Product.created_at.desc()),
        )
        return list(result.scalars().all())

    async def list_active(self, category: str | None = None) -> list[Product]:
        query = select(Product).where(Product.is_active.is_(True))
        if category:
            query = query.where(Product.category == category)
        query = query.order_by(Product.is_featured.desc(), Product.created_at.desc())
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create(self, body: ProductCreate) -> Product:
        product = Product(**body.model_dump())
        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        logger.info(f"Product created: {product.title}", extra={"product_id": product.id})
        return product

    async def update(self, product_id: UUID, body: ProductUpdate) -> Product:
        product = await self.get_or_404(product_id)
        changes = body.model_dump(exclude_unset=True)
        is_affiliate = changes.get("is_affiliate", product.is_affiliate)
        affiliate_url = changes.get("affiliate_url", product.affiliate_url)
        if is_affiliate and not affiliate_url:
            raise FormValidationError(
                "affiliate_url", "affiliate_url is required for affiliate products",
            )
        for field, value in changes.items():
            setattr(product, field, value)
        if product.is_affiliate is False:
            product.affiliate_url = None
            product.affiliate_commission = None
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def delete(self, product_id: UUID) -> None:
        product = await self.get_or_404(product_id)
        await self.db.delete(product)
        await self.db.commit()
        logger.info("Product deleted", extra={"product_id": product_id})

    async def toggle_active(self, product_id: UUID) -> Product:
        product = await self.get_or_404(product_id)
        product.is_active = not product.is_active
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def toggle_featured(self, product_id: UUID) -> Product:
        product = await self.get_or_404(product_id)
        product.is_featured = not product.is_featured
        await self.db.commit()
        await self.db.refresh(product)
        return product


class SiteCatalog:
    """Marketplace listings."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_or_404(self, site_id: UUID) -> MarketplaceSite:
        site = await self.db.get(MarketplaceSite, site_id)
        if not site:
            raise ResourceNotFoundError("MarketplaceSite", str(site_id))
        return site

    async def list_all(self) -> list[MarketplaceSite]:
        result = await self.db.execute(
            select(MarketplaceSite).order_by(MarketplaceSite.created_at.desc()),
        )
        return list(result.scalars().all())

    async def list_available(self) -> list[MarketplaceSite]:
        result = await self.db.execute(
            select(MarketplaceSite)
            .where(MarketplaceSite.status == SiteStatus.AVAILABLE.value)
            .order_by(MarketplaceSite.created_at.desc()),
        )
        return list(result.scalars().all())

    async def create(self, body: SiteCreate) -> MarketplaceSite:
        site = MarketplaceSite(**body.model_dump())
        self.db.add(site)
        await self.db.commit()
        await self.db.refresh(site)
        logger.info(f"Marketplace site created: {site.title}", extra={"site_id": site.id})
        return site

    async def update(self, site_id: UUID, body: SiteUpdate) -> MarketplaceSite:
        site = await self.get_or_404(site_id)
        for field, value in body.model_dump(exclude_unset=True).items():
            if field in ("technologies", "screenshots") and value is None:
                value = []
            setattr(site, field, value)
        await self.db.commit()
        await self.db.refresh(site)
        return site

    async def delete(self, site_id: UUID) -> None:
        site = await self.get_or_404(site_id)
        await self.db.delete(site)
        await self.db.commit()
        logger.info("Marketplace site deleted", extra={"site_id": site_id})
