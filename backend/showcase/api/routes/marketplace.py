"""Marketplace Routes — public listings and the buyer purchase flow.

Invariants:
    - Listing shows available sites only, newest first
    - Detail is reachable for any status (the page shows "sold" itself)
    - Purchase of a non-available site -> 409 SITE_NOT_AVAILABLE, nothing written
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from showcase.api.dependencies import get_purchase_flow, get_site_catalog
from showcase.schemas.marketplace import PurchaseCreate, PurchaseResponse, SiteRead
from showcase.services.catalog import SiteCatalog
from showcase.services.purchase_flow import PurchaseFlow

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/marketplace", tags=["marketplace"])


@router.get("/sites", response_model=list[SiteRead])
async def list_sites(catalog: SiteCatalog = Depends(get_site_catalog)):
    return await catalog.list_available()


@router.get("/sites/{site_id}", response_model=SiteRead)
async def get_site(site_id: UUID, catalog: SiteCatalog = Depends(get_site_catalog)):
    return await catalog.get_or_404(site_id)


@router.post(
    "/sites/{site_id}/purchase",
    response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def purchase_site(
    site_id: UUID, body: PurchaseCreate,
    flow: PurchaseFlow = Depends(get_purchase_flow),
):
    """Reserve the site and return the payment link the buyer is sent to."""
    return await flow.start_purchase(site_id, body)
