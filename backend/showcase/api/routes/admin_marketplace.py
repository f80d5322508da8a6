"""Admin Marketplace Routes — listing CRUD.

Invariants:
    - Every route requires an admin bearer token (router-level dependency)
    - Admin forms can set available | reserved | sold, never pending
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from showcase.api.dependencies import get_site_catalog, require_admin
from showcase.schemas.marketplace import SiteCreate, SiteRead, SiteUpdate
from showcase.services.catalog import SiteCatalog

router = APIRouter(
    prefix="/api/v1/admin/marketplace",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/sites", response_model=list[SiteRead])
async def list_sites(catalog: SiteCatalog = Depends(get_site_catalog)):
    """All listings regardless of status, newest first."""
    return await catalog.list_all()


@router.post("/sites", response_model=SiteRead, status_code=status.HTTP_201_CREATED)
async def create_site(body: SiteCreate, catalog: SiteCatalog = Depends(get_site_catalog)):
    return await catalog.create(body)


@router.patch("/sites/{site_id}", response_model=SiteRead)
async def update_site(
    site_id: UUID, body: SiteUpdate, catalog: SiteCatalog = Depends(get_site_catalog),
):
    return await catalog.update(site_id, body)


@router.delete("/sites/{site_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_site(site_id: UUID, catalog: SiteCatalog = Depends(get_site_catalog)):
    await catalog.delete(site_id)
