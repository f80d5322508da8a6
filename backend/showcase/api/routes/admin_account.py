"""Admin Account Route — lets the admin UI check the caller's access up front."""

from fastapi import APIRouter, Depends

from showcase.api.dependencies import require_admin
from showcase.core.domain_types import Role, UserId

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.get("/me")
async def whoami(user_id: UserId = Depends(require_admin)):
    return {"user_id": str(user_id), "role": Role.ADMIN.value}
