"""Admin Gating — verifies 401 without a valid token and 403 without the admin role."""

from sqlalchemy import select

from showcase.core.domain_types import Role
from showcase.models.user_role import UserRole
from showcase.services.role_check import grant_role, has_role
from tests.services.fake_providers import ADMIN_ID, USER_ID, USER_TOKEN


async def test_missing_token_is_401(client):
    res = await client.get("/api/v1/admin/products")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_unknown_token_is_401(client, auth):
    res = await client.get(
        "/api/v1/admin/products", headers={"Authorization": "Bearer forged"},
    )
    assert res.status_code == 401
    assert auth.calls == ["forged"]


async def test_non_admin_is_403(client, admin_role):
    res = await client.post(
        "/api/v1/admin/marketplace/sites",
        headers={"Authorization": f"Bearer {USER_TOKEN}"},
        json={"title": "X" * 5, "description": "Description valide.", "price": "1"},
    )
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "PERMISSION_DENIED"


async def test_admin_me(client, admin_headers):
    res = await client.get("/api/v1/admin/me", headers=admin_headers)
    assert res.status_code == 200
    assert res.json() == {"user_id": str(ADMIN_ID), "role": "admin"}


async def test_has_role(test_db, admin_role):
    assert await has_role(test_db, ADMIN_ID, Role.ADMIN) is True
    assert await has_role(test_db, USER_ID, Role.ADMIN) is False
    assert await has_role(test_db, ADMIN_ID, "user") is False


async def test_grant_role_is_idempotent(test_db):
    await grant_role(test_db, USER_ID, Role.ADMIN)
    await grant_role(test_db, USER_ID, Role.ADMIN)
    rows = (await test_db.execute(select(UserRole).where(UserRole.user_id == USER_ID))).scalars().all()
    assert len(rows) == 1
