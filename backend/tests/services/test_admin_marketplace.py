"""Admin Marketplace & Public Listings — verifies site CRUD and visibility rules."""

from showcase.models.marketplace_site import MarketplaceSite


async def test_create_site_from_comma_lists(client, admin_headers):
    res = await client.post("/api/v1/admin/marketplace/sites", headers=admin_headers, json={
        "title": "Restaurant Gombe",
        "description": "Site vitrine avec menu et réservation en ligne.",
        "price": "300",
        "technologies": "React, Tailwind",
        "site_url": "",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["technologies"] == ["React", "Tailwind"]
    assert body["status"] == "available"
    assert body["site_url"] is None


async def test_admin_cannot_set_pending(client, admin_headers, seed_site):
    res = await client.patch(
        f"/api/v1/admin/marketplace/sites/{seed_site.id}", headers=admin_headers,
        json={"status": "pending"},
    )
    assert res.status_code == 400


async def test_admin_marks_site_sold(client, admin_headers, seed_site):
    res = await client.patch(
        f"/api/v1/admin/marketplace/sites/{seed_site.id}", headers=admin_headers,
        json={"status": "sold"},
    )
    assert res.json()["status"] == "sold"
    assert res.json()["technologies"] == ["React", "Supabase"]


async def test_public_listing_hides_unavailable(client, test_db, seed_site):
    test_db.add(MarketplaceSite(
        title="Déjà vendu", description="Ce site a déjà trouvé preneur.",
        price=100, status="sold",
    ))
    await test_db.commit()

    public = await client.get("/api/v1/marketplace/sites")
    assert [s["title"] for s in public.json()] == ["Boutique Mode Kinshasa"]


async def test_admin_listing_shows_all(client, admin_headers, test_db, seed_site):
    test_db.add(MarketplaceSite(
        title="Déjà vendu", description="Ce site a déjà trouvé preneur.",
        price=100, status="sold",
    ))
    await test_db.commit()

    res = await client.get("/api/v1/admin/marketplace/sites", headers=admin_headers)
    assert len(res.json()) == 2


async def test_public_detail_and_delete(client, admin_headers, seed_site):
    res = await client.get(f"/api/v1/marketplace/sites/{seed_site.id}")
    assert res.json()["title"] == "Boutique Mode Kinshasa"

    res = await client.delete(f"/api/v1/admin/marketplace/sites/{seed_site.id}", headers=admin_headers)
    assert res.status_code == 204
    res = await client.get(f"/api/v1/marketplace/sites/{seed_site.id}")
    assert res.status_code == 404


async def test_null_price_is_400(client, admin_headers, seed_site):
    res = await client.patch(
        f"/api/v1/admin/marketplace/sites/{seed_site.id}", headers=admin_headers,
        json={"price": None},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
