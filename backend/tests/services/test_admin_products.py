"""Admin Products — verifies CRUD, toggles and boutique visibility.

Invariants:
    - toggle-active flips exactly is_active (read-back of every other field)
    - Boutique lists active products only, featured first
    - Create applies form rules (stock -1 default, affiliate fields dropped)
    - Edits keep the affiliate rule and never null a required column (400, row untouched)
"""

import pytest

from showcase.models.product import Product
from showcase.schemas.product import ProductRead


@pytest.fixture
async def seed_product(test_db):
    product = Product(
        title="Pack Logo Pro",
        description="Trois propositions de logo et fichiers sources.",
        price="150 $",
        category="service",
        is_featured=False,
        is_active=True,
        stock_quantity=-1,
    )
    test_db.add(product)
    await test_db.commit()
    await test_db.refresh(product)
    return product


async def test_toggle_active_flips_only_that_field(client, admin_headers, seed_product):
    before = ProductRead.model_validate(seed_product).model_dump(mode="json")

    res = await client.post(
        f"/api/v1/admin/products/{seed_product.id}/toggle-active", headers=admin_headers,
    )

    assert res.status_code == 200
    after = res.json()
    assert after["is_active"] is False
    assert {k: v for k, v in after.items() if k != "is_active"} == {
        k: v for k, v in before.items() if k != "is_active"
    }


async def test_toggle_active_twice_restores(client, admin_headers, seed_product):
    url = f"/api/v1/admin/products/{seed_product.id}/toggle-active"
    await client.post(url, headers=admin_headers)
    res = await client.post(url, headers=admin_headers)
    assert res.json()["is_active"] is True


async def test_toggle_featured(client, admin_headers, seed_product):
    res = await client.post(
        f"/api/v1/admin/products/{seed_product.id}/toggle-featured", headers=admin_headers,
    )
    assert res.json()["is_featured"] is True
    assert res.json()["is_active"] is True


async def test_create_product_applies_form_rules(client, admin_headers):
    res = await client.post("/api/v1/admin/products", headers=admin_headers, json={
        "title": "Ebook SEO",
        "description": "Guide pratique du référencement naturel.",
        "price": "9,99 $",
        "category": "ebook",
        "stock_quantity": "beaucoup",
        "is_affiliate": False,
        "affiliate_url": "https://partner.example.com",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["stock_quantity"] == -1
    assert body["affiliate_url"] is None
    assert body["category"] == "ebook"


async def test_create_affiliate_without_url_is_400(client, admin_headers):
    res = await client.post("/api/v1/admin/products", headers=admin_headers, json={
        "title": "Hébergement", "description": "Hébergement web partenaire.",
        "price": "3 $/mois", "is_affiliate": True,
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_to_affiliate_without_url_is_400(client, admin_headers, seed_product, test_db):
    res = await client.patch(
        f"/api/v1/admin/products/{seed_product.id}", headers=admin_headers,
        json={"is_affiliate": True},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    test_db.expire_all()
    assert (await test_db.get(Product, seed_product.id)).is_affiliate is False


async def test_update_to_affiliate_with_url(client, admin_headers, seed_product):
    res = await client.patch(
        f"/api/v1/admin/products/{seed_product.id}", headers=admin_headers,
        json={"is_affiliate": True, "affiliate_url": "https://partner.example.com/logo"},
    )
    assert res.status_code == 200
    assert res.json()["affiliate_url"] == "https://partner.example.com/logo"


async def test_null_title_is_400_and_nothing_written(client, admin_headers, seed_product, test_db):
    res = await client.patch(
        f"/api/v1/admin/products/{seed_product.id}", headers=admin_headers,
        json={"title": None},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    test_db.expire_all()
    assert (await test_db.get(Product, seed_product.id)).title == "Pack Logo Pro"


async def test_update_and_delete(client, admin_headers, seed_product):
    res = await client.patch(
        f"/api/v1/admin/products/{seed_product.id}", headers=admin_headers,
        json={"price": "120 $"},
    )
    assert res.json()["price"] == "120 $"
    assert res.json()["title"] == "Pack Logo Pro"

    res = await client.delete(f"/api/v1/admin/products/{seed_product.id}", headers=admin_headers)
    assert res.status_code == 204
    res = await client.get("/api/v1/admin/products", headers=admin_headers)
    assert res.json() == []


async def test_toggle_unknown_product_is_404(client, admin_headers):
    res = await client.post(
        "/api/v1/admin/products/00000000-0000-0000-0000-000000000000/toggle-active",
        headers=admin_headers,
    )
    assert res.status_code == 404


async def test_boutique_shows_active_featured_first(client, test_db):
    test_db.add_all([
        Product(title="Inactif", description="Produit retiré du catalogue.", price="1", is_active=False),
        Product(title="Normal", description="Produit standard du catalogue.", price="2"),
        Product(title="Vedette", description="Produit mis en avant ce mois.", price="3", is_featured=True),
    ])
    await test_db.commit()

    res = await client.get("/api/v1/boutique/products")

    assert [p["title"] for p in res.json()] == ["Vedette", "Normal"]
