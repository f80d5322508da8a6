"""Payment Functions — verifies create-lygos-payment and lygos-webhook.

Invariants:
    - create-lygos-payment persists a pending USD transaction with the provider link
    - webhook "success": transaction completed, purchase completed, site sold (in that order)
    - webhook other status: only the transaction moves (to failed)
    - completed_at is set either way; unknown payment id -> 404 {"error": ...}
    - provider ids sent as JSON numbers match the stored string id
"""

import uuid

import pytest
from sqlalchemy import event, select

from showcase.models.marketplace_site import MarketplaceSite
from showcase.models.payment_transaction import PaymentTransaction
from showcase.models.site_purchase import SitePurchase


@pytest.fixture
async def seed_purchase(test_db, seed_site):
    purchase = SitePurchase(
        site_id=seed_site.id, buyer_name="Jean Kabila",
        buyer_email="jean@example.com", buyer_phone="+243990000000",
        status="pending",
    )
    seed_site.status = "pending"
    test_db.add(purchase)
    await test_db.commit()
    await test_db.refresh(purchase)
    return purchase


@pytest.fixture
async def seed_transaction(test_db, seed_purchase):
    transaction = PaymentTransaction(
        purchase_id=seed_purchase.id, lygos_payment_id="lyg_77",
        amount=250, currency="USD", status="pending",
        payment_link="https://pay.lygosapp.com/lyg_77",
    )
    test_db.add(transaction)
    await test_db.commit()
    await test_db.refresh(transaction)
    return transaction


# ─── create-lygos-payment ───────────────────────────────────────

async def test_create_payment_persists_pending_transaction(client, seed_purchase, lygos, test_db):
    res = await client.post("/functions/create-lygos-payment", json={
        "purchaseId": str(seed_purchase.id),
        "siteTitle": "Boutique Mode Kinshasa",
        "amount": 250,
        "buyerEmail": "jean@example.com",
    })

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["paymentLink"] == "https://pay.lygosapp.com/lyg_1"

    transaction = await test_db.get(PaymentTransaction, uuid.UUID(body["transactionId"]))
    assert transaction.status == "pending"
    assert transaction.currency == "USD"
    assert transaction.lygos_payment_id == "lyg_1"
    assert transaction.payment_link == "https://pay.lygosapp.com/lyg_1"
    assert transaction.completed_at is None
    assert lygos.calls[0]["description"] == "Achat du site web: Boutique Mode Kinshasa"


async def test_create_payment_provider_failure_is_flat_500(client, seed_purchase, lygos):
    lygos.fail = True
    res = await client.post("/functions/create-lygos-payment", json={
        "purchaseId": str(seed_purchase.id), "siteTitle": "X",
        "amount": 1, "buyerEmail": "jean@example.com",
    })
    assert res.status_code == 500
    assert res.json() == {"error": "Lygos API error: Service Unavailable"}


async def test_payment_service_direct(payment_service, seed_purchase):
    transaction = await payment_service.create_payment(
        seed_purchase.id, "Blog Pro", 99.5, "jean@example.com",
    )
    assert float(transaction.amount) == 99.5
    assert transaction.purchase_id == seed_purchase.id


# ─── lygos-webhook ──────────────────────────────────────────────

async def test_webhook_success_completes_everything(client, seed_transaction, seed_site, test_db):
    res = await client.post("/functions/lygos-webhook", json={"id": "lyg_77", "status": "success"})

    assert res.status_code == 200
    assert res.json() == {"success": True}
    test_db.expire_all()
    transaction = await test_db.get(PaymentTransaction, seed_transaction.id)
    purchase = await test_db.get(SitePurchase, seed_transaction.purchase_id)
    site = await test_db.get(MarketplaceSite, seed_site.id)
    assert transaction.status == "completed"
    assert transaction.completed_at is not None
    assert purchase.status == "completed"
    assert site.status == "sold"


async def test_webhook_failure_only_touches_transaction(client, seed_transaction, seed_site, test_db):
    res = await client.post("/functions/lygos-webhook", json={"id": "lyg_77", "status": "failed"})

    assert res.status_code == 200
    test_db.expire_all()
    transaction = await test_db.get(PaymentTransaction, seed_transaction.id)
    purchase = await test_db.get(SitePurchase, seed_transaction.purchase_id)
    site = await test_db.get(MarketplaceSite, seed_site.id)
    assert transaction.status == "failed"
    assert transaction.completed_at is not None
    assert purchase.status == "pending"
    assert site.status == "pending"


async def test_webhook_writes_in_order(payment_service, seed_transaction, test_engine):
    tables = []

    def record(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith("UPDATE"):
            tables.append(statement.split()[1])

    event.listen(test_engine.sync_engine, "before_cursor_execute", record)
    try:
        await payment_service.handle_webhook("lyg_77", "success")
    finally:
        event.remove(test_engine.sync_engine, "before_cursor_execute", record)

    assert tables == ["payment_transactions", "site_purchases", "marketplace_sites"]


async def test_webhook_unknown_payment_is_404(client, test_db):
    res = await client.post("/functions/lygos-webhook", json={"id": "lyg_missing", "status": "success"})
    assert res.status_code == 404
    assert "lyg_missing" in res.json()["error"]
    assert (await test_db.execute(select(PaymentTransaction))).first() is None


async def test_webhook_accepts_numeric_payment_id(client, seed_purchase, seed_site, test_db):
    transaction = PaymentTransaction(
        purchase_id=seed_purchase.id, lygos_payment_id="12345",
        amount=250, currency="USD", status="pending",
        payment_link="https://pay.lygosapp.com/12345",
    )
    test_db.add(transaction)
    await test_db.commit()

    res = await client.post("/functions/lygos-webhook", json={"id": 12345, "status": "success"})

    assert res.status_code == 200
    test_db.expire_all()
    assert (await test_db.get(PaymentTransaction, transaction.id)).status == "completed"
    assert (await test_db.get(MarketplaceSite, seed_site.id)).status == "sold"
