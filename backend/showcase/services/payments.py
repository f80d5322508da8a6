"""Payment Service — Lygos payment creation and webhook resolution.

Invariants:
    - create_payment persists exactly one pending PaymentTransaction per provider payment
    - handle_webhook writes transaction -> purchase -> site, flushing between steps
    - completed_at is stamped on the transaction for every resolved callback
    - Unknown provider payment id -> ResourceNotFoundError, nothing written

Design Decisions:
    - Status transitions decided by core/purchase_rules.resolve_webhook (pure, tested alone)
    - Provider called BEFORE the row insert: no transaction row without a provider id
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.config import Settings
from showcase.core.domain_types import PaymentStatus
from showcase.core.errors import ErrorContext, ResourceNotFoundError
from showcase.core.purchase_rules import (
    WebhookOutcome,
    build_payment_product,
    payment_return_urls,
    resolve_webhook,
)
from showcase.infrastructure.lygos_client import LygosClient
from showcase.models.marketplace_site import MarketplaceSite
from showcase.models.payment_transaction import PaymentTransaction
from showcase.models.site_purchase import SitePurchase

logger = logging.getLogger(__name__)


class PaymentService:
    """Creates provider payments and applies provider callbacks."""

    def __init__(self, db: AsyncSession, lygos: LygosClient, settings: Settings):
        self.db = db
        self.lygos = lygos
        self.settings = settings

    async def create_payment(
        self, purchase_id: UUID, site_title: str, amount: float | Decimal,
        buyer_email: str,
    ) -> PaymentTransaction:
        """Create the hosted payment and record it as a pending transaction."""
        purchase = await self.db.get(SitePurchase, purchase_id)
        if not purchase:
            raise ResourceNotFoundError("SitePurchase", str(purchase_id))

        ctx = ErrorContext(
            purchase_id=str(purchase_id), site_id=str(purchase.site_id),
            debug_info={"buyer_email": buyer_email},
        )
        success_url, failure_url = payment_return_urls(
            self.settings.public_site_url, str(purchase_id),
        )
        payload = build_payment_product(
            site_title, float(amount), success_url, failure_url,
        )
        payment = await self.lygos.create_payment_product(payload, context=ctx)

        transaction = PaymentTransaction(
            purchase_id=purchase_id,
            lygos_payment_id=payment.id,
            amount=Decimal(str(amount)),
            currency=self.settings.payment_currency,
            status=PaymentStatus.PENDING.value,
            payment_link=payment.link,
        )
        self.db.add(transaction)
        await self.db.commit()
        await self.db.refresh(transaction)
        logger.info(
            "Payment transaction recorded",
            extra={
                "purchase_id": str(purchase_id),
                "payment_id": payment.id,
                "transaction_id": str(transaction.id),
            },
        )
        return transaction

    async def handle_webhook(
        self, payment_id: str, provider_status: str | None,
    ) -> WebhookOutcome:
        """Apply a provider callback to transaction, purchase and site."""
        result = await self.db.execute(
            select(PaymentTransaction).where(
                PaymentTransaction.lygos_payment_id == payment_id,
            ),
        )
        transaction = result.scalar_one_or_none()
        if not transaction:
            raise ResourceNotFoundError("PaymentTransaction", payment_id)

        outcome = resolve_webhook(provider_status)
        transaction.status = outcome.transaction_status.value
        transaction.completed_at = datetime.now(timezone.utc)
        await self.db.flush()

        if outcome.purchase_status is not None:
            purchase = await self.db.get(SitePurchase, transaction.purchase_id)
            purchase.status = outcome.purchase_status.value
            await self.db.flush()

            if outcome.site_status is not None:
                site = await self.db.get(MarketplaceSite, purchase.site_id)
                site.status = outcome.site_status.value
                await self.db.flush()

        await self.db.commit()
        logger.info(
            f"Webhook resolved: {outcome.transaction_status.value}",
            extra={
                "payment_id": payment_id,
                "transaction_id": str(transaction.id),
                "purchase_id": str(transaction.purchase_id),
            },
        )
        return outcome
