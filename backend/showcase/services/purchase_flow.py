"""Purchase Flow — reserve a marketplace site, create its payment, notify the owner.

Invariants:
    - A site that is not `available` is rejected before any write
    - The purchase row is committed before the site flips to pending
    - Site -> pending only through the conditional update (WHERE status='available');
      zero matched rows means another buyer won the race -> 409
    - Payment failure leaves purchase and site pending (logged, not compensated)
    - Notification failure is logged and swallowed: the buyer still gets the payment link

Design Decisions:
    - Steps commit one by one: no multi-step transaction, no retries, no idempotency key
    - Payment created in-process through PaymentService, same code as the
      create-lygos-payment function
"""

import logging
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.core.domain_types import PurchaseStatus, SiteStatus
from showcase.core.errors import (
    EmailDeliveryError,
    ResourceNotFoundError,
    SiteNotAvailableError,
)
from showcase.core.purchase_rules import is_purchasable
from showcase.models.marketplace_site import MarketplaceSite
from showcase.models.site_purchase import SitePurchase
from showcase.schemas.functions import PurchaseNotificationRequest
from showcase.schemas.marketplace import PurchaseCreate, PurchaseResponse
from showcase.services.notifications import Notifier
from showcase.services.payments import PaymentService

logger = logging.getLogger(__name__)


class PurchaseFlow:
    """Runs the buyer-side purchase sequence for one marketplace site."""

    def __init__(
        self, db: AsyncSession, payments: PaymentService, notifier: Notifier,
    ):
        self.db = db
        self.payments = payments
        self.notifier = notifier

    async def start_purchase(
        self, site_id: UUID, buyer: PurchaseCreate,
    ) -> PurchaseResponse:
        site = await self.db.get(MarketplaceSite, site_id)
        if not site:
            raise ResourceNotFoundError("MarketplaceSite", str(site_id))
        if not is_purchasable(site.status):
            raise SiteNotAvailableError(str(site_id), site.status)

        site_title, site_price = site.title, site.price

        purchase = SitePurchase(
            site_id=site_id,
            buyer_name=buyer.buyer_name,
            buyer_email=buyer.buyer_email,
            buyer_phone=buyer.buyer_phone,
            status=PurchaseStatus.PENDING.value,
        )
        self.db.add(purchase)
        await self.db.commit()
        await self.db.refresh(purchase)
        log_extra = {"purchase_id": str(purchase.id), "site_id": str(site_id)}
        logger.info("Purchase created", extra=log_extra)

        await self._reserve_site(site_id)

        transaction = await self.payments.create_payment(
            purchase.id, site_title, site_price, buyer.buyer_email,
        )

        try:
            await self.notifier.send_purchase_notification(
                PurchaseNotificationRequest(
                    site_title=site_title,
                    buyer_name=buyer.buyer_name,
                    buyer_email=buyer.buyer_email,
                    buyer_phone=buyer.buyer_phone,
                    site_id=str(site_id),
                ),
            )
        except EmailDeliveryError as e:
            logger.warning(
                f"Purchase notification failed: {e.message}",
                extra={**log_extra, "error_code": e.code},
            )

        return PurchaseResponse(
            purchase_id=purchase.id,
            transaction_id=transaction.id,
            payment_link=transaction.payment_link,
        )

    async def _reserve_site(self, site_id: UUID) -> None:
        """available -> pending, or 409 if someone else got there first."""
        result = await self.db.execute(
            update(MarketplaceSite)
            .where(
                MarketplaceSite.id == site_id,
                MarketplaceSite.status == SiteStatus.AVAILABLE.value,
            )
            .values(status=SiteStatus.PENDING.value)
            .execution_options(synchronize_session="fetch"),
        )
        if result.rowcount == 0:
            await self.db.rollback()
            current = await self.db.get(MarketplaceSite, site_id, populate_existing=True)
            raise SiteNotAvailableError(
                str(site_id), current.status if current else "deleted",
            )
        await self.db.commit()
        logger.info("Site reserved", extra={"site_id": str(site_id)})
