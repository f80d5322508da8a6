"""Purchase Rules — pure decisions behind the purchase flow and the payment webhook.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Only an `available` site can be purchased
    - Webhook "success" resolves transaction -> purchase -> site, in that order;
      any other provider status resolves only the transaction (to failed)

Design Decisions:
    - Outcome as frozen dataclass: the service applies it step by step, tests assert
      on it without a database
    - Return URLs derived from the public site URL, never from the store URL
"""

from dataclasses import dataclass
from urllib.parse import urlencode

from showcase.core.domain_types import (
    PROVIDER_SUCCESS_STATUS,
    PaymentStatus,
    PurchaseStatus,
    SiteStatus,
)


def is_purchasable(site_status: str) -> bool:
    """A site can enter the purchase flow only while it is available."""
    return site_status == SiteStatus.AVAILABLE


@dataclass(frozen=True)
class WebhookOutcome:
    """Status each row should move to after a provider callback. None = untouched."""
    transaction_status: PaymentStatus
    purchase_status: PurchaseStatus | None
    site_status: SiteStatus | None


def resolve_webhook(provider_status: str | None) -> WebhookOutcome:
    """Map the provider's status string to row transitions."""
    if provider_status == PROVIDER_SUCCESS_STATUS:
        return WebhookOutcome(
            transaction_status=PaymentStatus.COMPLETED,
            purchase_status=PurchaseStatus.COMPLETED,
            site_status=SiteStatus.SOLD,
        )
    return WebhookOutcome(
        transaction_status=PaymentStatus.FAILED,
        purchase_status=None,
        site_status=None,
    )


def payment_return_urls(public_site_url: str, purchase_id: str) -> tuple[str, str]:
    """(success_url, failure_url) the payment page redirects the buyer to."""
    base = public_site_url.rstrip("/")
    query = urlencode({"purchase_id": purchase_id})
    return (
        f"{base}/marketplace/payment-success?{query}",
        f"{base}/marketplace/payment-failure?{query}",
    )


def build_payment_product(
    site_title: str, amount: float, success_url: str, failure_url: str,
) -> dict:
    """Request body for the provider's create-product endpoint."""
    return {
        "title": f"Achat: {site_title}",
        "amount": amount,
        "description": f"Achat du site web: {site_title}",
        "success-url": success_url,
        "failure-url": failure_url,
    }
