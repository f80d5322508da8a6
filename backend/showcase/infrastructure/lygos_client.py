"""Lygos Client — creates hosted payment products for marketplace purchases.

Invariants:
    - Every request carries the `api-key` header (never logged)
    - Non-2xx responses and transport failures raise PaymentProviderError
    - A non-JSON response, or one without `id` or `link`, is treated as a failure

Design Decisions:
    - No retry: a duplicated payment product is worse than a failed purchase request
    - Shared httpx.AsyncClient injected from lifespan: connection reuse across requests
"""

import logging
from dataclasses import dataclass

import httpx

from showcase.core.errors import ErrorContext, PaymentProviderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LygosPayment:
    """Payment product created on Lygos."""
    id: str
    link: str


class LygosClient:
    """Thin wrapper over the Lygos REST API."""

    def __init__(self, http: httpx.AsyncClient, api_key: str, base_url: str):
        self._http = http
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    async def create_payment_product(
        self, payload: dict, context: ErrorContext | None = None,
    ) -> LygosPayment:
        """POST /products — returns the payment id and the hosted payment link."""
        try:
            resp = await self._http.post(
                f"{self._base_url}/products",
                json=payload,
                headers={
                    "api-key": self._api_key,
                    "Content-Type": "application/json",
                },
            )
        except httpx.HTTPError as e:
            logger.error(f"Lygos request failed: {e}", extra={"service": "lygos"})
            raise PaymentProviderError(str(e), context=context)

        if resp.status_code >= 400:
            logger.error(
                f"Lygos API error: {resp.text}",
                extra={"service": "lygos", "upstream_status": resp.status_code},
            )
            raise PaymentProviderError(
                resp.text, upstream_status=resp.status_code, context=context,
            )

        try:
            data = resp.json()
        except ValueError:
            raise PaymentProviderError(
                "response is not JSON",
                upstream_status=resp.status_code, context=context,
            )
        if not isinstance(data, dict) or not data.get("id") or not data.get("link"):
            raise PaymentProviderError(
                "response missing payment id or link",
                upstream_status=resp.status_code, context=context,
            )
        logger.info(
            "Lygos payment created",
            extra={"service": "lygos", "payment_id": data["id"]},
        )
        return LygosPayment(id=str(data["id"]), link=data["link"])
