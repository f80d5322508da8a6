"""Resend Client — sends transactional emails rendered by core/email_templates.

Invariants:
    - Bearer API key on every request
    - Non-2xx responses, non-JSON bodies and transport failures raise EmailDeliveryError

Design Decisions:
    - Plain httpx over the resend SDK: one endpoint, same client stack as the other providers
"""

import logging

import httpx

from showcase.core.email_templates import EmailMessage
from showcase.core.errors import EmailDeliveryError, ErrorContext

logger = logging.getLogger(__name__)


class ResendClient:
    """Thin wrapper over POST /emails."""

    def __init__(self, http: httpx.AsyncClient, api_key: str, base_url: str):
        self._http = http
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    async def send(
        self, message: EmailMessage, context: ErrorContext | None = None,
    ) -> str | None:
        """Send one email. Returns the provider message id."""
        try:
            resp = await self._http.post(
                f"{self._base_url}/emails",
                json=message.to_payload(),
                headers={"Authorization": f"Bearer {self._api_key}"},
            )
        except httpx.HTTPError as e:
            logger.error(f"Resend request failed: {e}", extra={"service": "resend"})
            raise EmailDeliveryError(str(e), context=context)

        if resp.status_code >= 400:
            logger.error(
                f"Resend API error: {resp.text}",
                extra={"service": "resend", "upstream_status": resp.status_code},
            )
            raise EmailDeliveryError(
                resp.text, upstream_status=resp.status_code, context=context,
            )

        try:
            email_id = resp.json().get("id")
        except (ValueError, AttributeError):
            raise EmailDeliveryError(
                "response is not a JSON object",
                upstream_status=resp.status_code, context=context,
            )
        logger.info(f"Email sent: {message.subject}", extra={"service": "resend"})
        return email_id
