"""Notifier — contact-form and purchase emails through Resend.

Invariants:
    - Contact form: owner notification first, visitor confirmation second
    - Nothing is persisted; delivery failures propagate as EmailDeliveryError
    - Sender addresses, owner address and payment details come from Settings

Design Decisions:
    - Rendering in core/email_templates (pure), delivery here: templates tested without IO
"""

import logging

from showcase.config import Settings
from showcase.core.email_templates import (
    PaymentInstruction,
    render_contact_confirmation,
    render_contact_owner,
    render_purchase_notification,
)
from showcase.core.errors import ErrorContext
from showcase.infrastructure.resend_client import ResendClient
from showcase.schemas.contact import ContactForm
from showcase.schemas.functions import PurchaseNotificationRequest

logger = logging.getLogger(__name__)


class Notifier:
    """Sends the site's transactional emails."""

    def __init__(self, resend: ResendClient, settings: Settings):
        self.resend = resend
        self.settings = settings

    async def send_contact_email(self, contact: ContactForm) -> None:
        s = self.settings
        await self.resend.send(render_contact_owner(
            sender=s.email_sender_contact,
            owner_email=s.owner_email,
            name=contact.name,
            email=contact.email,
            phone=contact.phone,
            subject=contact.subject,
            message=contact.message,
        ))
        await self.resend.send(render_contact_confirmation(
            sender=s.email_sender_brand,
            brand=s.brand_name,
            signature=s.email_signature_html,
            footer=s.email_footer,
            name=contact.name,
            email=contact.email,
            subject=contact.subject,
            message=contact.message,
        ))
        logger.info("Contact emails sent")

    async def send_purchase_notification(
        self, purchase: PurchaseNotificationRequest,
    ) -> None:
        s = self.settings
        instructions = [
            PaymentInstruction(provider=provider, number=number)
            for provider, number in s.payment_instructions.items()
        ]
        message = render_purchase_notification(
            sender=s.email_sender_marketplace,
            owner_email=s.owner_email,
            site_title=purchase.site_title,
            site_id=purchase.site_id,
            buyer_name=purchase.buyer_name,
            buyer_email=purchase.buyer_email,
            buyer_phone=purchase.buyer_phone,
            instructions=instructions,
            payee_name=s.payment_payee_name,
        )
        await self.resend.send(message, context=ErrorContext(site_id=purchase.site_id))
        logger.info("Purchase notification sent", extra={"site_id": purchase.site_id})
