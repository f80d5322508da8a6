"""Function Routes — the serverless-style handlers, served in-process.

Invariants:
    - camelCase JSON in and out (the handlers' public contract)
    - Handlers keep no state between invocations
    - Any ShowcaseError -> {"error": message}; 404 for an unknown webhook payment id,
      500 for everything else
    - Malformed bodies are rejected by the global validation handler (400)

Design Decisions:
    - Same services as the REST routes: the purchase flow and these handlers share
      one payment/notification code path
"""

import logging
from typing import Awaitable, Callable

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from showcase.api.dependencies import get_notifier, get_payment_service
from showcase.core.errors import ResourceNotFoundError, ShowcaseError
from showcase.schemas.contact import ContactForm
from showcase.schemas.functions import (
    CreatePaymentRequest,
    CreatePaymentResponse,
    FunctionResult,
    PurchaseNotificationRequest,
    WebhookPayload,
)
from showcase.services.notifications import Notifier
from showcase.services.payments import PaymentService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/functions", tags=["functions"])


async def _invoke(name: str, handler: Callable[[], Awaitable[dict]]):
    """Run one function body, flattening domain errors to {"error": message}."""
    try:
        return await handler()
    except ShowcaseError as e:
        logger.error(
            f"Error in {name}: {e.message}",
            extra={"error_code": e.code, "path": f"/functions/{name}"},
        )
        code = (
            status.HTTP_404_NOT_FOUND if isinstance(e, ResourceNotFoundError)
            else status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        return JSONResponse(status_code=code, content=e.to_function_response())


@router.post("/create-lygos-payment")
async def create_lygos_payment(
    body: CreatePaymentRequest,
    payments: PaymentService = Depends(get_payment_service),
):
    async def handler():
        logger.info(
            "Creating Lygos payment", extra={"purchase_id": str(body.purchase_id)},
        )
        transaction = await payments.create_payment(
            body.purchase_id, body.site_title, body.amount, body.buyer_email,
        )
        return CreatePaymentResponse(
            payment_link=transaction.payment_link, transaction_id=transaction.id,
        ).model_dump(mode="json", by_alias=True)

    return await _invoke("create-lygos-payment", handler)


@router.post("/lygos-webhook")
async def lygos_webhook(
    body: WebhookPayload,
    payments: PaymentService = Depends(get_payment_service),
):
    async def handler():
        logger.info(
            f"Received Lygos webhook: {body.status}", extra={"payment_id": body.id},
        )
        await payments.handle_webhook(body.id, body.status)
        return FunctionResult().model_dump()

    return await _invoke("lygos-webhook", handler)


@router.post("/send-contact-email")
async def send_contact_email(
    body: ContactForm, notifier: Notifier = Depends(get_notifier),
):
    async def handler():
        await notifier.send_contact_email(body)
        return FunctionResult().model_dump()

    return await _invoke("send-contact-email", handler)


@router.post("/send-purchase-notification")
async def send_purchase_notification(
    body: PurchaseNotificationRequest, notifier: Notifier = Depends(get_notifier),
):
    async def handler():
        await notifier.send_purchase_notification(body)
        return FunctionResult().model_dump()

    return await _invoke("send-purchase-notification", handler)
