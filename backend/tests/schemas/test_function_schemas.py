"""Function Schemas — verifies camelCase wire format of the function bodies."""

from uuid import uuid4

from showcase.schemas.functions import (
    CreatePaymentRequest, CreatePaymentResponse, PurchaseNotificationRequest,
    WebhookPayload,
)


def test_payment_request_reads_camel_case():
    pid = uuid4()
    req = CreatePaymentRequest.model_validate({
        "purchaseId": str(pid), "siteTitle": "Blog Pro",
        "amount": 150, "buyerEmail": "jean@example.com",
    })
    assert req.purchase_id == pid
    assert req.site_title == "Blog Pro"


def test_payment_response_writes_camel_case():
    tid = uuid4()
    body = CreatePaymentResponse(
        payment_link="https://pay.example.com/x", transaction_id=tid,
    ).model_dump(mode="json", by_alias=True)
    assert body == {
        "success": True,
        "paymentLink": "https://pay.example.com/x",
        "transactionId": str(tid),
    }


def test_notification_phone_optional():
    req = PurchaseNotificationRequest.model_validate({
        "siteTitle": "Blog Pro", "buyerName": "Jean",
        "buyerEmail": "jean@example.com", "siteId": "site-1",
    })
    assert req.buyer_phone is None


def test_webhook_numeric_id_read_as_string():
    payload = WebhookPayload.model_validate({"id": 12345, "status": "success"})
    assert payload.id == "12345"
