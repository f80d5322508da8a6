"""Error Hierarchy — verifies codes, HTTP statuses and both response envelopes."""

from showcase.core.errors import (
    ContentAPIError,
    EmailDeliveryError,
    ErrorContext,
    ExternalServiceError,
    FormValidationError,
    PaymentProviderError,
    PermissionDeniedError,
    ResourceNotFoundError,
    SiteNotAvailableError,
)


def test_site_not_available_is_409_with_site_context():
    err = SiteNotAvailableError("site-1", "sold")
    assert err.http_status == 409
    body = err.to_response()["error"]
    assert body["code"] == "SITE_NOT_AVAILABLE"
    assert body["context"]["site_id"] == "site-1"


def test_not_found_is_404():
    err = ResourceNotFoundError("PaymentTransaction", "lyg_9")
    assert err.http_status == 404
    assert "lyg_9" in err.message


def test_permission_denied_is_403():
    assert PermissionDeniedError("admin").http_status == 403


def test_provider_errors_are_external_502():
    for err, code in (
        (PaymentProviderError("down"), "PAYMENT_PROVIDER_ERROR"),
        (EmailDeliveryError("down"), "EMAIL_DELIVERY_ERROR"),
        (ContentAPIError("down"), "CONTENT_API_ERROR"),
    ):
        assert isinstance(err, ExternalServiceError)
        assert err.http_status == 502
        assert err.code == code


def test_function_envelope_is_flat():
    err = PaymentProviderError("Lygos said no", upstream_status=400)
    assert err.to_function_response() == {"error": "Lygos API error: Lygos said no"}


def test_user_message_overrides_internal_message():
    err = PaymentProviderError(
        "raw upstream text", context=ErrorContext(user_message="Paiement indisponible"),
    )
    assert err.to_response()["error"]["message"] == "Paiement indisponible"
    assert err.to_function_response() == {"error": "Paiement indisponible"}


def test_form_validation_error_is_400():
    err = FormValidationError("affiliate_url", "affiliate_url is required for affiliate products")
    assert err.http_status == 400
    assert err.to_response()["error"]["code"] == "VALIDATION_ERROR"
    assert err.field_name == "affiliate_url"
