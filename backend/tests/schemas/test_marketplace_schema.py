"""Marketplace Schemas — verifies the site form and the purchase form."""

from typing import get_args

import pytest
from pydantic import ValidationError

from showcase.core.domain_types import SiteStatus
from showcase.schemas.marketplace import AdminSiteStatus, PurchaseCreate, SiteCreate, SiteUpdate


def _site(**overrides):
    data = {
        "title": "Portfolio Photographe",
        "description": "Portfolio responsive avec galerie et blog.",
        "price": "120.00",
    }
    data.update(overrides)
    return data


def test_technologies_from_comma_string():
    site = SiteCreate(**_site(technologies="React, Tailwind , ,Supabase"))
    assert site.technologies == ["React", "Tailwind", "Supabase"]


def test_screenshots_from_list():
    site = SiteCreate(**_site(screenshots=["https://img.example.com/1.png"]))
    assert site.screenshots == ["https://img.example.com/1.png"]


def test_negative_price_rejected():
    with pytest.raises(ValidationError):
        SiteCreate(**_site(price="-1"))


def test_invalid_site_url_rejected():
    with pytest.raises(ValidationError):
        SiteCreate(**_site(site_url="ftp//broken"))


def test_empty_url_allowed():
    assert SiteCreate(**_site(site_url="", demo_url="")).site_url is None


def test_pending_not_settable_by_admin():
    with pytest.raises(ValidationError):
        SiteCreate(**_site(status="pending"))
    with pytest.raises(ValidationError):
        SiteUpdate(status="pending")


def test_short_description_limit():
    with pytest.raises(ValidationError):
        SiteCreate(**_site(short_description="x" * 301))


def _buyer(**overrides):
    data = {"buyer_name": "Jean Kabila", "buyer_email": "jean@example.com", "buyer_phone": "+243990000000"}
    data.update(overrides)
    return data


def test_valid_buyer():
    buyer = PurchaseCreate(**_buyer(buyer_name="  Jean Kabila  "))
    assert buyer.buyer_name == "Jean Kabila"


@pytest.mark.parametrize("field, value", [
    ("buyer_name", "J"),
    ("buyer_email", "not-an-email"),
    ("buyer_phone", "12345"),
    ("buyer_phone", "1" * 21),
])
def test_invalid_buyer_fields(field, value):
    with pytest.raises(ValidationError):
        PurchaseCreate(**_buyer(**{field: value}))


def test_overlong_email_rejected():
    with pytest.raises(ValidationError):
        PurchaseCreate(**_buyer(buyer_email=("a" * 60 + ".") * 4 + "@example.com"))


def test_form_statuses_match_admin_statuses():
    assert set(get_args(AdminSiteStatus)) == {s.value for s in SiteStatus} - {SiteStatus.PENDING.value}


@pytest.mark.parametrize("field", ["title", "description", "price", "status"])
def test_site_update_rejects_null_required_field(field):
    with pytest.raises(ValidationError):
        SiteUpdate.model_validate({field: None})
