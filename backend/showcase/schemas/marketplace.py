"""Marketplace Schemas — site form, purchase form, and public responses.

Invariants:
    - SiteCreate: title 3-200, short_description <= 300, description >= 10, price >= 0
    - site_url / demo_url: valid URL or empty
    - technologies / screenshots: list or comma-separated string, always stored as list
    - Admin forms may only set available | reserved | sold (pending belongs to the purchase flow)
    - SiteUpdate: explicit null on title, description, price or status is rejected
    - PurchaseCreate: buyer_name 2-100, buyer_email valid <= 255, buyer_phone 10-20

Design Decisions:
    - Literal over SiteStatus for form status: the enum includes pending, the form must not
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from showcase.schemas._validators import blank_to_none, check_url, reject_nulls, split_csv

AdminSiteStatus = Literal["available", "reserved", "sold"]


class SiteCreate(BaseModel):
    """Marketplace site form."""
    title: str = Field(min_length=3, max_length=200)
    short_description: str | None = Field(None, max_length=300)
    description: str = Field(min_length=10)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    site_url: str | None = None
    demo_url: str | None = None
    code_snippets: str | None = None
    technologies: list[str] = Field(default_factory=list)
    screenshots: list[str] = Field(default_factory=list)
    status: AdminSiteStatus = "available"

    @field_validator(
        "short_description", "site_url", "demo_url", "code_snippets", mode="before",
    )
    @classmethod
    def empty_as_none(cls, v):
        return blank_to_none(v)

    @field_validator("site_url", "demo_url")
    @classmethod
    def valid_url(cls, v: str | None) -> str | None:
        return check_url(v)

    @field_validator("technologies", "screenshots", mode="before")
    @classmethod
    def as_list(cls, v):
        return split_csv(v)


class SiteUpdate(BaseModel):
    """Partial site edit."""
    title: str | None = Field(None, min_length=3, max_length=200)
    short_description: str | None = Field(None, max_length=300)
    description: str | None = Field(None, min_length=10)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    site_url: str | None = None
    demo_url: str | None = None
    code_snippets: str | None = None
    technologies: list[str] | None = None
    screenshots: list[str] | None = None
    status: AdminSiteStatus | None = None

    @field_validator(
        "short_description", "site_url", "demo_url", "code_snippets", mode="before",
    )
    @classmethod
    def empty_as_none(cls, v):
        return blank_to_none(v)

    @field_validator("site_url", "demo_url")
    @classmethod
    def valid_url(cls, v: str | None) -> str | None:
        return check_url(v)

    @field_validator("technologies", "screenshots", mode="before")
    @classmethod
    def as_list(cls, v):
        return None if v is None else split_csv(v)

    @model_validator(mode="after")
    def required_not_null(self):
        return reject_nulls(self, ("title", "description", "price", "status"))


class SiteRead(BaseModel):
    """Marketplace site as shown on listing and detail pages."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    short_description: str | None = None
    description: str
    price: Decimal
    site_url: str | None = None
    demo_url: str | None = None
    code_snippets: str | None = None
    technologies: list[str] = []
    screenshots: list[str] = []
    status: str
    created_at: datetime


class PurchaseCreate(BaseModel):
    """Buyer details collected before redirecting to payment."""
    buyer_name: str = Field(min_length=2, max_length=100)
    buyer_email: EmailStr
    buyer_phone: str = Field(min_length=10, max_length=20)

    @field_validator("buyer_name", "buyer_phone", mode="before")
    @classmethod
    def strip(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("buyer_email")
    @classmethod
    def email_length(cls, v: str) -> str:
        if len(v) > 255:
            raise ValueError("buyer_email must be at most 255 characters")
        return v


class PurchaseResponse(BaseModel):
    """Result of the purchase flow — the UI redirects to payment_link."""
    purchase_id: UUID
    transaction_id: UUID
    payment_link: str
