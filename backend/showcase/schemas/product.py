"""Product Schemas — boutique product form and API responses.

Invariants:
    - ProductCreate: title 3-200, description >= 10, short_description <= 300, price non-empty
    - affiliate_url required (and a valid URL) when is_affiliate; affiliate fields dropped otherwise
    - stock_quantity missing or not an integer -> -1 (unlimited)

Design Decisions:
    - ProductUpdate repeats the field constraints with all fields optional:
      PATCH applies model_dump(exclude_unset=True), unset fields are never touched
    - ProductUpdate: explicit null on a required field is rejected; null stock means unlimited
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from showcase.core.domain_types import UNLIMITED_STOCK, ProductCategory
from showcase.schemas._validators import blank_to_none, check_url, reject_nulls


def _parse_stock(v) -> int:
    if v is None or isinstance(v, bool):
        return UNLIMITED_STOCK
    if isinstance(v, int):
        return v
    try:
        return int(str(v).strip())
    except ValueError:
        return UNLIMITED_STOCK


class ProductCreate(BaseModel):
    """Product form — validated before any insert."""
    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(min_length=3, max_length=200)
    description: str = Field(min_length=10)
    short_description: str | None = Field(None, max_length=300)
    price: str = Field(min_length=1, max_length=100)
    original_price: str | None = Field(None, max_length=100)
    image_url: str | None = None
    category: ProductCategory | None = None
    is_affiliate: bool = False
    affiliate_url: str | None = None
    affiliate_commission: str | None = Field(None, max_length=100)
    is_featured: bool = False
    is_active: bool = True
    stock_quantity: int = UNLIMITED_STOCK

    @field_validator(
        "short_description", "original_price", "image_url", "category",
        "affiliate_url", "affiliate_commission", mode="before",
    )
    @classmethod
    def empty_as_none(cls, v):
        return blank_to_none(v)

    @field_validator("image_url", "affiliate_url")
    @classmethod
    def valid_url(cls, v: str | None) -> str | None:
        return check_url(v)

    @field_validator("stock_quantity", mode="before")
    @classmethod
    def parse_stock(cls, v) -> int:
        return _parse_stock(v)

    @model_validator(mode="after")
    def affiliate_fields(self):
        if not self.is_affiliate:
            self.affiliate_url = None
            self.affiliate_commission = None
        elif not self.affiliate_url:
            raise ValueError("affiliate_url is required for affiliate products")
        return self


class ProductUpdate(BaseModel):
    """Partial product edit."""
    model_config = ConfigDict(use_enum_values=True)

    title: str | None = Field(None, min_length=3, max_length=200)
    description: str | None = Field(None, min_length=10)
    short_description: str | None = Field(None, max_length=300)
    price: str | None = Field(None, min_length=1, max_length=100)
    original_price: str | None = Field(None, max_length=100)
    image_url: str | None = None
    category: ProductCategory | None = None
    is_affiliate: bool | None = None
    affiliate_url: str | None = None
    affiliate_commission: str | None = Field(None, max_length=100)
    is_featured: bool | None = None
    is_active: bool | None = None
    stock_quantity: int | None = None

    @field_validator(
        "short_description", "original_price", "image_url", "category",
        "affiliate_url", "affiliate_commission", mode="before",
    )
    @classmethod
    def empty_as_none(cls, v):
        return blank_to_none(v)

    @field_validator("image_url", "affiliate_url")
    @classmethod
    def valid_url(cls, v: str | None) -> str | None:
        return check_url(v)

    @field_validator("stock_quantity", mode="before")
    @classmethod
    def parse_stock(cls, v):
        return _parse_stock(v)

    @model_validator(mode="after")
    def required_not_null(self):
        return reject_nulls(
            self, ("title", "description", "price", "is_affiliate", "is_featured", "is_active"),
        )


class ProductRead(BaseModel):
    """Product as returned by admin and boutique listings."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    short_description: str | None = None
    price: str
    original_price: str | None = None
    image_url: str | None = None
    category: str | None = None
    is_affiliate: bool
    affiliate_url: str | None = None
    affiliate_commission: str | None = None
    is_featured: bool
    is_active: bool
    stock_quantity: int
    created_at: datetime
