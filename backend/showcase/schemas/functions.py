"""Function Schemas — request/response bodies of the /functions/* handlers.

Invariants:
    - JSON keys are camelCase on the wire (the functions' public contract)
    - Python attributes are snake_case; populate_by_name allows both in tests

Design Decisions:
    - Alias generator over per-field aliases: one rule for every function body
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreatePaymentRequest(_CamelModel):
    """create-lygos-payment input."""
    purchase_id: UUID
    site_title: str = Field(min_length=1)
    amount: float = Field(ge=0)
    buyer_email: EmailStr


class CreatePaymentResponse(_CamelModel):
    success: bool = True
    payment_link: str
    transaction_id: UUID


class WebhookPayload(BaseModel):
    """lygos-webhook input. Extra provider fields are ignored; numeric ids become strings."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str = Field(min_length=1)
    status: str | None = None


class PurchaseNotificationRequest(_CamelModel):
    """send-purchase-notification input."""
    site_title: str = Field(min_length=1)
    buyer_name: str = Field(min_length=1)
    buyer_email: EmailStr
    buyer_phone: str | None = None
    site_id: str = Field(min_length=1)


class FunctionResult(BaseModel):
    success: bool = True
