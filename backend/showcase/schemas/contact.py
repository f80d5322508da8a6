"""Contact Schemas — contact form validation.

Invariants:
    - name 1-100, subject non-empty, message 10-2000 (all measured after trimming)
    - email valid and <= 255; phone optional, <= 20
    - A message under 10 characters never reaches the email provider
"""

from pydantic import BaseModel, EmailStr, Field, field_validator


class ContactForm(BaseModel):
    """Contact form — also the body of the send-contact-email function."""
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str | None = Field(None, max_length=20)
    subject: str = Field(min_length=1)
    message: str = Field(min_length=10, max_length=2000)

    @field_validator("name", "email", "phone", "subject", "message", mode="before")
    @classmethod
    def strip(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v

    @field_validator("email")
    @classmethod
    def email_length(cls, v: str) -> str:
        if len(v) > 255:
            raise ValueError("email must be at most 255 characters")
        return v

    @field_validator("phone")
    @classmethod
    def empty_phone_as_none(cls, v: str | None) -> str | None:
        return v or None
