"""Contact Route — validates the contact form, then sends both emails.

Invariants:
    - Invalid form (e.g. message under 10 characters) -> 400, no email sent
    - Email provider failure -> 502 EMAIL_DELIVERY_ERROR
"""

from fastapi import APIRouter, Depends

from showcase.api.dependencies import get_notifier
from showcase.schemas.contact import ContactForm
from showcase.schemas.functions import FunctionResult
from showcase.services.notifications import Notifier

router = APIRouter(prefix="/api/v1/contact", tags=["contact"])


@router.post("", response_model=FunctionResult)
async def send_contact(body: ContactForm, notifier: Notifier = Depends(get_notifier)):
    await notifier.send_contact_email(body)
    return FunctionResult()
