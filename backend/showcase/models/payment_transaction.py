"""PaymentTransaction ORM — one Lygos payment attempt for a purchase.

Invariants:
    - lygos_payment_id is unique (webhook lookup key)
    - status in {pending, completed, failed}; only the webhook leaves pending
    - completed_at set when the webhook resolves the transaction, either way
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Text, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from showcase.core.domain_types import DEFAULT_CURRENCY, PaymentStatus
from showcase.db.base import Base


class PaymentTransaction(Base):
    """Payment attempt tracked against the provider's payment id."""
    __tablename__ = "payment_transactions"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    purchase_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("site_purchases.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    lygos_payment_id: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(
        String(3), nullable=False, default=DEFAULT_CURRENCY,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PaymentStatus.PENDING.value,
    )
    payment_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    purchase: Mapped["SitePurchase"] = relationship(
        "SitePurchase", back_populates="transactions",
    )
