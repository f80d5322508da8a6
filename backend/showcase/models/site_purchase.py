"""SitePurchase ORM — a buyer's request to acquire a marketplace site.

Invariants:
    - Always belongs to a MarketplaceSite (site_id FK)
    - status transitions: created -> pending -> completed (webhook only sets completed)

Design Decisions:
    - Buyer contact stored inline: no buyer accounts on this site
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from showcase.core.domain_types import PurchaseStatus
from showcase.db.base import Base


class SitePurchase(Base):
    """Purchase request for one marketplace site."""
    __tablename__ = "site_purchases"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    site_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("marketplace_sites.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    buyer_name: Mapped[str] = mapped_column(String(100), nullable=False)
    buyer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    buyer_phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=PurchaseStatus.PENDING.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    site: Mapped["MarketplaceSite"] = relationship(
        "MarketplaceSite", back_populates="purchases",
    )
    transactions: Mapped[list["PaymentTransaction"]] = relationship(
        "PaymentTransaction", back_populates="purchase",
        cascade="all, delete-orphan", passive_deletes=True,
    )
