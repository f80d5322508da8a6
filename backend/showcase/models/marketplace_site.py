"""MarketplaceSite ORM — a ready-made website listed for sale.

Invariants:
    - status in {available, reserved, pending, sold}
    - price is numeric (the payment amount), unlike Product.price
    - screenshots / technologies are JSON lists of strings (never null)

Design Decisions:
    - JSON columns over PostgreSQL ARRAY: same model runs on SQLite in tests
    - cascade delete to purchases: removing a listing removes its purchase trail
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Text, Numeric, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from showcase.core.domain_types import SiteStatus
from showcase.db.base import Base


class MarketplaceSite(Base):
    """Marketplace listing."""
    __tablename__ = "marketplace_sites"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    short_description: Mapped[str | None] = mapped_column(String(300), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    site_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    demo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    screenshots: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    technologies: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    code_snippets: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=SiteStatus.AVAILABLE.value, index=True,
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

    purchases: Mapped[list["SitePurchase"]] = relationship(
        "SitePurchase", back_populates="site",
        cascade="all, delete-orphan", passive_deletes=True,
    )
