"""Product ORM — boutique catalog entry (own offer or affiliate link).

Invariants:
    - price / original_price are display strings ("99€", "À partir de 50€"), never parsed
    - stock_quantity == -1 means unlimited
    - affiliate_url only meaningful when is_affiliate

Design Decisions:
    - String prices: the catalog advertises ranges and rates, not checkout amounts
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from showcase.core.domain_types import UNLIMITED_STOCK
from showcase.db.base import Base


class Product(Base):
    """Boutique product."""
    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    short_description: Mapped[str | None] = mapped_column(String(300), nullable=True)
    price: Mapped[str] = mapped_column(String(100), nullable=False)
    original_price: Mapped[str | None] = mapped_column(String(100), nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String(30), nullable=True)

    is_affiliate: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    affiliate_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    affiliate_commission: Mapped[str | None] = mapped_column(String(100), nullable=True)

    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    stock_quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=UNLIMITED_STOCK,
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
