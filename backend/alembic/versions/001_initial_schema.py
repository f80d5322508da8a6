"""Initial schema — products, marketplace sites, purchases, payment transactions, user roles.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("short_description", sa.String(300), nullable=True),
        sa.Column("price", sa.String(100), nullable=False),
        sa.Column("original_price", sa.String(100), nullable=True),
        sa.Column("image_url", sa.Text, nullable=True),
        sa.Column("category", sa.String(30), nullable=True),
        sa.Column("is_affiliate", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("affiliate_url", sa.Text, nullable=True),
        sa.Column("affiliate_commission", sa.String(100), nullable=True),
        sa.Column("is_featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("stock_quantity", sa.Integer, nullable=False, server_default="-1"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "marketplace_sites",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("short_description", sa.String(300), nullable=True),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("site_url", sa.Text, nullable=True),
        sa.Column("demo_url", sa.Text, nullable=True),
        sa.Column("screenshots", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("technologies", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("code_snippets", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="available"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_marketplace_sites_status", "marketplace_sites", ["status"])

    op.create_table(
        "site_purchases",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "site_id", UUID(as_uuid=True),
            sa.ForeignKey("marketplace_sites.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("buyer_name", sa.String(100), nullable=False),
        sa.Column("buyer_email", sa.String(255), nullable=False),
        sa.Column("buyer_phone", sa.String(20), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_site_purchases_site_id", "site_purchases", ["site_id"])

    op.create_table(
        "payment_transactions",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "purchase_id", UUID(as_uuid=True),
            sa.ForeignKey("site_purchases.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("lygos_payment_id", sa.String(100), nullable=False, unique=True),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False, server_default="USD"),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("payment_link", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_payment_transactions_purchase_id", "payment_transactions", ["purchase_id"])

    op.create_table(
        "user_roles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )
    op.create_index("ix_user_roles_user_id", "user_roles", ["user_id"])


def downgrade() -> None:
    op.drop_table("user_roles")
    op.drop_table("payment_transactions")
    op.drop_table("site_purchases")
    op.drop_table("marketplace_sites")
    op.drop_table("products")
