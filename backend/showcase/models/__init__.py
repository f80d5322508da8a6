"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table names match the store's: products, marketplace_sites, site_purchases,
      payment_transactions, user_roles

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from showcase.models.product import Product  # noqa: F401
from showcase.models.marketplace_site import MarketplaceSite  # noqa: F401
from showcase.models.site_purchase import SitePurchase  # noqa: F401
from showcase.models.payment_transaction import PaymentTransaction  # noqa: F401
from showcase.models.user_role import UserRole  # noqa: F401
