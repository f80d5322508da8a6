"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps the auth provider's UUID so user ids are never confused with row ids
    - All valid states encoded as Enums — no raw string matching
    - UNLIMITED_STOCK (-1) is the only negative stock value with meaning

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and compare equal to DB strings without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

UNLIMITED_STOCK = -1
DEFAULT_CURRENCY = "USD"


# ─── Enums ───────────────────────────────────────────────────────

class SiteStatus(str, Enum):
    """Marketplace site lifecycle — maps to marketplace_sites.status."""
    AVAILABLE = "available"
    RESERVED = "reserved"
    PENDING = "pending"
    SOLD = "sold"


class PurchaseStatus(str, Enum):
    """Purchase request lifecycle: created -> pending -> completed."""
    CREATED = "created"
    PENDING = "pending"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    """Payment transaction lifecycle — resolved only by the provider webhook."""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class ProductCategory(str, Enum):
    """Boutique categories offered by the product form."""
    SERVICE = "service"
    FORMATION = "formation"
    EBOOK = "ebook"
    TEMPLATE = "template"
    LOGICIEL = "logiciel"
    MATERIEL = "materiel"
    AUTRE = "autre"


class Role(str, Enum):
    """Roles stored in user_roles."""
    ADMIN = "admin"
    USER = "user"


# Webhook status string the payment provider sends for a captured payment.
PROVIDER_SUCCESS_STATUS = "success"
