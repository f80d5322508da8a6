"""API Dependencies — FastAPI providers for clients, services and admin gating.

Invariants:
    - One shared httpx.AsyncClient per process (created in lifespan, on app.state)
    - Provider clients are the override seam for tests (app.dependency_overrides)
    - require_admin: no/invalid bearer token -> 401, valid user without admin role -> 403

Design Decisions:
    - Services built per request from the session + clients: no service singletons
"""

import logging

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.config import Settings, get_settings
from showcase.core.domain_types import Role, UserId
from showcase.core.errors import AuthenticationError, PermissionDeniedError
from showcase.infrastructure.auth_client import AuthClient
from showcase.infrastructure.database import get_db
from showcase.infrastructure.lygos_client import LygosClient
from showcase.infrastructure.resend_client import ResendClient
from showcase.infrastructure.wordpress_client import WordPressClient
from showcase.services.blog import BlogService
from showcase.services.catalog import ProductCatalog, SiteCatalog
from showcase.services.notifications import Notifier
from showcase.services.payments import PaymentService
from showcase.services.purchase_flow import PurchaseFlow
from showcase.services.role_check import has_role

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


# ─── Provider Clients ───────────────────────────────────────────

def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http


def get_lygos_client(
    http: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> LygosClient:
    return LygosClient(http, settings.lygos_api_key, settings.lygos_base_url)


def get_resend_client(
    http: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ResendClient:
    return ResendClient(http, settings.resend_api_key, settings.resend_base_url)


def get_wordpress_client(
    http: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> WordPressClient:
    return WordPressClient(http, settings.wordpress_base_url)


def get_auth_client(
    http: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> AuthClient:
    return AuthClient(http, settings.auth_url, settings.auth_api_key)


# ─── Services ───────────────────────────────────────────────────

def get_product_catalog(db: AsyncSession = Depends(get_db)) -> ProductCatalog:
    return ProductCatalog(db)


def get_site_catalog(db: AsyncSession = Depends(get_db)) -> SiteCatalog:
    return SiteCatalog(db)


def get_payment_service(
    db: AsyncSession = Depends(get_db),
    lygos: LygosClient = Depends(get_lygos_client),
    settings: Settings = Depends(get_settings),
) -> PaymentService:
    return PaymentService(db, lygos, settings)


def get_notifier(
    resend: ResendClient = Depends(get_resend_client),
    settings: Settings = Depends(get_settings),
) -> Notifier:
    return Notifier(resend, settings)


def get_purchase_flow(
    db: AsyncSession = Depends(get_db),
    payments: PaymentService = Depends(get_payment_service),
    notifier: Notifier = Depends(get_notifier),
) -> PurchaseFlow:
    return PurchaseFlow(db, payments, notifier)


def get_blog_service(
    wp: WordPressClient = Depends(get_wordpress_client),
) -> BlogService:
    return BlogService(wp)


# ─── Admin Gating ───────────────────────────────────────────────

async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    auth: AuthClient = Depends(get_auth_client),
) -> UserId:
    """Resolve the bearer token to a user id, or 401."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    user_id = await auth.get_user_id(credentials.credentials)
    if user_id is None:
        raise AuthenticationError("Invalid or expired token")
    return user_id


async def require_admin(
    user_id: UserId = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> UserId:
    """Admin routes: authenticated AND granted the admin role, or 403."""
    if not await has_role(db, user_id, Role.ADMIN):
        logger.warning(f"Admin access denied for {user_id}")
        raise PermissionDeniedError(Role.ADMIN.value)
    return user_id
