"""Service test fixtures — async DB, fake providers, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - Provider clients overridden with recording fakes (no network)
    - ADMIN_TOKEN resolves to a user holding the admin role; USER_TOKEN to one without

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - Fakes live on fixtures so tests can flip .fail or inspect .calls
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from showcase.api.dependencies import (
    get_auth_client, get_lygos_client, get_resend_client,
)
from showcase.config import get_settings
from showcase.core.domain_types import Role
from showcase.db.base import Base
from showcase.infrastructure.database import get_db
from showcase.main import app
from showcase.models.marketplace_site import MarketplaceSite
from showcase.models.user_role import UserRole
from showcase.services.notifications import Notifier
from showcase.services.payments import PaymentService
from tests.services.fake_providers import (
    ADMIN_ID, ADMIN_TOKEN, USER_ID, USER_TOKEN,
    FakeAuthClient, FakeLygosClient, FakeResendClient,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def lygos():
    return FakeLygosClient()


@pytest.fixture
def resend():
    return FakeResendClient()


@pytest.fixture
def auth():
    return FakeAuthClient({ADMIN_TOKEN: ADMIN_ID, USER_TOKEN: USER_ID})


@pytest.fixture
def payment_service(test_db, lygos):
    return PaymentService(test_db, lygos, get_settings())


@pytest.fixture
def notifier(resend):
    return Notifier(resend, get_settings())


@pytest.fixture
async def admin_role(test_db):
    grant = UserRole(user_id=ADMIN_ID, role=Role.ADMIN.value)
    test_db.add(grant)
    await test_db.commit()
    return grant


@pytest.fixture
def admin_headers(admin_role):
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
async def seed_site(test_db):
    """One available marketplace listing."""
    site = MarketplaceSite(
        title="Boutique Mode Kinshasa",
        short_description="E-commerce clé en main",
        description="Site e-commerce complet avec paiement mobile money.",
        price=250,
        technologies=["React", "Supabase"],
        screenshots=[],
        status="available",
    )
    test_db.add(site)
    await test_db.commit()
    await test_db.refresh(site)
    return site


@pytest.fixture
async def client(test_session_factory, lygos, resend, auth):
    """FastAPI test client with DB and provider dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_lygos_client] = lambda: lygos
    app.dependency_overrides[get_resend_client] = lambda: resend
    app.dependency_overrides[get_auth_client] = lambda: auth

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
