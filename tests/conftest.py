"""Shared test fixtures for the ops API tests.

Uses an in-memory SQLite async engine so tests run without PostgreSQL.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("SEED_DEMO_ACCOUNTS", "false")

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app

# Import all models to ensure they're registered with Base.metadata
from app.models import registry  # noqa: F401
from app.models.property import Property, Unit
from app.models.tech_profile import TechProfile
from app.models.user import User, UserRole


# Use aiosqlite for fast, isolated tests. One shared connection so the app
# session and the fixture session see the same in-memory database.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
TestSession = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

STAFF_PASSWORD = "dispatch123"


@pytest_asyncio.fixture(autouse=True)
async def setup_db():
    """Create all tables before each test, drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def override_get_db():
    async with TestSession() as session:
        yield session


app.dependency_overrides[get_db] = override_get_db


@pytest_asyncio.fixture
async def client():
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def db():
    """Direct DB session for test setup/assertions."""
    async with TestSession() as session:
        yield session


async def make_user(db, name, email, role, password=None, **fields):
    from app.services.auth import hash_password

    user = User(
        name=name,
        email=email,
        role=role,
        hashed_password=hash_password(password) if password else None,
        is_active=True,
        **fields,
    )
    db.add(user)
    await db.commit()
    return user


@pytest_asyncio.fixture
async def customer(db):
    """A customer with one property and one unit installed there."""
    user = await make_user(db, "Harbor Grill", "owner@harborgrill.com", UserRole.CUSTOMER, phone="555-0101")
    prop = Property(customer_id=user.id, name="Harbor Grill Main", address="12 Wharf St", city="Erie", state="PA")
    db.add(prop)
    await db.flush()
    unit = Unit(property_id=prop.id, unit_type="ROOFTOP_UNIT", brand="Carrier", model="48TC")
    db.add(unit)
    await db.commit()
    return {"user": user, "property": prop, "unit": unit}


@pytest_asyncio.fixture
async def technician(db):
    user = await make_user(db, "Mike Torres", "mike.torres@fdpierce.com", UserRole.TECHNICIAN, password="tech123")
    db.add(TechProfile(user_id=user.id, truck_number="T-12", skills=["refrigeration"], is_available=True))
    await db.commit()
    return user


async def login(client, email, password):
    resp = await client.post("/api/v1/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    # Keep auth explicit per request; login also sets the session cookie
    client.cookies.clear()
    return {"Authorization": f"Bearer {resp.json()['accessToken']}"}


@pytest_asyncio.fixture
async def staff_headers(client, db):
    """Bearer headers for a dispatcher account."""
    await make_user(db, "Dana Dispatch", "dispatch@fdpierce.com", UserRole.DISPATCHER, password=STAFF_PASSWORD)
    return await login(client, "dispatch@fdpierce.com", STAFF_PASSWORD)


@pytest_asyncio.fixture
async def tech_headers(client, technician):
    return await login(client, technician.email, "tech123")
