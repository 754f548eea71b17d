"""Tests for job number formatting and allocation."""

import asyncio
from datetime import datetime

import pytest
import pytest_asyncio
from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.database import Base
from app.models import registry  # noqa: F401
from app.models.job import Job, JobNumberSequence, JobType
from app.models.property import Property
from app.models.user import User, UserRole
from app.schemas.job import JobCreate
from app.services.job_numbers import (
    _insert_ignoring_conflict,
    allocate_job_number,
    format_job_number,
    job_number_prefix,
    last_stored_sequence,
    parse_sequence,
)
from app.services.jobs import create_job

NOW = datetime(2025, 6, 1, 10, 0)


def legacy_job(customer, number):
    return Job(
        job_number=number,
        title="Legacy",
        description="imported",
        job_type=JobType.REPAIR,
        customer_id=customer["user"].id,
        property_id=customer["property"].id,
    )


@pytest_asyncio.fixture
async def file_sessions(tmp_path):
    """Session factory over a file-backed SQLite database.

    Each session runs on its own connection. Transactions start with
    BEGIN IMMEDIATE so concurrent writers wait for each other instead of
    failing on lock upgrades.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'jobs.db'}",
        connect_args={"timeout": 30},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _no_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


def test_format_pads_to_three_digits():
    assert format_job_number("FDP-2025-", 7) == "FDP-2025-007"
    assert format_job_number("FDP-2025-", 42) == "FDP-2025-042"
    assert format_job_number("FDP-2025-", 1000) == "FDP-2025-1000"


def test_prefix_uses_company_code():
    assert job_number_prefix(2025) == "FDP-2025-"
    assert job_number_prefix(2025, "ACM") == "ACM-2025-"


def test_parse_sequence():
    assert parse_sequence("FDP-2025-041", "FDP-2025-") == 41
    assert parse_sequence("FDP-2024-041", "FDP-2025-") == 0
    assert parse_sequence("FDP-2025-abc", "FDP-2025-") == 0
    assert parse_sequence(None, "FDP-2025-") == 0


@pytest.mark.asyncio
async def test_allocation_starts_at_one(db):
    first = await allocate_job_number(db, now=NOW)
    second = await allocate_job_number(db, now=NOW)
    await db.commit()

    assert first == "FDP-2025-001"
    assert second == "FDP-2025-002"


@pytest.mark.asyncio
async def test_allocation_rolls_past_999(db, customer):
    db.add(legacy_job(customer, "FDP-2025-999"))
    await db.commit()

    assert await allocate_job_number(db, now=NOW) == "FDP-2025-1000"


@pytest.mark.asyncio
async def test_stored_sequence_compares_numerically(db, customer):
    db.add(legacy_job(customer, "FDP-2025-999"))
    db.add(legacy_job(customer, "FDP-2025-1000"))
    await db.commit()

    assert await last_stored_sequence(db, "FDP-2025-") == 1000
    assert await allocate_job_number(db, now=NOW) == "FDP-2025-1001"


@pytest.mark.asyncio
async def test_counter_catches_up_with_stored_numbers(db, customer):
    assert await allocate_job_number(db, now=NOW) == "FDP-2025-001"
    await db.commit()

    db.add(legacy_job(customer, "FDP-2025-010"))
    await db.commit()

    assert await allocate_job_number(db, now=NOW) == "FDP-2025-011"
    assert await allocate_job_number(db, now=NOW) == "FDP-2025-012"


@pytest.mark.asyncio
async def test_years_are_numbered_independently(db):
    assert await allocate_job_number(db, now=NOW) == "FDP-2025-001"
    assert await allocate_job_number(db, now=datetime(2026, 1, 2)) == "FDP-2026-001"


@pytest.mark.asyncio
async def test_rolled_back_number_is_reissued(db):
    assert await allocate_job_number(db, now=NOW) == "FDP-2025-001"
    await db.rollback()

    assert await allocate_job_number(db, now=NOW) == "FDP-2025-001"


@pytest.mark.asyncio
async def test_seeding_an_existing_year_is_a_no_op(db):
    await db.execute(_insert_ignoring_conflict(db, {"year": 2025, "last_value": 7}))
    await db.execute(_insert_ignoring_conflict(db, {"year": 2025, "last_value": 0}))
    await db.commit()

    result = await db.execute(select(JobNumberSequence.last_value).where(JobNumberSequence.year == 2025))
    assert result.scalar_one() == 7
    assert await allocate_job_number(db, now=NOW) == "FDP-2025-008"


@pytest.mark.asyncio
async def test_concurrent_first_allocations_are_distinct(file_sessions):
    async def allocate_and_commit():
        async with file_sessions() as session:
            number = await allocate_job_number(session, now=NOW)
            await session.commit()
            return number

    numbers = await asyncio.gather(allocate_and_commit(), allocate_and_commit())

    assert sorted(numbers) == ["FDP-2025-001", "FDP-2025-002"]


@pytest.mark.asyncio
async def test_concurrent_job_creation_gets_consecutive_numbers(file_sessions):
    async with file_sessions() as session:
        owner = User(name="Harbor Grill", email="owner@harborgrill.com", role=UserRole.CUSTOMER)
        session.add(owner)
        await session.flush()
        prop = Property(customer_id=owner.id, name="Harbor Grill Main", address="12 Wharf St")
        session.add(prop)
        await session.commit()

    body = JobCreate(
        title="No cooling",
        description="Walk-in cooler holding at 48F",
        job_type="REPAIR",
        customer_id=str(owner.id),
        property_id=str(prop.id),
    )

    async def create():
        async with file_sessions() as session:
            job = await create_job(session, body)
            return job.job_number

    numbers = await asyncio.gather(create(), create(), create())

    prefix = job_number_prefix(datetime.now().year)
    assert sorted(numbers) == [f"{prefix}001", f"{prefix}002", f"{prefix}003"]
