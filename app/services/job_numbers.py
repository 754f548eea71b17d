"""Job number allocation.

Job numbers look like ``FDP-2026-042``: company code, calendar year, and a
per-year sequence zero-padded to three digits (``1000`` follows ``999``).

The sequence lives in ``job_number_sequences``, one row per year. A number
is taken with a single ``UPDATE ... RETURNING`` inside the caller's
transaction, so concurrent job creations serialize on the counter row and
a rolled-back job also rolls back its number. Every allocation moves the
counter past the greatest job number already stored for that year, so rows
written outside this module (imports, seed scripts) never collide with the
next number. The first allocation of a year creates the row.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.job import Job, JobNumberSequence

logger = logging.getLogger(__name__)

SEQUENCE_WIDTH = 3


def job_number_prefix(year: int, company_code: Optional[str] = None) -> str:
    return f"{company_code or settings.COMPANY_CODE}-{year}-"


def format_job_number(prefix: str, sequence: int) -> str:
    return f"{prefix}{sequence:0{SEQUENCE_WIDTH}d}"


def parse_sequence(job_number: Optional[str], prefix: str) -> int:
    """Numeric suffix after ``prefix``; 0 when absent or unparsable."""
    if not job_number or not job_number.startswith(prefix):
        return 0
    suffix = job_number[len(prefix):]
    try:
        return int(suffix)
    except ValueError:
        return 0


async def last_stored_sequence(db: AsyncSession, prefix: str) -> int:
    """Greatest numeric sequence among stored job numbers with ``prefix``.

    Longer suffixes sort first so ``FDP-2026-1000`` beats ``FDP-2026-999``.
    """
    result = await db.execute(
        select(Job.job_number)
        .where(Job.job_number.startswith(prefix, autoescape=True))
        .order_by(func.length(Job.job_number).desc(), Job.job_number.desc())
        .limit(1)
    )
    return parse_sequence(result.scalar_one_or_none(), prefix)


def _insert_ignoring_conflict(db: AsyncSession, values: dict):
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return pg_insert(JobNumberSequence).values(**values).on_conflict_do_nothing(index_elements=["year"])
    if dialect == "sqlite":
        return sqlite_insert(JobNumberSequence).values(**values).on_conflict_do_nothing(index_elements=["year"])
    return insert(JobNumberSequence).values(**values)


def _greatest(db: AsyncSession, column, floor: int):
    # SQLite spells the two-argument GREATEST as scalar max()
    if db.get_bind().dialect.name == "sqlite":
        return func.max(column, floor)
    return func.greatest(column, floor)


async def _increment(db: AsyncSession, year: int, floor: int) -> Optional[int]:
    result = await db.execute(
        update(JobNumberSequence)
        .where(JobNumberSequence.year == year)
        .values(last_value=_greatest(db, JobNumberSequence.last_value, floor) + 1)
        .returning(JobNumberSequence.last_value)
    )
    return result.scalar_one_or_none()


async def allocate_job_number(db: AsyncSession, now: Optional[datetime] = None) -> str:
    """Take the next job number for the current calendar year.

    Must run inside the transaction that inserts the job; nothing is
    committed here.
    """
    year = (now or datetime.now()).year
    prefix = job_number_prefix(year)

    stored = await last_stored_sequence(db, prefix)
    sequence = await _increment(db, year, stored)
    if sequence is None:
        await db.execute(_insert_ignoring_conflict(db, {"year": year, "last_value": stored}))
        sequence = await _increment(db, year, stored)
        logger.info("Seeded job number counter for %d at %d", year, stored)

    return format_job_number(prefix, sequence)
