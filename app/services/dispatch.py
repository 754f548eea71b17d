"""Dispatch board: one day's assigned jobs next to the unassigned queue."""

from datetime import date, datetime, time, timedelta
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import ValidationError
from app.models.job import Job, JobStatus
from app.models.user import User, UserRole
from app.schemas.dashboard import DispatchBoard
from app.services.jobs import JOB_SUMMARIES, list_unassigned_jobs


def parse_board_date(raw: Optional[str]) -> date:
    if not raw:
        return datetime.now().date()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise ValidationError(f"Invalid date: {raw} (expected YYYY-MM-DD)")


async def dispatch_board(db: AsyncSession, day: Optional[str] = None) -> DispatchBoard:
    board_date = parse_board_date(day)
    day_start = datetime.combine(board_date, time.min)
    day_end = day_start + timedelta(days=1)

    result = await db.execute(
        select(Job)
        .options(*JOB_SUMMARIES)
        .where(
            Job.scheduled_date >= day_start,
            Job.scheduled_date < day_end,
            Job.technician_id.is_not(None),
            Job.status != JobStatus.CANCELLED,
        )
        .order_by(Job.scheduled_start.asc())
    )
    jobs = result.scalars().all()

    unassigned = await list_unassigned_jobs(db)

    tech_result = await db.execute(
        select(User)
        .options(selectinload(User.tech_profile))
        .where(User.role == UserRole.TECHNICIAN)
        .order_by(User.name.asc())
    )
    technicians = tech_result.scalars().all()

    return DispatchBoard(
        date=board_date,
        jobs=jobs,
        unassigned=unassigned,
        technicians=technicians,
    )
