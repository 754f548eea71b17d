"""Technician listing."""

import uuid
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.job import Job
from app.models.tech_profile import TechProfile
from app.models.user import User, UserRole
from app.schemas.customer import TechnicianOut
from app.services.parsing import parse_bool


async def job_counts(db: AsyncSession, technician_ids: list[uuid.UUID]) -> dict[uuid.UUID, int]:
    """Jobs ever assigned per technician, whatever their status."""
    if not technician_ids:
        return {}
    result = await db.execute(
        select(Job.technician_id, func.count(Job.id))
        .where(Job.technician_id.in_(technician_ids))
        .group_by(Job.technician_id)
    )
    return {tech_id: count for tech_id, count in result.all()}


async def list_technicians(db: AsyncSession, available: Optional[str] = None) -> list[TechnicianOut]:
    query = (
        select(User)
        .options(selectinload(User.tech_profile))
        .where(User.role == UserRole.TECHNICIAN)
        .order_by(User.name.asc())
    )

    available_filter = parse_bool(available)
    if available_filter is not None:
        query = query.join(TechProfile, TechProfile.user_id == User.id).where(
            TechProfile.is_available.is_(available_filter)
        )

    result = await db.execute(query)
    technicians = result.scalars().all()
    counts = await job_counts(db, [t.id for t in technicians])

    return [
        TechnicianOut(
            id=tech.id,
            name=tech.name,
            email=tech.email,
            phone=tech.phone,
            avatar=tech.avatar,
            created_at=tech.created_at,
            tech_profile=tech.tech_profile,
            job_count=counts.get(tech.id, 0),
        )
        for tech in technicians
    ]
