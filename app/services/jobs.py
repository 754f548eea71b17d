"""Job creation and listing.

Jobs are created PENDING unless both a technician and a scheduled date are
supplied, in which case they start SCHEDULED. Status is decided once, at
creation.
"""

import logging
import uuid
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import case, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import NotFoundError, PersistenceError, ValidationError
from app.models.job import Job, JobPriority, JobStatus, JobType
from app.models.property import Property, Unit
from app.models.user import User, UserRole
from app.schemas.job import JobCreate
from app.services.job_numbers import allocate_job_number
from app.services.parsing import DEFAULT_LIMIT, MAX_LIMIT, clamp_limit, parse_enum

logger = logging.getLogger(__name__)

REQUIRED_JOB_FIELDS = ("title", "description", "job_type", "customer_id", "property_id")

# Wire names for error messages
_FIELD_LABELS = {
    "title": "title",
    "description": "description",
    "job_type": "jobType",
    "customer_id": "customerId",
    "property_id": "propertyId",
}

UNASSIGNED_LIMIT = 50

JOB_SUMMARIES = (
    selectinload(Job.customer),
    selectinload(Job.technician),
    selectinload(Job.property),
    selectinload(Job.unit),
)

# Enum declaration order, lowest first
_PRIORITY_RANK = case(
    *[(Job.priority == priority, rank) for rank, priority in enumerate(JobPriority)],
    else_=-1,
)


def parse_id(raw: Optional[str], label: str) -> Optional[uuid.UUID]:
    if raw is None:
        return None
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        raise ValidationError(f"Invalid {label}: {raw}")


def _naive_local(value: Optional[datetime]) -> Optional[datetime]:
    """Scheduled dates are stored as local wall-clock time."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def derive_initial_status(technician_id, scheduled_date) -> JobStatus:
    if technician_id and scheduled_date:
        return JobStatus.SCHEDULED
    return JobStatus.PENDING


async def _get_user(db: AsyncSession, user_id: uuid.UUID, role: UserRole, label: str) -> User:
    result = await db.execute(select(User).where(User.id == user_id, User.role == role))
    user = result.scalar_one_or_none()
    if not user:
        raise NotFoundError(f"{label} not found")
    return user


async def get_job(db: AsyncSession, job_id: uuid.UUID) -> Job:
    result = await db.execute(
        select(Job)
        .options(*JOB_SUMMARIES)
        .where(Job.id == job_id)
        .execution_options(populate_existing=True)
    )
    job = result.scalar_one_or_none()
    if not job:
        raise NotFoundError("Job not found")
    return job


async def create_job(db: AsyncSession, data: JobCreate) -> Job:
    """Validate references, allocate a job number and insert the job.

    The counter increment and the insert commit together.
    """
    missing = [_FIELD_LABELS[f] for f in REQUIRED_JOB_FIELDS if not getattr(data, f)]
    if missing:
        raise ValidationError.missing(missing)

    job_type = parse_enum(JobType, data.job_type)
    if job_type is None:
        raise ValidationError(f"Invalid jobType: {data.job_type}")

    priority = JobPriority.NORMAL
    if data.priority is not None:
        priority = parse_enum(JobPriority, data.priority)
        if priority is None:
            raise ValidationError(f"Invalid priority: {data.priority}")

    customer_id = parse_id(data.customer_id, "customerId")
    property_id = parse_id(data.property_id, "propertyId")
    unit_id = parse_id(data.unit_id, "unitId")
    technician_id = parse_id(data.technician_id, "technicianId")

    await _get_user(db, customer_id, UserRole.CUSTOMER, "Customer")

    prop = await db.get(Property, property_id)
    if not prop:
        raise NotFoundError("Property not found")
    if prop.customer_id != customer_id:
        raise ValidationError("Property does not belong to customer")

    if unit_id:
        unit = await db.get(Unit, unit_id)
        if not unit:
            raise NotFoundError("Unit not found")
        if unit.property_id != property_id:
            raise ValidationError("Unit is not installed at property")

    if technician_id:
        await _get_user(db, technician_id, UserRole.TECHNICIAN, "Technician")

    scheduled_date = _naive_local(data.scheduled_date)

    try:
        job_number = await allocate_job_number(db)
        job = Job(
            job_number=job_number,
            title=data.title,
            description=data.description,
            job_type=job_type,
            priority=priority,
            status=derive_initial_status(technician_id, scheduled_date),
            customer_id=customer_id,
            property_id=property_id,
            unit_id=unit_id,
            technician_id=technician_id,
            scheduled_date=scheduled_date,
            scheduled_start=data.scheduled_start,
            scheduled_end=data.scheduled_end,
            estimated_cost=data.estimated_cost,
        )
        db.add(job)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Failed to create job for customer %s", customer_id)
        raise PersistenceError("Failed to create job")

    logger.info("Created job %s (%s) status=%s", job.job_number, job.id, job.status.value)
    return await get_job(db, job.id)


async def list_jobs(
    db: AsyncSession,
    status: Optional[str] = None,
    job_type: Optional[str] = None,
    technician_id: Optional[str] = None,
    limit: Optional[str] = None,
) -> Sequence[Job]:
    """Newest jobs first. Unrecognized filter values are ignored."""
    query = select(Job).options(*JOB_SUMMARIES)

    status_filter = parse_enum(JobStatus, status)
    if status_filter:
        query = query.where(Job.status == status_filter)

    type_filter = parse_enum(JobType, job_type)
    if type_filter:
        query = query.where(Job.job_type == type_filter)

    if technician_id:
        try:
            query = query.where(Job.technician_id == uuid.UUID(technician_id))
        except ValueError:
            # No technician can have a malformed id
            return []

    query = query.order_by(Job.created_at.desc()).limit(clamp_limit(limit, DEFAULT_LIMIT, MAX_LIMIT))

    result = await db.execute(query)
    return result.scalars().all()


async def list_unassigned_jobs(db: AsyncSession, limit: Optional[str] = None) -> Sequence[Job]:
    """Pending jobs with no technician, most urgent first, then oldest first."""
    result = await db.execute(
        select(Job)
        .options(*JOB_SUMMARIES)
        .where(Job.technician_id.is_(None), Job.status == JobStatus.PENDING)
        .order_by(_PRIORITY_RANK.desc(), Job.created_at.asc())
        .limit(clamp_limit(limit, UNASSIGNED_LIMIT, MAX_LIMIT))
    )
    return result.scalars().all()
