"""Lead creation and listing."""

import logging
import uuid
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import NotFoundError, PersistenceError, ValidationError
from app.models.lead import Lead, LeadSource, LeadStatus
from app.models.user import User, UserRole
from app.schemas.lead import LeadCreate
from app.services.parsing import MAX_LIMIT, clamp_limit, parse_enum, parse_urgency

logger = logging.getLogger(__name__)

REQUIRED_LEAD_FIELDS = {
    "name": "name",
    "phone": "phone",
    "service_needed": "serviceNeeded",
}


def resolve_source(raw: Optional[str]) -> LeadSource:
    """Unknown or missing sources are recorded as WEBSITE, never rejected."""
    return parse_enum(LeadSource, raw) or LeadSource.WEBSITE


async def create_lead(db: AsyncSession, data: LeadCreate) -> Lead:
    missing = [label for field, label in REQUIRED_LEAD_FIELDS.items() if not getattr(data, field)]
    if missing:
        raise ValidationError.missing(missing)

    customer_id = None
    if data.customer_id:
        try:
            customer_id = uuid.UUID(data.customer_id)
        except ValueError:
            raise ValidationError(f"Invalid customerId: {data.customer_id}")
        result = await db.execute(
            select(User.id).where(User.id == customer_id, User.role == UserRole.CUSTOMER)
        )
        if result.scalar_one_or_none() is None:
            raise NotFoundError("Customer not found")

    lead = Lead(
        name=data.name,
        email=data.email,
        phone=data.phone,
        address=data.address,
        source=resolve_source(data.source),
        service_needed=data.service_needed,
        description=data.description,
        urgency=parse_urgency(data.urgency),
        estimated_value=data.estimated_value,
        customer_id=customer_id,
        status=LeadStatus.NEW,
    )

    try:
        db.add(lead)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Failed to create lead for %s", data.phone)
        raise PersistenceError("Failed to create lead")

    logger.info("Created lead %s: %s (%s) source=%s", lead.id, lead.name, lead.phone, lead.source.value)
    return await get_lead(db, lead.id)


async def get_lead(db: AsyncSession, lead_id: uuid.UUID) -> Lead:
    result = await db.execute(
        select(Lead)
        .options(selectinload(Lead.customer))
        .where(Lead.id == lead_id)
        .execution_options(populate_existing=True)
    )
    lead = result.scalar_one_or_none()
    if not lead:
        raise NotFoundError("Lead not found")
    return lead


async def list_leads(
    db: AsyncSession,
    status: Optional[str] = None,
    source: Optional[str] = None,
    limit: Optional[str] = None,
) -> Sequence[Lead]:
    """Newest leads first. Without ``limit`` the whole pipeline is returned."""
    query = select(Lead).options(selectinload(Lead.customer))

    status_filter = parse_enum(LeadStatus, status)
    if status_filter:
        query = query.where(Lead.status == status_filter)

    source_filter = parse_enum(LeadSource, source)
    if source_filter:
        query = query.where(Lead.source == source_filter)

    query = query.order_by(Lead.created_at.desc())

    take = clamp_limit(limit, default=None, maximum=MAX_LIMIT)
    if take:
        query = query.limit(take)

    result = await db.execute(query)
    return result.scalars().all()
