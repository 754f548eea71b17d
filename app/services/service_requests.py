"""Public service request submission.

Each submission stores the raw request and a matching sales lead. Both rows
are written in one transaction; a failure on either insert leaves neither.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import PersistenceError, ValidationError
from app.models.lead import Lead, LeadSource, LeadStatus
from app.models.service_request import ServiceRequest
from app.schemas.service_request import ServiceRequestCreate
from app.services.parsing import urgency_level_to_score

logger = logging.getLogger(__name__)

REQUIRED_REQUEST_FIELDS = {
    "name": "name",
    "email": "email",
    "phone": "phone",
    "service_type": "serviceType",
    "description": "description",
}

DEFAULT_URGENCY_LEVEL = "normal"
ACKNOWLEDGEMENT = "Service request submitted successfully. We will contact you shortly."


@dataclass
class SubmissionResult:
    service_request: ServiceRequest
    lead: Lead


def build_lead(data: ServiceRequestCreate) -> Lead:
    return Lead(
        name=data.name,
        email=data.email,
        phone=data.phone,
        address=data.address,
        source=LeadSource.WEBSITE,
        service_needed=data.service_type,
        description=data.description,
        urgency=urgency_level_to_score(data.urgency),
        status=LeadStatus.NEW,
    )


async def submit_service_request(db: AsyncSession, data: ServiceRequestCreate) -> SubmissionResult:
    missing = [label for field, label in REQUIRED_REQUEST_FIELDS.items() if not getattr(data, field)]
    if missing:
        raise ValidationError.missing(missing)

    service_request = ServiceRequest(
        name=data.name,
        email=data.email,
        phone=data.phone,
        address=data.address,
        service_type=data.service_type,
        urgency=data.urgency or DEFAULT_URGENCY_LEVEL,
        description=data.description,
        preferred_date=data.preferred_date,
        preferred_time=data.preferred_time,
        status="new",
    )
    lead = build_lead(data)

    try:
        db.add(service_request)
        await db.flush()  # surface a failing first insert before the lead is queued
        db.add(lead)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Failed to submit service request from %s", data.email)
        raise PersistenceError("Failed to submit service request")

    logger.info(
        "Service request %s submitted by %s; lead %s urgency=%s",
        service_request.id,
        data.email,
        lead.id,
        lead.urgency,
    )
    return SubmissionResult(service_request=service_request, lead=lead)
