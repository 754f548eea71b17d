"""Pydantic schemas for Jobs."""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import field_validator
from app.models.job import JobPriority, JobStatus, JobType
from app.schemas.common import ApiModel, PersonSummary, PropertySummary, UnitSummary, blank_to_none


class JobCreate(ApiModel):
    """Body of POST /jobs.

    Required fields are checked by the job service so that every missing
    field is reported in one 400 response.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    job_type: Optional[str] = None
    priority: Optional[str] = None
    customer_id: Optional[str] = None
    property_id: Optional[str] = None
    unit_id: Optional[str] = None
    technician_id: Optional[str] = None
    scheduled_date: Optional[datetime] = None
    scheduled_start: Optional[str] = None
    scheduled_end: Optional[str] = None
    estimated_cost: Optional[float] = None

    @field_validator(
        "priority", "unit_id", "technician_id", "scheduled_date",
        "scheduled_start", "scheduled_end", "estimated_cost",
        mode="before",
    )
    @classmethod
    def blank_optionals(cls, value):
        return blank_to_none(value)


class JobOut(ApiModel):
    id: UUID
    job_number: str
    title: str
    description: str
    job_type: JobType
    priority: JobPriority
    status: JobStatus
    customer_id: UUID
    property_id: UUID
    unit_id: Optional[UUID] = None
    technician_id: Optional[UUID] = None
    scheduled_date: Optional[datetime] = None
    scheduled_start: Optional[str] = None
    scheduled_end: Optional[str] = None
    estimated_cost: Optional[float] = None
    created_at: datetime
    updated_at: datetime

    customer: PersonSummary
    technician: Optional[PersonSummary] = None
    property: PropertySummary
    unit: Optional[UnitSummary] = None
