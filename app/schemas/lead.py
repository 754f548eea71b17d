"""Pydantic schemas for Leads."""

from datetime import datetime
from uuid import UUID
from pydantic import field_validator
from typing import Optional, Union
from app.models.lead import LeadSource, LeadStatus
from app.schemas.common import ApiModel, PersonSummary, blank_to_none


class LeadCreate(ApiModel):
    """Schema for creating a lead."""
    name: Optional[str] = None
    phone: Optional[str] = None
    service_needed: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    source: Optional[str] = None  # unrecognized values fall back to WEBSITE
    description: Optional[str] = None
    urgency: Optional[Union[int, float, str]] = None
    estimated_value: Optional[float] = None
    customer_id: Optional[str] = None

    @field_validator("email", "address", "description", "estimated_value", "customer_id", mode="before")
    @classmethod
    def blank_optionals(cls, value):
        return blank_to_none(value)


class LeadOut(ApiModel):
    """Schema for returning lead details."""
    id: UUID
    name: str
    email: Optional[str] = None
    phone: str
    address: Optional[str] = None
    service_needed: str
    description: Optional[str] = None
    source: LeadSource
    status: LeadStatus
    urgency: Optional[int] = None
    estimated_value: Optional[float] = None
    customer_id: Optional[UUID] = None
    customer: Optional[PersonSummary] = None
    created_at: datetime
    updated_at: datetime
