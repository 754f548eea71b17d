"""Pydantic schemas for public service requests."""

from typing import Optional
from uuid import UUID
from app.schemas.common import ApiModel


class ServiceRequestCreate(ApiModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    service_type: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    urgency: Optional[str] = None  # low, normal, high, emergency
    preferred_date: Optional[str] = None
    preferred_time: Optional[str] = None


class ServiceRequestAccepted(ApiModel):
    """Acknowledgement returned to the submitter; the paired lead stays internal."""
    message: str
    service_request_id: UUID
