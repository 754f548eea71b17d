"""Shared schema base and the nested summaries embedded in responses."""

from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python, readable from ORM rows."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def blank_to_none(value):
    """Form posts send "" for untouched optional inputs."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class PersonSummary(ApiModel):
    id: UUID
    name: str
    email: str
    phone: Optional[str] = None


class PropertySummary(ApiModel):
    id: UUID
    name: str
    address: str
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None


class PropertyOut(PropertySummary):
    property_type: Optional[str] = None


class UnitSummary(ApiModel):
    id: UUID
    unit_type: str
    brand: Optional[str] = None
    model: Optional[str] = None
    serial_number: Optional[str] = None


class MessageResponse(ApiModel):
    message: str
