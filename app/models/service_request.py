"""Raw contact-form submissions from the public site."""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.dialects.postgresql import UUID
from app.core.database import Base


class ServiceRequest(Base):
    __tablename__ = "service_requests"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    address = Column(String(500), nullable=True)
    service_type = Column(String(255), nullable=False)
    urgency = Column(String(20), nullable=False, default="normal")  # low, normal, high, emergency
    description = Column(Text, nullable=False)
    preferred_date = Column(String(50), nullable=True)
    preferred_time = Column(String(50), nullable=True)
    status = Column(String(20), nullable=False, default="new", index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
