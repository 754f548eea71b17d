"""Technician profile: skills, availability and performance counters."""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Boolean, Float, Integer, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.types import JSON
from sqlalchemy.orm import relationship
from app.core.database import Base


class TechProfile(Base):
    __tablename__ = "tech_profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    skills = Column(JSON, nullable=False, default=list)
    certifications = Column(JSON, nullable=False, default=list)
    hire_date = Column(DateTime, nullable=True)
    truck_number = Column(String(20), nullable=True)
    current_lat = Column(Float, nullable=True)
    current_lng = Column(Float, nullable=True)
    is_available = Column(Boolean, nullable=False, default=True, index=True)

    # Read-only aggregates, maintained outside this service
    avg_rating = Column(Float, nullable=True)
    jobs_completed = Column(Integer, nullable=False, default=0)
    revenue_generated = Column(Float, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="tech_profile")
