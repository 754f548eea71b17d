"""Job (work order) model and the per-year job number counter."""

import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Float, Integer, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.core.database import Base


class JobType(str, enum.Enum):
    REPAIR = "REPAIR"
    MAINTENANCE = "MAINTENANCE"
    INSPECTION = "INSPECTION"
    EMERGENCY = "EMERGENCY"
    INSTALLATION = "INSTALLATION"
    WARRANTY = "WARRANTY"
    CALLBACK = "CALLBACK"
    ESTIMATE = "ESTIMATE"


class JobPriority(str, enum.Enum):
    """Declared lowest to highest; sorting by priority uses this order."""
    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    URGENT = "URGENT"
    EMERGENCY = "EMERGENCY"


class JobStatus(str, enum.Enum):
    PENDING = "PENDING"
    SCHEDULED = "SCHEDULED"
    EN_ROUTE = "EN_ROUTE"
    IN_PROGRESS = "IN_PROGRESS"
    ON_HOLD = "ON_HOLD"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Job(Base):
    __tablename__ = "jobs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    job_number = Column(String(32), unique=True, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    job_type = Column(SQLEnum(JobType), nullable=False, index=True)
    priority = Column(SQLEnum(JobPriority), nullable=False, default=JobPriority.NORMAL)
    status = Column(SQLEnum(JobStatus), nullable=False, default=JobStatus.PENDING, index=True)

    customer_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    property_id = Column(UUID(as_uuid=True), ForeignKey("properties.id"), nullable=False, index=True)
    unit_id = Column(UUID(as_uuid=True), ForeignKey("units.id", ondelete="SET NULL"), nullable=True)
    technician_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    scheduled_date = Column(DateTime, nullable=True, index=True)
    scheduled_start = Column(String(10), nullable=True)  # "08:00"
    scheduled_end = Column(String(10), nullable=True)
    estimated_cost = Column(Float, nullable=True)
    completed_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    customer = relationship("User", foreign_keys=[customer_id], back_populates="customer_jobs")
    technician = relationship("User", foreign_keys=[technician_id], back_populates="technician_jobs")
    property = relationship("Property")
    unit = relationship("Unit")


class JobNumberSequence(Base):
    """Last issued job sequence value for one calendar year."""
    __tablename__ = "job_number_sequences"

    year = Column(Integer, primary_key=True, autoincrement=False)
    last_value = Column(Integer, nullable=False, default=0)
