"""Maintenance membership plans held by customers."""

import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, DateTime, Float, Integer, ForeignKey, Text, Boolean, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.core.database import Base


class MembershipPlan(str, enum.Enum):
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"


class MembershipStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    CANCELLED = "CANCELLED"
    PENDING = "PENDING"


class Membership(Base):
    __tablename__ = "memberships"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    customer_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    plan = Column(SQLEnum(MembershipPlan), nullable=False)
    status = Column(SQLEnum(MembershipStatus), nullable=False, default=MembershipStatus.ACTIVE, index=True)
    start_date = Column(DateTime, nullable=False, default=datetime.utcnow)
    renewal_date = Column(DateTime, nullable=True)
    monthly_rate = Column(Float, nullable=False, default=0)
    visits_per_year = Column(Integer, nullable=False, default=0)
    visits_used = Column(Integer, nullable=False, default=0)
    discount = Column(Float, nullable=False, default=0)
    priority = Column(Boolean, nullable=False, default=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    customer = relationship("User", back_populates="memberships")
