"""User model: staff, technicians and customers share one table."""

import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Boolean, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.core.database import Base


class UserRole(str, enum.Enum):
    OWNER = "OWNER"
    ADMIN = "ADMIN"
    DISPATCHER = "DISPATCHER"
    TECHNICIAN = "TECHNICIAN"
    CUSTOMER = "CUSTOMER"


STAFF_ROLES = (UserRole.OWNER, UserRole.ADMIN, UserRole.DISPATCHER)


class User(Base):
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(50), nullable=True)
    avatar = Column(String, nullable=True)
    # Only accounts that can log in carry a password
    hashed_password = Column(String, nullable=True)
    role = Column(SQLEnum(UserRole), nullable=False, default=UserRole.CUSTOMER, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    last_login_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Customer side
    properties = relationship("Property", back_populates="customer", order_by="Property.name")
    memberships = relationship("Membership", back_populates="customer")
    invoices = relationship("Invoice", back_populates="customer")
    customer_jobs = relationship("Job", foreign_keys="Job.customer_id", back_populates="customer")

    # Technician side
    tech_profile = relationship("TechProfile", back_populates="user", uselist=False)
    technician_jobs = relationship("Job", foreign_keys="Job.technician_id", back_populates="technician")
