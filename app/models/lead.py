"""Lead model for the sales pipeline."""
import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Integer, Float, Enum, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from app.core.database import Base


class LeadSource(str, enum.Enum):
    """Lead source enum."""
    WEBSITE = "WEBSITE"
    PHONE = "PHONE"
    REFERRAL = "REFERRAL"
    GOOGLE_ADS = "GOOGLE_ADS"
    FACEBOOK = "FACEBOOK"
    YELP = "YELP"
    BBB = "BBB"
    WALK_IN = "WALK_IN"
    REPEAT = "REPEAT"


class LeadStatus(str, enum.Enum):
    """Lead status enum. WON and LOST are terminal."""
    NEW = "NEW"
    CONTACTED = "CONTACTED"
    QUALIFIED = "QUALIFIED"
    ESTIMATE_SENT = "ESTIMATE_SENT"
    FOLLOW_UP = "FOLLOW_UP"
    WON = "WON"
    LOST = "LOST"


class Lead(Base):
    """Lead model."""
    __tablename__ = "leads"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    customer_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=False)
    address = Column(String(500), nullable=True)
    service_needed = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    source = Column(Enum(LeadSource), nullable=False, default=LeadSource.WEBSITE)
    status = Column(Enum(LeadStatus), nullable=False, default=LeadStatus.NEW, index=True)
    urgency = Column(Integer, nullable=True)  # 1-10
    estimated_value = Column(Float, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    customer = relationship("User")
