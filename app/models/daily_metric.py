"""Precomputed daily business summary, one row per calendar day."""

import uuid
from sqlalchemy import Column, DateTime, Float, Integer
from sqlalchemy.dialects.postgresql import UUID
from app.core.database import Base


class DailyMetric(Base):
    __tablename__ = "daily_metrics"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    date = Column(DateTime, nullable=False, unique=True, index=True)
    revenue = Column(Float, nullable=False, default=0)
    jobs_completed = Column(Integer, nullable=False, default=0)
    jobs_scheduled = Column(Integer, nullable=False, default=0)
    leads_received = Column(Integer, nullable=False, default=0)
    leads_converted = Column(Integer, nullable=False, default=0)
    missed_calls = Column(Integer, nullable=False, default=0)
    avg_ticket = Column(Float, nullable=False, default=0)
    tech_utilization = Column(Float, nullable=False, default=0)
    membership_sales = Column(Integer, nullable=False, default=0)
    install_revenue = Column(Float, nullable=False, default=0)
    service_revenue = Column(Float, nullable=False, default=0)
