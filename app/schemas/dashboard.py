"""Dashboard and dispatch board schemas."""

from datetime import date, datetime
from typing import Optional
from uuid import UUID
from app.models.job import JobType
from app.models.lead import LeadSource
from app.schemas.common import ApiModel
from app.schemas.job import JobOut


class DailyMetricOut(ApiModel):
    id: UUID
    date: datetime
    revenue: float
    jobs_completed: int
    jobs_scheduled: int
    leads_received: int
    leads_converted: int
    missed_calls: int
    avg_ticket: float
    tech_utilization: float
    membership_sales: int
    install_revenue: float
    service_revenue: float


class DashboardStats(ApiModel):
    revenue_today: float
    jobs_in_progress: int
    active_techs: int
    open_leads: int
    jobs_today: int
    weekly_revenue: float
    monthly_revenue: float
    conversion_rate: float
    active_members: int
    avg_ticket: float


class DispatchProfile(ApiModel):
    id: UUID
    truck_number: Optional[str] = None
    is_available: bool
    skills: list[str] = []


class DispatchTechnician(ApiModel):
    id: UUID
    name: str
    tech_profile: Optional[DispatchProfile] = None


class DispatchBoard(ApiModel):
    date: date
    jobs: list[JobOut]
    unassigned: list[JobOut]
    technicians: list[DispatchTechnician]


class JobTypeCount(ApiModel):
    job_type: JobType
    count: int


class LeadSourceCount(ApiModel):
    source: LeadSource
    count: int
    estimated_value: float


class TechPerformance(ApiModel):
    id: UUID
    name: str
    jobs_completed: int
    revenue_generated: float
    avg_rating: Optional[float] = None


class ConversionFunnel(ApiModel):
    leads: int
    estimates: int
    booked: int
    installs: int


class ZipCodeCount(ApiModel):
    zip: str
    count: int


class ServiceCount(ApiModel):
    title: str
    count: int
    value: float


class DashboardAnalytics(ApiModel):
    since: datetime
    total_revenue: float
    avg_daily_revenue: float
    jobs_completed: int
    avg_ticket: float
    lead_conversion_rate: float
    total_customers: int
    repeat_customers: int
    customer_retention: float
    jobs_by_type: list[JobTypeCount]
    leads_by_source: list[LeadSourceCount]
    technicians: list[TechPerformance]
    funnel: ConversionFunnel
    zip_codes: list[ZipCodeCount]
    top_services: list[ServiceCount]
