"""Customer and technician read models."""

from datetime import datetime
from typing import Optional
from uuid import UUID
from app.models.membership import MembershipPlan, MembershipStatus
from app.schemas.common import ApiModel, PersonSummary, PropertyOut


class MembershipOut(ApiModel):
    id: UUID
    plan: MembershipPlan
    status: MembershipStatus
    start_date: datetime
    renewal_date: Optional[datetime] = None
    monthly_rate: float
    visits_per_year: int
    visits_used: int
    discount: float


class MembershipListOut(MembershipOut):
    priority: bool
    notes: Optional[str] = None
    created_at: datetime
    customer: PersonSummary


class MembershipTier(ApiModel):
    plan: MembershipPlan
    count: int
    monthly_revenue: float


class MembershipSummary(ApiModel):
    """Program totals; revenue, visits and tiers count ACTIVE memberships only."""
    active_members: int
    monthly_revenue: float
    renewal_rate: float
    visits_remaining: int
    upcoming_renewals: int
    tiers: list[MembershipTier]


class CustomerOut(ApiModel):
    id: UUID
    name: str
    email: str
    phone: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime
    properties: list[PropertyOut] = []
    memberships: list[MembershipOut] = []  # ACTIVE only
    invoice_count: int = 0  # PAID invoices only
    total_spent: float = 0.0


class TechProfileOut(ApiModel):
    id: UUID
    skills: list[str] = []
    certifications: list[str] = []
    hire_date: Optional[datetime] = None
    truck_number: Optional[str] = None
    current_lat: Optional[float] = None
    current_lng: Optional[float] = None
    is_available: bool
    avg_rating: Optional[float] = None
    jobs_completed: int
    revenue_generated: float


class TechnicianOut(ApiModel):
    id: UUID
    name: str
    email: str
    phone: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime
    tech_profile: Optional[TechProfileOut] = None
    job_count: int = 0
