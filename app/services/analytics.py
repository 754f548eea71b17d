"""Thirty-day analytics behind the dashboard charts.

Revenue and lead figures are summed from the daily metric rows. Job and
lead groupings cover rows created since the cutoff. The technician
leaderboard, zip codes and customer retention are all-time.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.daily_metric import DailyMetric
from app.models.invoice import Invoice, InvoiceStatus
from app.models.job import Job, JobStatus, JobType
from app.models.lead import Lead
from app.models.property import Property
from app.models.tech_profile import TechProfile
from app.models.user import User, UserRole
from app.schemas.dashboard import (
    ConversionFunnel,
    DashboardAnalytics,
    JobTypeCount,
    LeadSourceCount,
    ServiceCount,
    TechPerformance,
    ZipCodeCount,
)
from app.services.dashboard import scalar_or_zero
from app.services.parsing import days_ago_start

ANALYTICS_DAYS = 30
LEADERBOARD_SIZE = 10
TOP_GROUPS = 8

BOOKED_STATUSES = (JobStatus.SCHEDULED, JobStatus.IN_PROGRESS, JobStatus.COMPLETED)


def _percent(part: float, whole: float) -> float:
    return round(part / whole * 100, 2) if whole else 0.0


async def _jobs_by_type(db: AsyncSession, since: datetime) -> list[JobTypeCount]:
    count = func.count(Job.id)
    result = await db.execute(
        select(Job.job_type, count)
        .where(Job.created_at >= since)
        .group_by(Job.job_type)
        .order_by(count.desc(), Job.job_type.asc())
    )
    return [JobTypeCount(job_type=job_type, count=n) for job_type, n in result.all()]


async def _leads_by_source(db: AsyncSession, since: datetime) -> list[LeadSourceCount]:
    count = func.count(Lead.id)
    result = await db.execute(
        select(Lead.source, count, func.coalesce(func.sum(Lead.estimated_value), 0))
        .where(Lead.created_at >= since)
        .group_by(Lead.source)
        .order_by(count.desc(), Lead.source.asc())
    )
    return [
        LeadSourceCount(source=source, count=n, estimated_value=round(float(value), 2))
        for source, n, value in result.all()
    ]


async def _leaderboard(db: AsyncSession) -> list[TechPerformance]:
    """Technicians with a profile, highest revenue first."""
    result = await db.execute(
        select(
            User.id,
            User.name,
            TechProfile.jobs_completed,
            TechProfile.revenue_generated,
            TechProfile.avg_rating,
        )
        .join(TechProfile, TechProfile.user_id == User.id)
        .where(User.role == UserRole.TECHNICIAN)
        .order_by(TechProfile.revenue_generated.desc(), User.name.asc())
        .limit(LEADERBOARD_SIZE)
    )
    return [
        TechPerformance(
            id=row.id,
            name=row.name,
            jobs_completed=row.jobs_completed,
            revenue_generated=row.revenue_generated,
            avg_rating=row.avg_rating,
        )
        for row in result.all()
    ]


async def _zip_codes(db: AsyncSession) -> list[ZipCodeCount]:
    count = func.count(Property.id)
    result = await db.execute(
        select(Property.zip, count)
        .where(Property.zip.is_not(None), Property.zip != "")
        .group_by(Property.zip)
        .order_by(count.desc(), Property.zip.asc())
        .limit(TOP_GROUPS)
    )
    return [ZipCodeCount(zip=zip_code, count=n) for zip_code, n in result.all()]


async def _top_services(db: AsyncSession, since: datetime) -> list[ServiceCount]:
    count = func.count(Job.id)
    result = await db.execute(
        select(Job.title, count, func.coalesce(func.sum(Job.estimated_cost), 0))
        .where(Job.created_at >= since)
        .group_by(Job.title)
        .order_by(count.desc(), Job.title.asc())
        .limit(TOP_GROUPS)
    )
    return [
        ServiceCount(title=title, count=n, value=round(float(value), 2))
        for title, n, value in result.all()
    ]


async def _funnel(db: AsyncSession, since: datetime, leads_received: int) -> ConversionFunnel:
    recent = Job.created_at >= since
    estimates = await scalar_or_zero(
        db, select(func.count(Job.id)).where(recent, Job.job_type == JobType.ESTIMATE)
    )
    booked = await scalar_or_zero(
        db, select(func.count(Job.id)).where(recent, Job.status.in_(BOOKED_STATUSES))
    )
    installs = await scalar_or_zero(
        db,
        select(func.count(Job.id)).where(
            recent, Job.job_type == JobType.INSTALLATION, Job.status == JobStatus.COMPLETED
        ),
    )
    return ConversionFunnel(leads=leads_received, estimates=estimates, booked=booked, installs=installs)


async def dashboard_analytics(db: AsyncSession, now: Optional[datetime] = None) -> DashboardAnalytics:
    since = days_ago_start(ANALYTICS_DAYS, now)

    metric_result = await db.execute(
        select(
            func.count(DailyMetric.id),
            func.coalesce(func.sum(DailyMetric.revenue), 0),
            func.coalesce(func.sum(DailyMetric.jobs_completed), 0),
            func.coalesce(func.sum(DailyMetric.leads_received), 0),
            func.coalesce(func.sum(DailyMetric.leads_converted), 0),
        ).where(DailyMetric.date >= since)
    )
    days, revenue, jobs_completed, leads_received, leads_converted = metric_result.one()
    revenue = float(revenue)

    total_customers = await scalar_or_zero(
        db, select(func.count(User.id)).where(User.role == UserRole.CUSTOMER)
    )
    repeat_customers = await scalar_or_zero(
        db,
        select(func.count(func.distinct(Invoice.customer_id)))
        .join(User, User.id == Invoice.customer_id)
        .where(User.role == UserRole.CUSTOMER, Invoice.status == InvoiceStatus.PAID),
    )

    return DashboardAnalytics(
        since=since,
        total_revenue=round(revenue, 2),
        avg_daily_revenue=round(revenue / days, 2) if days else 0.0,
        jobs_completed=jobs_completed,
        avg_ticket=round(revenue / jobs_completed, 2) if jobs_completed else 0.0,
        lead_conversion_rate=_percent(leads_converted, leads_received),
        total_customers=total_customers,
        repeat_customers=repeat_customers,
        customer_retention=_percent(repeat_customers, total_customers),
        jobs_by_type=await _jobs_by_type(db, since),
        leads_by_source=await _leads_by_source(db, since),
        technicians=await _leaderboard(db),
        funnel=await _funnel(db, since, leads_received),
        zip_codes=await _zip_codes(db),
        top_services=await _top_services(db, since),
    )
