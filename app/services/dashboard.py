"""Dashboard figures: the daily metric time series and headline stats.

Day boundaries are local server time.
"""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.daily_metric import DailyMetric
from app.models.invoice import Invoice, InvoiceStatus
from app.models.job import Job, JobStatus
from app.models.lead import Lead, LeadStatus
from app.models.membership import Membership, MembershipStatus
from app.models.tech_profile import TechProfile
from app.schemas.dashboard import DashboardStats
from app.services.parsing import clamp_limit, days_ago_start, start_of_day

DEFAULT_METRIC_DAYS = 30
MAX_METRIC_DAYS = 365

OPEN_LEAD_STATUSES = (LeadStatus.NEW, LeadStatus.CONTACTED)


def metrics_cutoff(days: Optional[str], now: Optional[datetime] = None) -> datetime:
    window = clamp_limit(days, DEFAULT_METRIC_DAYS, MAX_METRIC_DAYS)
    return days_ago_start(window, now)


async def list_daily_metrics(db: AsyncSession, days: Optional[str] = None) -> Sequence[DailyMetric]:
    """Rows on or after the cutoff, oldest first. Missing days stay missing."""
    result = await db.execute(
        select(DailyMetric)
        .where(DailyMetric.date >= metrics_cutoff(days))
        .order_by(DailyMetric.date.asc())
    )
    return result.scalars().all()


async def scalar_or_zero(db: AsyncSession, query) -> float:
    result = await db.execute(query)
    return result.scalar() or 0


def _paid_between(start: datetime, end: datetime):
    return select(func.sum(Invoice.total)).where(
        Invoice.status == InvoiceStatus.PAID,
        Invoice.paid_at >= start,
        Invoice.paid_at < end,
    )


async def dashboard_stats(db: AsyncSession, now: Optional[datetime] = None) -> DashboardStats:
    today_start = start_of_day(now or datetime.now())
    today_end = today_start + timedelta(days=1)
    week_ago = today_start - timedelta(days=7)
    month_ago = today_start - timedelta(days=30)

    revenue_today = await scalar_or_zero(db, _paid_between(today_start, today_end))
    weekly_revenue = await scalar_or_zero(db, _paid_between(week_ago, today_end))
    monthly_revenue = await scalar_or_zero(db, _paid_between(month_ago, today_end))

    jobs_in_progress = await scalar_or_zero(db, select(func.count(Job.id)).where(Job.status == JobStatus.IN_PROGRESS))
    jobs_today = await scalar_or_zero(
        db,
        select(func.count(Job.id)).where(Job.scheduled_date >= today_start, Job.scheduled_date < today_end),
    )
    active_techs = await scalar_or_zero(db, select(func.count(TechProfile.id)).where(TechProfile.is_available.is_(True)))
    open_leads = await scalar_or_zero(db, select(func.count(Lead.id)).where(Lead.status.in_(OPEN_LEAD_STATUSES)))
    won_leads = await scalar_or_zero(db, select(func.count(Lead.id)).where(Lead.status == LeadStatus.WON))
    total_leads = await scalar_or_zero(db, select(func.count(Lead.id)))
    active_members = await scalar_or_zero(
        db, select(func.count(Membership.id)).where(Membership.status == MembershipStatus.ACTIVE)
    )
    avg_ticket = await scalar_or_zero(db, select(func.avg(Invoice.total)).where(Invoice.status == InvoiceStatus.PAID))

    conversion_rate = round(won_leads / total_leads * 100, 2) if total_leads else 0.0

    return DashboardStats(
        revenue_today=revenue_today,
        jobs_in_progress=jobs_in_progress,
        active_techs=active_techs,
        open_leads=open_leads,
        jobs_today=jobs_today,
        weekly_revenue=weekly_revenue,
        monthly_revenue=monthly_revenue,
        conversion_rate=conversion_rate,
        active_members=active_members,
        avg_ticket=round(float(avg_ticket), 2),
    )
