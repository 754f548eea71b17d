"""Membership program listing and totals."""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.membership import Membership, MembershipPlan, MembershipStatus
from app.schemas.customer import MembershipSummary, MembershipTier
from app.services.dashboard import scalar_or_zero
from app.services.parsing import parse_enum

RENEWAL_WINDOW_DAYS = 30


async def list_memberships(
    db: AsyncSession,
    status: Optional[str] = None,
    plan: Optional[str] = None,
) -> Sequence[Membership]:
    """Soonest renewal first; memberships without a renewal date come last.

    Unrecognized filter values are ignored.
    """
    query = select(Membership).options(selectinload(Membership.customer))

    status_filter = parse_enum(MembershipStatus, status)
    if status_filter:
        query = query.where(Membership.status == status_filter)

    plan_filter = parse_enum(MembershipPlan, plan)
    if plan_filter:
        query = query.where(Membership.plan == plan_filter)

    query = query.order_by(Membership.renewal_date.asc().nulls_last(), Membership.created_at.asc())
    result = await db.execute(query)
    return result.scalars().all()


async def membership_summary(db: AsyncSession, now: Optional[datetime] = None) -> MembershipSummary:
    now = now or datetime.now()
    active = Membership.status == MembershipStatus.ACTIVE

    total = await scalar_or_zero(db, select(func.count(Membership.id)))
    expired = await scalar_or_zero(
        db, select(func.count(Membership.id)).where(Membership.status == MembershipStatus.EXPIRED)
    )
    visits_remaining = await scalar_or_zero(
        db, select(func.sum(Membership.visits_per_year - Membership.visits_used)).where(active)
    )
    upcoming_renewals = await scalar_or_zero(
        db,
        select(func.count(Membership.id)).where(
            active,
            Membership.renewal_date >= now,
            Membership.renewal_date <= now + timedelta(days=RENEWAL_WINDOW_DAYS),
        ),
    )

    result = await db.execute(
        select(Membership.plan, func.count(Membership.id), func.sum(Membership.monthly_rate))
        .where(active)
        .group_by(Membership.plan)
    )
    by_plan = {plan: (count, revenue or 0) for plan, count, revenue in result.all()}
    tiers = [
        MembershipTier(
            plan=plan,
            count=by_plan.get(plan, (0, 0))[0],
            monthly_revenue=round(float(by_plan.get(plan, (0, 0))[1]), 2),
        )
        for plan in MembershipPlan
    ]

    return MembershipSummary(
        active_members=sum(tier.count for tier in tiers),
        monthly_revenue=round(sum(tier.monthly_revenue for tier in tiers), 2),
        renewal_rate=round((total - expired) / total * 100, 2) if total else 0.0,
        visits_remaining=visits_remaining,
        upcoming_renewals=upcoming_renewals,
        tiers=tiers,
    )
