"""Dashboard endpoints.

- GET /api/v1/dashboard/metrics → Daily metric rows for the last N days
- GET /api/v1/dashboard/stats → Headline figures for today
- GET /api/v1/dashboard/analytics → Thirty-day chart groupings (staff only)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.deps import require_staff
from app.models.user import User
from app.schemas.dashboard import DailyMetricOut, DashboardAnalytics, DashboardStats
from app.services.analytics import dashboard_analytics
from app.services.dashboard import dashboard_stats, list_daily_metrics

router = APIRouter()


@router.get("/metrics", response_model=List[DailyMetricOut])
async def get_metrics(
    days: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """``days`` defaults to 30 and is capped at 365."""
    return await list_daily_metrics(db, days)


@router.get("/stats", response_model=DashboardStats)
async def get_stats(db: AsyncSession = Depends(get_db)):
    return await dashboard_stats(db)


@router.get("/analytics", response_model=DashboardAnalytics)
async def get_analytics(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    return await dashboard_analytics(db)
