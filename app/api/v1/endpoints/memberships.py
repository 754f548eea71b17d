"""Membership program endpoints (staff only).

- GET /api/v1/memberships → List memberships with their customer (filters: status, plan)
- GET /api/v1/memberships/summary → Active members, recurring revenue, renewals, tiers
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.deps import require_staff
from app.schemas.customer import MembershipListOut, MembershipSummary
from app.services.memberships import list_memberships, membership_summary

router = APIRouter(dependencies=[Depends(require_staff)])


@router.get("", response_model=List[MembershipListOut])
async def get_memberships(
    status: Optional[str] = Query(None),
    plan: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await list_memberships(db, status=status, plan=plan)


@router.get("/summary", response_model=MembershipSummary)
async def get_membership_summary(db: AsyncSession = Depends(get_db)):
    return await membership_summary(db)
