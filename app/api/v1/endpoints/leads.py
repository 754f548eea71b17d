"""Leads endpoints for lead capture and the sales pipeline.

- GET /api/v1/leads → List leads (filters: status, source, limit)
- POST /api/v1/leads → Create new lead (staff only)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.deps import require_staff
from app.models.user import User
from app.schemas.lead import LeadCreate, LeadOut
from app.services.leads import create_lead, list_leads

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[LeadOut])
async def get_leads(
    status: Optional[str] = Query(None),
    source: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await list_leads(db, status=status, source=source, limit=limit)


@router.post("", response_model=LeadOut, status_code=201)
async def post_lead(
    data: LeadCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    return await create_lead(db, data)
