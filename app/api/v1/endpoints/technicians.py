from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.customer import TechnicianOut
from app.services.technicians import list_technicians

router = APIRouter()


@router.get("", response_model=List[TechnicianOut])
async def get_technicians(
    available: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await list_technicians(db, available)
