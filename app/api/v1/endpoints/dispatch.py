from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.dashboard import DispatchBoard
from app.services.dispatch import dispatch_board

router = APIRouter()


@router.get("", response_model=DispatchBoard)
async def get_dispatch_board(
    date: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to today"),
    db: AsyncSession = Depends(get_db),
):
    return await dispatch_board(db, date)
