from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.customer import CustomerOut
from app.services.customers import list_customers

router = APIRouter()


@router.get("", response_model=List[CustomerOut])
async def get_customers(
    limit: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Customers by name with properties, active memberships and PAID spend."""
    return await list_customers(db, limit)
