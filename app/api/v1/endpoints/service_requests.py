"""Public service request form submission."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.schemas.service_request import ServiceRequestAccepted, ServiceRequestCreate
from app.services.service_requests import ACKNOWLEDGEMENT, submit_service_request

router = APIRouter()


@router.post("/service-request", response_model=ServiceRequestAccepted, status_code=201)
async def post_service_request(data: ServiceRequestCreate, db: AsyncSession = Depends(get_db)):
    """Store the request and open a WEBSITE lead for it."""
    result = await submit_service_request(db, data)
    return ServiceRequestAccepted(
        message=ACKNOWLEDGEMENT,
        service_request_id=result.service_request.id,
    )
