"""Jobs endpoints.

- GET /api/v1/jobs → List jobs (filters: status, type, techId, limit, view)
- POST /api/v1/jobs → Create a job (staff only)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.deps import require_staff
from app.models.user import User
from app.schemas.job import JobCreate, JobOut
from app.services.jobs import create_job, list_jobs, list_unassigned_jobs

router = APIRouter()
logger = logging.getLogger(__name__)

UNASSIGNED_VIEW = "unassigned"


@router.get("", response_model=List[JobOut])
async def get_jobs(
    status: Optional[str] = Query(None),
    job_type: Optional[str] = Query(None, alias="type"),
    tech_id: Optional[str] = Query(None, alias="techId"),
    limit: Optional[str] = Query(None),
    view: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List jobs, newest first. Unrecognized filter values are ignored."""
    if view == UNASSIGNED_VIEW:
        return await list_unassigned_jobs(db, limit)
    return await list_jobs(db, status=status, job_type=job_type, technician_id=tech_id, limit=limit)


@router.post("", response_model=JobOut, status_code=201)
async def post_job(
    data: JobCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    job = await create_job(db, data)
    logger.info("Job %s created by %s", job.job_number, current_user.email)
    return job
