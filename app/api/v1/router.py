from fastapi import APIRouter
from app.api.v1.endpoints import (
    auth,
    customers,
    dashboard,
    dispatch,
    jobs,
    leads,
    memberships,
    service_requests,
    technicians,
)

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
api_router.include_router(leads.router, prefix="/leads", tags=["leads"])
api_router.include_router(service_requests.router, tags=["service-requests"])
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(technicians.router, prefix="/technicians", tags=["technicians"])
api_router.include_router(memberships.router, prefix="/memberships", tags=["memberships"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(dispatch.router, prefix="/dispatch", tags=["dispatch"])
