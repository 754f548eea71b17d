"""Tests for the technician listing."""

import pytest

from app.models.job import Job, JobStatus, JobType
from app.models.tech_profile import TechProfile
from app.models.user import User, UserRole


@pytest.mark.asyncio
async def test_job_count_includes_every_status(client, db, customer, technician):
    for number, status in (("FDP-2026-001", JobStatus.COMPLETED), ("FDP-2026-002", JobStatus.CANCELLED)):
        db.add(Job(
            job_number=number,
            title="Service call",
            description="-",
            job_type=JobType.REPAIR,
            status=status,
            customer_id=customer["user"].id,
            property_id=customer["property"].id,
            technician_id=technician.id,
        ))
    await db.commit()

    resp = await client.get("/api/v1/technicians")

    assert resp.status_code == 200
    [data] = resp.json()
    assert data["name"] == "Mike Torres"
    assert data["jobCount"] == 2
    assert data["techProfile"]["truckNumber"] == "T-12"
    assert data["techProfile"]["skills"] == ["refrigeration"]


@pytest.mark.asyncio
async def test_available_filter(client, db, technician):
    busy = User(name="Alex Reyes", email="alex.reyes@fdpierce.com", role=UserRole.TECHNICIAN)
    db.add(busy)
    await db.flush()
    db.add(TechProfile(user_id=busy.id, is_available=False))
    await db.commit()

    resp = await client.get("/api/v1/technicians")
    assert [t["name"] for t in resp.json()] == ["Alex Reyes", "Mike Torres"]
    assert resp.json()[0]["jobCount"] == 0

    resp = await client.get("/api/v1/technicians", params={"available": "false"})
    assert [t["name"] for t in resp.json()] == ["Alex Reyes"]

    resp = await client.get("/api/v1/technicians", params={"available": "true"})
    assert [t["name"] for t in resp.json()] == ["Mike Torres"]

    resp = await client.get("/api/v1/technicians", params={"available": "maybe"})
    assert len(resp.json()) == 2
