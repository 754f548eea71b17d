"""Tests for dashboard metrics, stats and the dispatch board."""

from datetime import datetime, timedelta

import pytest

from app.models.daily_metric import DailyMetric
from app.models.invoice import Invoice, InvoiceStatus
from app.models.job import Job, JobPriority, JobStatus, JobType
from app.models.lead import Lead, LeadStatus
from app.models.membership import Membership, MembershipPlan, MembershipStatus
from app.services.dashboard import metrics_cutoff
from app.services.parsing import start_of_day


def test_metrics_cutoff_is_midnight():
    now = datetime(2026, 10, 19, 15, 30)
    assert metrics_cutoff("7", now) == datetime(2026, 10, 12)
    assert metrics_cutoff(None, now) == datetime(2026, 9, 19)
    assert metrics_cutoff("9999", now) == datetime(2025, 10, 19)
    assert metrics_cutoff("abc", now) == datetime(2026, 9, 19)


@pytest.mark.asyncio
async def test_metrics_window_clamped_and_ascending(client, db):
    today = start_of_day(datetime.now())
    for days_back, revenue in ((0, 1200.0), (10, 800.0), (300, 500.0), (400, 300.0)):
        db.add(DailyMetric(date=today - timedelta(days=days_back), revenue=revenue))
    await db.commit()

    resp = await client.get("/api/v1/dashboard/metrics", params={"days": "9999"})
    assert resp.status_code == 200
    assert [m["revenue"] for m in resp.json()] == [500.0, 800.0, 1200.0]

    resp = await client.get("/api/v1/dashboard/metrics")
    assert [m["revenue"] for m in resp.json()] == [800.0, 1200.0]

    resp = await client.get("/api/v1/dashboard/metrics", params={"days": "5"})
    assert [m["revenue"] for m in resp.json()] == [1200.0]


@pytest.mark.asyncio
async def test_dashboard_stats(client, db, customer, technician):
    today = start_of_day(datetime.now())
    customer_id = customer["user"].id
    db.add_all([
        Invoice(customer_id=customer_id, total=200.0, status=InvoiceStatus.PAID, paid_at=today + timedelta(minutes=1)),
        Invoice(customer_id=customer_id, total=100.0, status=InvoiceStatus.PAID, paid_at=today - timedelta(days=3)),
        Invoice(customer_id=customer_id, total=50.0, status=InvoiceStatus.PAID, paid_at=today - timedelta(days=20)),
        Invoice(customer_id=customer_id, total=999.0, status=InvoiceStatus.SENT),
        Membership(customer_id=customer_id, plan=MembershipPlan.SILVER, status=MembershipStatus.ACTIVE),
        Job(
            job_number="FDP-2026-001", title="Compressor swap", description="-",
            job_type=JobType.REPAIR, status=JobStatus.IN_PROGRESS,
            customer_id=customer_id, property_id=customer["property"].id,
            technician_id=technician.id, scheduled_date=today + timedelta(hours=9),
        ),
    ])
    for status in (LeadStatus.WON, LeadStatus.NEW, LeadStatus.CONTACTED, LeadStatus.LOST):
        db.add(Lead(name="Lead", phone="555-0100", service_needed="AC", status=status))
    await db.commit()

    resp = await client.get("/api/v1/dashboard/stats")

    assert resp.status_code == 200
    assert resp.json() == {
        "revenueToday": 200.0,
        "jobsInProgress": 1,
        "activeTechs": 1,
        "openLeads": 2,
        "jobsToday": 1,
        "weeklyRevenue": 300.0,
        "monthlyRevenue": 350.0,
        "conversionRate": 25.0,
        "activeMembers": 1,
        "avgTicket": 116.67,
    }


@pytest.mark.asyncio
async def test_dashboard_stats_empty(client):
    resp = await client.get("/api/v1/dashboard/stats")

    data = resp.json()
    assert data["conversionRate"] == 0
    assert data["avgTicket"] == 0
    assert data["revenueToday"] == 0


@pytest.mark.asyncio
async def test_dispatch_board(client, db, customer, technician):
    day = datetime(2026, 11, 2)
    common = {
        "description": "-",
        "job_type": JobType.MAINTENANCE,
        "customer_id": customer["user"].id,
        "property_id": customer["property"].id,
    }
    db.add_all([
        Job(job_number="FDP-2026-001", title="Afternoon PM", technician_id=technician.id,
            status=JobStatus.SCHEDULED, scheduled_date=day + timedelta(hours=13), scheduled_start="13:00", **common),
        Job(job_number="FDP-2026-002", title="Morning PM", technician_id=technician.id,
            status=JobStatus.SCHEDULED, scheduled_date=day + timedelta(hours=8), scheduled_start="08:00", **common),
        Job(job_number="FDP-2026-003", title="Cancelled", technician_id=technician.id,
            status=JobStatus.CANCELLED, scheduled_date=day + timedelta(hours=10), scheduled_start="10:00", **common),
        Job(job_number="FDP-2026-004", title="Next day", technician_id=technician.id,
            status=JobStatus.SCHEDULED, scheduled_date=day + timedelta(days=1, hours=8), scheduled_start="08:00", **common),
        Job(job_number="FDP-2026-005", title="Needs a tech", priority=JobPriority.URGENT,
            status=JobStatus.PENDING, **common),
    ])
    await db.commit()

    resp = await client.get("/api/v1/dispatch", params={"date": "2026-11-02"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["date"] == "2026-11-02"
    assert [j["title"] for j in data["jobs"]] == ["Morning PM", "Afternoon PM"]
    assert [j["title"] for j in data["unassigned"]] == ["Needs a tech"]
    assert data["technicians"][0]["name"] == "Mike Torres"
    assert data["technicians"][0]["techProfile"]["truckNumber"] == "T-12"


@pytest.mark.asyncio
async def test_dispatch_board_rejects_bad_date(client):
    resp = await client.get("/api/v1/dispatch", params={"date": "11/02/2026"})
    assert resp.status_code == 400
