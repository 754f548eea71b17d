"""Tests for the membership program listing and summary."""

from datetime import datetime, timedelta

import pytest

from app.models.membership import Membership, MembershipPlan, MembershipStatus


@pytest.fixture
def plans(customer):
    now = datetime.now()
    customer_id = customer["user"].id
    return [
        Membership(
            customer_id=customer_id, plan=MembershipPlan.GOLD, status=MembershipStatus.ACTIVE,
            renewal_date=now + timedelta(days=10), monthly_rate=49.99, visits_per_year=4, visits_used=1,
        ),
        Membership(
            customer_id=customer_id, plan=MembershipPlan.SILVER, status=MembershipStatus.ACTIVE,
            renewal_date=now + timedelta(days=90), monthly_rate=29.99, visits_per_year=2,
        ),
        Membership(
            customer_id=customer_id, plan=MembershipPlan.BRONZE, status=MembershipStatus.EXPIRED,
            renewal_date=now - timedelta(days=5), monthly_rate=19.99, visits_per_year=1,
        ),
        Membership(
            customer_id=customer_id, plan=MembershipPlan.PLATINUM, status=MembershipStatus.PENDING,
            monthly_rate=89.99, visits_per_year=6,
        ),
    ]


@pytest.mark.asyncio
async def test_memberships_sorted_by_renewal(client, db, plans, staff_headers):
    db.add_all(plans)
    await db.commit()

    resp = await client.get("/api/v1/memberships", headers=staff_headers)

    assert resp.status_code == 200
    data = resp.json()
    assert [m["plan"] for m in data] == ["BRONZE", "GOLD", "SILVER", "PLATINUM"]
    assert data[1]["customer"]["name"] == "Harbor Grill"
    assert data[1]["visitsUsed"] == 1
    assert data[3]["renewalDate"] is None


@pytest.mark.asyncio
async def test_membership_filters(client, db, plans, staff_headers):
    db.add_all(plans)
    await db.commit()

    active = await client.get("/api/v1/memberships?status=ACTIVE", headers=staff_headers)
    assert [m["plan"] for m in active.json()] == ["GOLD", "SILVER"]

    gold = await client.get("/api/v1/memberships?plan=GOLD", headers=staff_headers)
    assert [m["plan"] for m in gold.json()] == ["GOLD"]

    unknown = await client.get("/api/v1/memberships?status=LAPSED", headers=staff_headers)
    assert len(unknown.json()) == 4


@pytest.mark.asyncio
async def test_membership_summary(client, db, plans, staff_headers):
    db.add_all(plans)
    await db.commit()

    resp = await client.get("/api/v1/memberships/summary", headers=staff_headers)

    assert resp.status_code == 200
    data = resp.json()
    assert data["activeMembers"] == 2
    assert data["monthlyRevenue"] == 79.98
    assert data["renewalRate"] == 75.0
    assert data["visitsRemaining"] == 5
    assert data["upcomingRenewals"] == 1
    assert data["tiers"] == [
        {"plan": "BRONZE", "count": 0, "monthlyRevenue": 0.0},
        {"plan": "SILVER", "count": 1, "monthlyRevenue": 29.99},
        {"plan": "GOLD", "count": 1, "monthlyRevenue": 49.99},
        {"plan": "PLATINUM", "count": 0, "monthlyRevenue": 0.0},
    ]


@pytest.mark.asyncio
async def test_membership_summary_empty(client, staff_headers):
    resp = await client.get("/api/v1/memberships/summary", headers=staff_headers)

    assert resp.status_code == 200
    assert resp.json()["renewalRate"] == 0.0
    assert resp.json()["visitsRemaining"] == 0


@pytest.mark.asyncio
async def test_memberships_require_staff(client, tech_headers):
    assert (await client.get("/api/v1/memberships")).status_code == 401
    assert (await client.get("/api/v1/memberships/summary", headers=tech_headers)).status_code == 403
