"""Customer listing with lifetime-value figures."""

import uuid
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.invoice import Invoice, InvoiceStatus
from app.models.membership import Membership, MembershipStatus
from app.models.user import User, UserRole
from app.schemas.customer import CustomerOut
from app.services.parsing import MAX_LIMIT, clamp_limit

CENT = Decimal("0.01")


def round_currency(amounts: Iterable[float]) -> Decimal:
    """Sum currency amounts and round half-up to the cent.

    Amounts go through ``str`` so that 100.005 is summed as written rather
    than as its binary approximation.
    """
    total = sum((Decimal(str(amount)) for amount in amounts), Decimal("0"))
    return total.quantize(CENT, rounding=ROUND_HALF_UP)


async def paid_invoice_totals(db: AsyncSession, customer_ids: list[uuid.UUID]) -> dict[uuid.UUID, list[float]]:
    """PAID invoice totals grouped by customer."""
    totals: dict[uuid.UUID, list[float]] = defaultdict(list)
    if not customer_ids:
        return totals
    result = await db.execute(
        select(Invoice.customer_id, Invoice.total).where(
            Invoice.customer_id.in_(customer_ids),
            Invoice.status == InvoiceStatus.PAID,
        )
    )
    for customer_id, total in result.all():
        totals[customer_id].append(total)
    return totals


async def list_customers(db: AsyncSession, limit: Optional[str] = None) -> list[CustomerOut]:
    """Customers by name, with properties, active memberships and PAID-only spend.

    ``invoiceCount`` counts PAID invoices only, matching ``totalSpent``.
    """
    query = (
        select(User)
        .options(
            selectinload(User.properties),
            selectinload(User.memberships.and_(Membership.status == MembershipStatus.ACTIVE)),
        )
        .where(User.role == UserRole.CUSTOMER)
        .order_by(User.name.asc())
    )
    take = clamp_limit(limit, default=None, maximum=MAX_LIMIT)
    if take:
        query = query.limit(take)

    result = await db.execute(query)
    customers = result.scalars().all()

    totals = await paid_invoice_totals(db, [c.id for c in customers])

    return [
        CustomerOut(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            avatar=customer.avatar,
            created_at=customer.created_at,
            properties=customer.properties,
            memberships=customer.memberships,
            invoice_count=len(totals[customer.id]),
            total_spent=float(round_currency(totals[customer.id])),
        )
        for customer in customers
    ]
