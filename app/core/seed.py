"""Seed demo accounts on app startup."""

import logging
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import async_session
from app.models.tech_profile import TechProfile
from app.models.user import User, UserRole
from app.services.auth import hash_password, get_user_by_email, normalize_email

logger = logging.getLogger(__name__)

DEMO_ACCOUNTS = (
    {
        "name": "Sarah Mann",
        "email": "sarah.mann@fdpierce.com",
        "password": "admin123",
        "role": UserRole.OWNER,
    },
    {
        "name": "Demo Technician",
        "email": "tech@fdpierce.com",
        "password": "tech123",
        "role": UserRole.TECHNICIAN,
    },
)


async def ensure_account(db: AsyncSession, account: dict) -> bool:
    """Create one demo account unless its email is taken. Returns True if created."""
    existing = await get_user_by_email(db, account["email"])
    if existing:
        if not existing.hashed_password:
            existing.hashed_password = hash_password(account["password"])
            logger.info("Set password on existing demo account: %s", account["email"])
        return False

    user = User(
        name=account["name"],
        email=normalize_email(account["email"]),
        hashed_password=hash_password(account["password"]),
        role=account["role"],
        is_active=True,
    )
    db.add(user)
    if account["role"] == UserRole.TECHNICIAN:
        await db.flush()
        db.add(TechProfile(user_id=user.id, is_available=True))
    return True


async def seed_demo_accounts():
    """Create the demo owner and technician logins if they don't exist."""
    async with async_session() as db:
        try:
            created = 0
            for account in DEMO_ACCOUNTS:
                if await ensure_account(db, account):
                    created += 1
            await db.commit()
            logger.info("Demo accounts ready (%d created)", created)
        except Exception as e:
            logger.error("Failed to seed demo accounts: %s", e)
            await db.rollback()
