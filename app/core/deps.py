"""FastAPI dependencies for authentication and authorization."""

from typing import Optional
from uuid import UUID
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.core.exceptions import AuthenticationError, PermissionDeniedError
from app.models.user import STAFF_ROLES, User, UserRole
from app.services.auth import decode_access_token

optional_security = HTTPBearer(auto_error=False)


def _session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Bearer header first, then the session cookie set at login."""
    if credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


async def _user_from_token(db: AsyncSession, token: str) -> Optional[User]:
    payload = decode_access_token(token)
    if not payload:
        return None

    user_id: Optional[str] = payload.get("sub")
    if not user_id:
        return None
    try:
        user_uuid = UUID(user_id)
    except ValueError:
        return None

    result = await db.execute(select(User).where(User.id == user_uuid))
    return result.scalar_one_or_none()


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Extract and validate the current user from the bearer token or session cookie.

    Raises 401 if no token or invalid token, 403 if the account is disabled.
    """
    token = _session_token(request, credentials)
    if not token:
        raise AuthenticationError("Not authenticated")

    user = await _user_from_token(db, token)
    if not user:
        raise AuthenticationError("Could not validate credentials")

    if not user.is_active:
        raise PermissionDeniedError("User account is disabled")

    return user


def require_role(*roles: UserRole):
    """Dependency factory that checks the user has one of ``roles``.

    Usage:
        @router.post("/", dependencies=[Depends(require_role(UserRole.OWNER))])
    """
    async def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise PermissionDeniedError(
                f"Access denied. Required role: {', '.join(r.value for r in roles)}"
            )
        return current_user

    return role_checker


require_staff = require_role(*STAFF_ROLES)
