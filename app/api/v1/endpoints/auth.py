"""Authentication endpoints: staff login with a signed session cookie."""

import logging
from datetime import datetime
from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.core.deps import get_current_user
from app.core.exceptions import AuthenticationError
from app.models.user import User
from app.schemas.auth import UserLogin, Token, UserOut
from app.schemas.common import MessageResponse
from app.services.auth import authenticate_user, create_access_token

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin, response: Response, db: AsyncSession = Depends(get_db)):
    """Login with email and password.

    The token is returned in the body and also set as an HttpOnly cookie so
    browser clients don't need to store it.
    """
    user = await authenticate_user(db, credentials.email, credentials.password)

    if not user or not user.is_active:
        logger.warning("Failed login for %s", credentials.email)
        raise AuthenticationError("Incorrect email or password")

    user.last_login_at = datetime.utcnow()
    await db.commit()

    access_token = create_access_token(user)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=access_token,
        httponly=True,
        samesite="lax",
        secure=settings.APP_ENV == "production",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )

    logger.info("User logged in: %s (role: %s)", user.email, user.role.value)
    return Token(
        access_token=access_token,
        name=user.name,
        email=user.email,
        role=user.role,
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """Clear the session cookie. Bearer tokens simply expire."""
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserOut)
async def me(current_user: User = Depends(get_current_user)):
    return current_user
