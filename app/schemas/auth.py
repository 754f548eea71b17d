"""Pydantic schemas for authentication endpoints."""

from uuid import UUID
from pydantic import EmailStr
from app.models.user import UserRole
from app.schemas.common import ApiModel


class UserLogin(ApiModel):
    """Request schema for user login."""
    email: EmailStr
    password: str


class Token(ApiModel):
    """Response schema for login; the same token is also set as the session cookie."""
    access_token: str
    token_type: str = "bearer"
    name: str
    email: str
    role: UserRole


class UserOut(ApiModel):
    """Response schema for the current user."""
    id: UUID
    name: str
    email: str
    role: UserRole
    is_active: bool
