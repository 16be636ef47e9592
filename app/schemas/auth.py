"""
Authentication schemas.
"""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Request body for POST /login."""

    username: EmailStr = Field(description="The user's email")
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """Response for a successful login."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(description="Access token TTL in seconds")
