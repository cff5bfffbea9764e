"""Pydantic schemas for sign-up, login and the session signal."""

from pydantic import BaseModel, Field

from api.v1.schemas.common import ScreenEffects


class SignUpRequest(BaseModel):
    """Schema for the sign-up form."""

    email: str = Field("", max_length=255)
    password: str = Field("", max_length=128)
    confirm_password: str = Field("", max_length=128)


class SignUpResponse(ScreenEffects):
    """Schema for a created account."""

    email: str


class SignOutResponse(ScreenEffects):
    """Schema for an ended session."""

    message: str


class LoginRequest(BaseModel):
    """Schema for the login form."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class TokenResponse(BaseModel):
    """Schema for an issued session."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
    email: str


class ScreenResponse(BaseModel):
    screen: str
    title: str


class SessionResponse(BaseModel):
    """Schema for the session signal and the flow it selects."""

    authenticated: bool
    email: str | None = None
    flow: str
    initial_screen: str
    screens: list[ScreenResponse]
