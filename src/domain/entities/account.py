"""Account domain entity."""

from dataclasses import dataclass


@dataclass
class Account:
    """Login credentials for one email address."""

    email: str
    password_hash: str
    id: str | None = None


@dataclass(frozen=True, slots=True)
class IssuedSession:
    """Bearer token handed out by a successful sign-in."""

    access_token: str
    email: str
    expires_in: int
    token_type: str = "bearer"
