"""Account service: sign-up, sign-in and sign-out."""

from typing import Protocol

import structlog

from core.exceptions import (
    EmailAlreadyInUseError,
    InvalidCredentialsError,
    SignUpValidationError,
)
from domain.entities.account import Account, IssuedSession
from domain.entities.profile import UserProfile
from domain.entities.view_state import Screen
from domain.repositories.account_repository import IAccountRepository
from domain.repositories.profile_repository import IProfileRepository
from domain.viewmodels.ports import INavigator

logger = structlog.get_logger()


class IPasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...

    def verify(self, password: str, password_hash: str) -> bool: ...


class ITokenIssuer(Protocol):
    def issue(self, account: Account) -> IssuedSession: ...


class AccountService:
    """Service layer for account lifecycle."""

    def __init__(
        self,
        accounts: IAccountRepository,
        profiles: IProfileRepository,
        hasher: IPasswordHasher,
        tokens: ITokenIssuer,
    ) -> None:
        self._accounts = accounts
        self._profiles = profiles
        self._hasher = hasher
        self._tokens = tokens

    async def sign_up(
        self,
        email: str,
        password: str,
        confirm_password: str,
        navigator: INavigator,
    ) -> Account:
        """Create the account and its profile, then route to the login screen.

        The new profile starts with the email as its display name.
        """
        if not (email and password and confirm_password) or password != confirm_password:
            raise SignUpValidationError()

        if await self._accounts.get_by_email(email):
            raise EmailAlreadyInUseError(email)

        account = await self._accounts.create(
            Account(email=email, password_hash=self._hasher.hash(password))
        )
        await self._profiles.create(UserProfile(email=email, display_name=email))

        logger.info("account_created", email=email)
        navigator.navigate(Screen.LOGIN)
        return account

    async def sign_in(self, email: str, password: str) -> IssuedSession:
        """Check the credentials and issue a session token."""
        account = await self._accounts.get_by_email(email)
        if account is None or not self._hasher.verify(password, account.password_hash):
            logger.info("sign_in_rejected", email=email)
            raise InvalidCredentialsError()

        logger.info("user_signed_in", email=email)
        return self._tokens.issue(account)

    async def sign_out(self, token_id: str | None, email: str) -> None:
        """End a session; later requests carrying its token are rejected."""
        if token_id:
            await self._accounts.revoke_session(token_id, email)
        logger.info("user_signed_out", email=email)

    async def is_session_revoked(self, token_id: str | None) -> bool:
        if not token_id:
            return False
        return await self._accounts.is_session_revoked(token_id)
