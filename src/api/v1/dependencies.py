"""Dependency injection factories for API v1."""

from functools import lru_cache

from fastapi import Depends

from core.config import settings
from core.retry import ReadPolicy
from domain.services.account_service import AccountService
from domain.viewmodels.post_feed import FeedMessages
from domain.viewmodels.ports import RecordingNavigator, RecordingNotifier
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.passwords import PasslibPasswordHasher
from infrastructure.database.document_store import SQLAlchemyDocumentStore
from infrastructure.database.repositories.document_account_repo import DocumentAccountRepository
from infrastructure.database.repositories.document_post_repo import DocumentPostRepository
from infrastructure.database.repositories.document_profile_repo import DocumentProfileRepository
from infrastructure.database.session import async_session_factory

# Singleton auth provider
_auth_provider: JWTAuthProvider | None = None


def get_auth_provider() -> JWTAuthProvider:
    """Get or create the auth provider singleton."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = JWTAuthProvider()
    return _auth_provider


@lru_cache
def get_document_store() -> SQLAlchemyDocumentStore:
    """Get the document store bound to the application database."""
    return SQLAlchemyDocumentStore(async_session_factory)


@lru_cache
def get_password_hasher() -> PasslibPasswordHasher:
    """Get the password hasher."""
    return PasslibPasswordHasher()


def get_profile_repository(
    store: SQLAlchemyDocumentStore = Depends(get_document_store),
) -> DocumentProfileRepository:
    return DocumentProfileRepository(store)


def get_post_repository(
    store: SQLAlchemyDocumentStore = Depends(get_document_store),
) -> DocumentPostRepository:
    return DocumentPostRepository(store)


def get_account_repository(
    store: SQLAlchemyDocumentStore = Depends(get_document_store),
) -> DocumentAccountRepository:
    return DocumentAccountRepository(store)


def get_account_service(
    accounts: DocumentAccountRepository = Depends(get_account_repository),
    profiles: DocumentProfileRepository = Depends(get_profile_repository),
    hasher: PasslibPasswordHasher = Depends(get_password_hasher),
    tokens: JWTAuthProvider = Depends(get_auth_provider),
) -> AccountService:
    """Get Account service instance."""
    return AccountService(accounts, profiles, hasher, tokens)


@lru_cache
def get_read_policy() -> ReadPolicy:
    """Retry policy for screen loads."""
    return ReadPolicy(
        attempts=settings.read_attempts,
        delay_seconds=settings.read_retry_delay_seconds,
    )


@lru_cache
def get_feed_messages() -> FeedMessages:
    """Status texts shown by the post feed."""
    return FeedMessages(
        loading=settings.loading_message,
        empty=settings.no_posts_message,
        failed=settings.feed_error_message,
    )


def get_navigator() -> RecordingNavigator:
    """One navigator per request; its requests are relayed in the response."""
    return RecordingNavigator()


def get_notifier() -> RecordingNotifier:
    """One notifier per request; its notifications are relayed in the response."""
    return RecordingNotifier()
