"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.account import Account
from domain.entities.profile import UserProfile
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.passwords import PasslibPasswordHasher
from infrastructure.auth.provider import TokenUser
from infrastructure.database.document_store import SQLAlchemyDocumentStore
from infrastructure.database.models import Base
from infrastructure.database.repositories.document_account_repo import DocumentAccountRepository
from infrastructure.database.repositories.document_profile_repo import DocumentProfileRepository

# Test database URL (SQLite in memory, one connection shared per test)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_USER_EMAIL = "test@example.com"
TEST_USER_PASSWORD = "correct-horse"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh test database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def document_store(
    session_factory: async_sessionmaker[AsyncSession],
) -> SQLAlchemyDocumentStore:
    """Document store over the test database."""
    return SQLAlchemyDocumentStore(session_factory)


@pytest.fixture
def test_user() -> TokenUser:
    """Create a test user."""
    return TokenUser(id="test-account", email=TEST_USER_EMAIL)


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def auth_token(auth_provider: JWTAuthProvider, test_user: TokenUser) -> str:
    """Create auth token for test user."""
    return str(auth_provider.create_token(test_user))


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
async def client(
    document_store: SQLAlchemyDocumentStore,
    auth_provider: JWTAuthProvider,
) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth) over the test database."""
    from api.v1.dependencies import get_auth_provider, get_document_store
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_document_store] = lambda: document_store
    app.dependency_overrides[get_auth_provider] = lambda: auth_provider

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def authenticated_client(
    client: AsyncClient,
    document_store: SQLAlchemyDocumentStore,
    auth_headers: dict[str, str],
) -> AsyncClient:
    """
    Create authenticated test client.

    This client:
    - Uses an in-memory SQLite database
    - Has an account and a profile for the test user already stored
    - Sends a real bearer token, so sign-out revocation applies to it
    """
    await DocumentAccountRepository(document_store).create(
        Account(
            email=TEST_USER_EMAIL,
            password_hash=PasslibPasswordHasher().hash(TEST_USER_PASSWORD),
        )
    )
    await DocumentProfileRepository(document_store).create(
        UserProfile(email=TEST_USER_EMAIL, display_name="Test User")
    )
    client.headers.update(auth_headers)
    return client
