"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory credential store, a controllable clock and a wired-up app.
"""

import itertools
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer
from modules.auth.models import UserRecord
from modules.auth.passwords import BcryptPasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from shared.config import Settings


# Test signing secret (only for testing)
TEST_SECRET_KEY = "test-secret-key-for-testing-only-0123456789"
OTHER_SECRET_KEY = "another-secret-key-nobody-configured-9876543210"

# Lowest bcrypt cost keeps the suite fast
TEST_HASH_ROUNDS = 4


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: Optional[datetime] = None):
        self.now = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


class InMemoryUserRepository:
    """Credential store double keyed by email."""

    def __init__(self):
        self._users: dict[str, UserRecord] = {}
        self._ids = itertools.count(1)
        self.lookups: list[str] = []

    def add(self, record: UserRecord) -> UserRecord:
        stored = record.model_copy(update={"user_id": record.user_id or next(self._ids)})
        self._users[stored.email] = stored
        return stored

    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        self.lookups.append(email)
        return self._users.get(email)

    async def create_user(self, record: UserRecord) -> UserRecord:
        return self.add(record)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def tokens(clock: FakeClock) -> TokenService:
    return TokenService(TEST_SECRET_KEY, clock=clock)


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=TEST_HASH_ROUNDS)


@pytest.fixture
def users(hasher: BcryptPasswordHasher) -> InMemoryUserRepository:
    """Credential store seeded with a@b.com / "correct" (user id 42)."""
    repo = InMemoryUserRepository()
    repo.add(
        UserRecord(
            user_id=42,
            username="alice",
            email="a@b.com",
            password_hash=hasher.hash("correct"),
        )
    )
    return repo


@pytest.fixture
def auth_service(users, hasher, tokens) -> AuthService:
    return AuthService(users=users, passwords=hasher, tokens=tokens)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        secret_key=TEST_SECRET_KEY,
        password_hash_rounds=TEST_HASH_ROUNDS,
    )


@pytest.fixture
def container(settings, users) -> ServiceContainer:
    return ServiceContainer(settings, users=users)


@pytest.fixture
def client(container):
    """Test client for an app wired to the in-memory store."""
    app = create_app(container=container)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(container) -> dict[str, str]:
    """Authorization headers carrying a valid token for user 42."""
    return {"Authorization": f"Bearer {container.tokens.issue(42)}"}
