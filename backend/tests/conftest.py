"""Root conftest — shared test configuration, DB engine and fake repository.

Invariants:
    - Every DB-backed test gets a fresh in-memory SQLite database
    - FakeUserRepository honours the UserRepository contract: NOT_FOUND on
      update/delete of a missing id, CONSTRAINT on duplicate email
"""

import os
from dataclasses import dataclass

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from user_api.core.domain_types import PersistenceErrorKind  # noqa: E402
from user_api.core.errors import PersistenceError  # noqa: E402
from user_api.db.base import Base  # noqa: E402
from user_api.infrastructure.database import DatabaseSessionManager  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@dataclass
class FakeUser:
    id: int
    email: str
    name: str


class FakeUserRepository:
    """In-memory UserRepository that records calls and can be told to fail.

    failures: operation name → PersistenceErrorKind raised on the next calls
    calls: list of (operation, kwargs) in call order
    """

    def __init__(self):
        self.users: dict[int, FakeUser] = {}
        self.calls: list[tuple[str, dict]] = []
        self.failures: dict[str, PersistenceErrorKind] = {}
        self._next_id = 1

    def seed(self, email: str, name: str) -> FakeUser:
        user = FakeUser(self._next_id, email, name)
        self.users[user.id] = user
        self._next_id += 1
        return user

    def _enter(self, operation: str, **kwargs) -> None:
        self.calls.append((operation, kwargs))
        kind = self.failures.get(operation)
        if kind is not None:
            raise PersistenceError(kind, f"forced {kind.value}", operation)

    async def find_many(self, skip, take):
        self._enter("find_many", skip=skip, take=take)
        ordered = sorted(self.users.values(), key=lambda u: u.id)
        return ordered[skip:skip + take]

    async def find_unique(self, user_id):
        self._enter("find_unique", user_id=user_id)
        return self.users.get(user_id)

    async def create(self, email, name):
        self._enter("create", email=email, name=name)
        if any(u.email == email for u in self.users.values()):
            raise PersistenceError(
                PersistenceErrorKind.CONSTRAINT, "duplicate email", "create",
            )
        return self.seed(email, name)

    async def update(self, user_id, email, name):
        self._enter("update", user_id=user_id, email=email, name=name)
        user = self.users.get(user_id)
        if user is None:
            raise PersistenceError(
                PersistenceErrorKind.NOT_FOUND, "missing", "update",
            )
        user.email = email
        user.name = name
        return user

    async def delete(self, user_id):
        self._enter("delete", user_id=user_id)
        if self.users.pop(user_id, None) is None:
            raise PersistenceError(
                PersistenceErrorKind.NOT_FOUND, "missing", "delete",
            )


@pytest.fixture
def fake_repository():
    return FakeUserRepository()
