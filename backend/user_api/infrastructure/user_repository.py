"""SQLAlchemy User Repository — UserRepository implementation over DatabaseSessionManager.

Invariants:
    - One session per call; every write commits before returning
    - update/delete on a missing row raise PersistenceError(kind=NOT_FOUND)
    - find_unique returns None for a missing row (absence is not a failure on reads)
    - Driver errors are classified by DatabaseSessionManager.session()
"""

import logging
from typing import Sequence

from sqlalchemy import select

from user_api.core.domain_types import PersistenceErrorKind, UserId
from user_api.core.errors import PersistenceError
from user_api.infrastructure.database import DatabaseSessionManager
from user_api.models.user import User

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository:
    """Persists users through an injected DatabaseSessionManager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def find_many(self, skip: int, take: int) -> Sequence[User]:
        async with self._db.session() as session:
            result = await session.execute(
                select(User).order_by(User.id.asc()).offset(skip).limit(take),
            )
            return list(result.scalars().all())

    async def find_unique(self, user_id: UserId) -> User | None:
        async with self._db.session() as session:
            return await session.get(User, user_id)

    async def create(self, email: str, name: str) -> User:
        async with self._db.session() as session:
            user = User(email=email, name=name)
            session.add(user)
            await session.commit()
            await session.refresh(user)
            return user

    async def update(self, user_id: UserId, email: str, name: str) -> User:
        async with self._db.session() as session:
            user = await session.get(User, user_id)
            if user is None:
                raise _not_found(user_id, "update")
            user.email = email
            user.name = name
            await session.commit()
            await session.refresh(user)
            return user

    async def delete(self, user_id: UserId) -> None:
        async with self._db.session() as session:
            user = await session.get(User, user_id)
            if user is None:
                raise _not_found(user_id, "delete")
            await session.delete(user)
            await session.commit()


def _not_found(user_id: UserId, operation: str) -> PersistenceError:
    return PersistenceError(
        PersistenceErrorKind.NOT_FOUND,
        f"No user with id {user_id}", operation,
    )
