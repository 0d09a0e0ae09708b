"""Boundary Protocols — contracts between handlers and persistence.

Invariants:
    - Handlers NEVER import a concrete repository; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Failures surface as PersistenceError with an explicit PersistenceErrorKind;
      update/delete on a missing row raise kind NOT_FOUND, find_unique returns None

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, handlers await them
"""

from typing import Protocol, Sequence

from user_api.core.domain_types import UserId


class UserLike(Protocol):
    """Structural contract for user records returned by a repository.

    Avoids coupling handlers to the ORM model while giving mypy
    real type information (unlike Any).
    """
    id: int
    email: str
    name: str


class UserRepository(Protocol):
    """Contract for user persistence, implemented by infrastructure."""
    async def find_many(self, skip: int, take: int) -> Sequence[UserLike]: ...
    async def find_unique(self, user_id: UserId) -> UserLike | None: ...
    async def create(self, email: str, name: str) -> UserLike: ...
    async def update(
        self, user_id: UserId, email: str, name: str,
    ) -> UserLike: ...
    async def delete(self, user_id: UserId) -> None: ...
