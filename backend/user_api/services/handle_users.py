"""User Handlers — list, get, create, update, delete over a UserRepository.

Invariants:
    - Every id-taking method parses the id (pure) before any repository call
    - Exactly one repository call per operation
    - create: any PersistenceError → InvalidRequestError
    - update/delete: kind NOT_FOUND → UserNotFoundError, any other kind → InvalidRequestError
    - list/get do not catch PersistenceError (escapes to the global handler)

Design Decisions:
    - Handlers raise domain errors and return records; envelopes and status
      codes are applied by the route layer and global error handlers
    - Repository injected per request: no module-level client
"""

import logging
from typing import Sequence

from user_api.core.errors import (
    InvalidRequestError, PersistenceError, UserNotFoundError,
)
from user_api.core.repository_protocols import UserLike, UserRepository
from user_api.core.request_params import parse_user_id, resolve_pagination

logger = logging.getLogger(__name__)


class UserHandlers:
    """CRUD handlers for the User resource: validate, delegate, map."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def list_users(
        self, page: str | None = None, limit: str | None = None,
    ) -> Sequence[UserLike]:
        """Return one page of users ordered by ascending id."""
        pagination = resolve_pagination(page, limit)
        return await self.repository.find_many(
            skip=pagination.skip, take=pagination.limit,
        )

    async def get_user(self, raw_id: str) -> UserLike:
        """Return the user with the given id or raise UserNotFoundError."""
        user_id = parse_user_id(raw_id)
        user = await self.repository.find_unique(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def create_user(self, email: str, name: str) -> UserLike:
        """Create a user. Persistence failures collapse into InvalidRequestError."""
        try:
            user = await self.repository.create(email=email, name=name)
        except PersistenceError as e:
            logger.warning(
                f"Create user failed: {e.message}",
                extra={"error_kind": e.kind.value, "operation": "create"},
            )
            raise InvalidRequestError() from e
        logger.info("User created", extra={"user_id": user.id})
        return user

    async def update_user(self, raw_id: str, email: str, name: str) -> UserLike:
        user_id = parse_user_id(raw_id)
        try:
            user = await self.repository.update(user_id, email=email, name=name)
        except PersistenceError as e:
            raise _map_write_error(e, user_id, "update") from e
        logger.info("User updated", extra={"user_id": user_id})
        return user

    async def delete_user(self, raw_id: str) -> None:
        user_id = parse_user_id(raw_id)
        try:
            await self.repository.delete(user_id)
        except PersistenceError as e:
            raise _map_write_error(e, user_id, "delete") from e
        logger.info("User deleted", extra={"user_id": user_id})


def _map_write_error(
    error: PersistenceError, user_id: int, operation: str,
) -> UserNotFoundError | InvalidRequestError:
    """Translate a persistence failure on an existing-row write."""
    if error.is_not_found:
        return UserNotFoundError(user_id)
    logger.warning(
        f"User {operation} failed: {error.message}",
        extra={
            "user_id": user_id,
            "error_kind": error.kind.value,
            "operation": operation,
        },
    )
    return InvalidRequestError()
