"""Dependency Providers — resolve per-request collaborators from app.state.

Invariants:
    - The DatabaseSessionManager is owned by the app (set by the lifespan), never by a module global
    - Each request gets its own repository and handler instances
    - checked_user_id is declared before read_user_body so a bad id wins over a bad body

Design Decisions:
    - Tests swap the persistence layer with app.dependency_overrides[get_user_repository]
      or by placing a manager on app.state
"""

import logging

from fastapi import Depends, Request

from user_api.core.errors import InvalidRequestError
from user_api.core.repository_protocols import UserRepository
from user_api.core.request_params import parse_user_id
from user_api.infrastructure.database import DatabaseSessionManager
from user_api.infrastructure.user_repository import SqlAlchemyUserRepository
from user_api.schemas.user import UserBody
from user_api.services.handle_users import UserHandlers

logger = logging.getLogger(__name__)


def get_db_manager(request: Request) -> DatabaseSessionManager:
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


def get_user_repository(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> UserRepository:
    return SqlAlchemyUserRepository(db_manager)


def get_user_handlers(
    repository: UserRepository = Depends(get_user_repository),
) -> UserHandlers:
    return UserHandlers(repository)


def checked_user_id(user_id: str) -> str:
    """Reject a malformed path id before the request body is read."""
    parse_user_id(user_id)
    return user_id


async def read_user_body(request: Request) -> UserBody:
    """Read and validate the JSON body; any failure is InvalidRequestError."""
    try:
        return UserBody.model_validate(await request.json())
    except ValueError as e:
        logger.warning(
            f"Invalid user body on {request.url.path}: {e}",
            extra={"error_code": "INVALID_REQUEST", "path": request.url.path},
        )
        raise InvalidRequestError() from e
