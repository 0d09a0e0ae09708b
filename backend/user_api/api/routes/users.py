"""User Routes — HTTP surface for list, get, create, update, delete.

Invariants:
    - id, page and limit arrive as raw strings; parsing happens in core/request_params.py
    - Success bodies are {"data": ...}; DELETE success is 204 with no body
    - Failures are raised as UserApiError and rendered by api/error_handlers.py

Design Decisions:
    - Mounted under settings.crud_prefix by main.py, so paths here are "/" and "/{user_id}"
    - PUT takes its body through read_user_body so a malformed id is reported
      as "Invalid ID" whatever the body holds
"""

from fastapi import APIRouter, Depends, Query, Response, status

from user_api.api.deps import (
    checked_user_id, get_user_handlers, read_user_body,
)
from user_api.core.envelope import data_envelope
from user_api.core.repository_protocols import UserLike
from user_api.schemas.user import (
    DataEnvelope, ErrorEnvelope, UserBody, UserResponse,
)
from user_api.services.handle_users import UserHandlers

router = APIRouter(tags=["users"])

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorEnvelope}}


def _serialize(user: UserLike) -> dict:
    return UserResponse.model_validate(user).model_dump()


@router.get("/", response_model=DataEnvelope[list[UserResponse]])
async def list_users(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """List users, paginated and ordered by id."""
    users = await handlers.list_users(page, limit)
    return data_envelope([_serialize(u) for u in users])


@router.get(
    "/{user_id}", response_model=DataEnvelope[UserResponse],
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def get_user(
    user_id: str, handlers: UserHandlers = Depends(get_user_handlers),
):
    user = await handlers.get_user(user_id)
    return data_envelope(_serialize(user))


@router.post(
    "/", response_model=DataEnvelope[UserResponse],
    status_code=status.HTTP_201_CREATED, responses=_BAD_REQUEST,
)
async def create_user(
    body: UserBody, handlers: UserHandlers = Depends(get_user_handlers),
):
    user = await handlers.create_user(body.email, body.name)
    return data_envelope(_serialize(user))


@router.put(
    "/{user_id}", response_model=DataEnvelope[UserResponse],
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    openapi_extra={"requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UserBody.model_json_schema()}},
    }},
)
async def update_user(
    user_id: str = Depends(checked_user_id),
    body: UserBody = Depends(read_user_body),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """Replace email and name. The id is checked before the body is read."""
    user = await handlers.update_user(user_id, body.email, body.name)
    return data_envelope(_serialize(user))


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response, responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def delete_user(
    user_id: str, handlers: UserHandlers = Depends(get_user_handlers),
):
    """Delete a user. Success carries no body."""
    await handlers.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
