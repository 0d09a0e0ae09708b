"""User Schemas — request body, public record and response envelopes.

Invariants:
    - UserBody requires both email and name as strings; no format checks
      (the database is the final arbiter, e.g. unique email)
    - UserResponse exposes exactly id, email, name
    - DataEnvelope and ErrorEnvelope are mutually exclusive response shapes

Design Decisions:
    - from_attributes on UserResponse: validated straight from ORM rows or any UserLike
    - Envelope models exist for OpenAPI documentation; handlers build plain dicts
      through core/envelope.py
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class UserBody(BaseModel):
    """Create/update payload."""
    email: str
    name: str


class UserResponse(BaseModel):
    """User record as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str


class DataEnvelope(BaseModel, Generic[T]):
    """Success envelope."""
    data: T


class ErrorItem(BaseModel):
    detail: str


class ErrorEnvelope(BaseModel):
    """Failure envelope."""
    errors: list[ErrorItem]
