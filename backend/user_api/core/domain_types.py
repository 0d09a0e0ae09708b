"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int; route-level strings are parsed before becoming a UserId
    - Every persistence failure carries exactly one PersistenceErrorKind

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log records without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)

# users.id is a 32-bit INTEGER column
USER_ID_MIN = -(2 ** 31)
USER_ID_MAX = 2 ** 31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class PersistenceErrorKind(str, Enum):
    """Failure kinds surfaced by a UserRepository implementation."""
    NOT_FOUND = "not_found"
    CONSTRAINT = "constraint"
    INVALID_DATA = "invalid_data"
    CONNECTION = "connection"
    UNKNOWN = "unknown"
