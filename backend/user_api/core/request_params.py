"""Request Parameters — pure parsing of pagination query and path id strings.

Invariants:
    - parse_int accepts only optional whitespace, optional sign and ASCII decimal digits
    - Magnitudes beyond MAX_DIGITS digits saturate to 10 ** MAX_DIGITS (sign kept)
    - Missing OR non-numeric page/limit fall back to defaults (1 / 10)
    - page >= 1, 1 <= limit <= 100, skip == (page - 1) * limit
    - skip never exceeds MAX_SKIP (signed 64-bit OFFSET)
    - parse_user_id raises InvalidIdError before any persistence call

Design Decisions:
    - Raw strings in, typed values out: the route declares id/page/limit as str
      so the framework never answers with its own coercion errors
    - Saturating instead of rejecting long digit strings: a huge limit still
      clamps to 100 and a huge page still lands past the last row
    - Ids outside the 32-bit column range are rejected as invalid: they can
      never address a row and would otherwise fail inside the driver
"""

import re
from dataclasses import dataclass

from user_api.core.domain_types import UserId, USER_ID_MIN, USER_ID_MAX
from user_api.core.errors import InvalidIdError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
MAX_DIGITS = 18
MAX_SKIP = 2 ** 63 - 1

_INT_PATTERN = re.compile(r"^\s*([+-]?)0*([0-9]+)\s*$")


@dataclass(frozen=True)
class Pagination:
    """Effective pagination for one list request."""
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def parse_int(raw: str | None) -> int | None:
    """Parse a decimal integer string; None when missing or malformed."""
    match = _INT_PATTERN.match(raw) if raw is not None else None
    if match is None:
        return None
    sign, digits = match.groups()
    value = 10 ** MAX_DIGITS if len(digits) > MAX_DIGITS else int(digits)
    return -value if sign == "-" else value


def resolve_pagination(
    page: str | None = None, limit: str | None = None,
) -> Pagination:
    """Clamp raw page/limit query values into an effective Pagination."""
    parsed_page = parse_int(page)
    parsed_limit = parse_int(limit)
    if parsed_page is None:
        parsed_page = DEFAULT_PAGE
    if parsed_limit is None:
        parsed_limit = DEFAULT_LIMIT
    effective_limit = min(MAX_LIMIT, max(1, parsed_limit))
    max_page = MAX_SKIP // effective_limit + 1
    return Pagination(
        page=min(max_page, max(1, parsed_page)),
        limit=effective_limit,
    )


def parse_user_id(raw: str) -> UserId:
    """Parse a path id or raise InvalidIdError."""
    value = parse_int(raw)
    if value is None or not USER_ID_MIN <= value <= USER_ID_MAX:
        raise InvalidIdError(raw)
    return UserId(value)
