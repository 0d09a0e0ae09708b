"""Response Envelope — the {data} / {errors} wrapper for every JSON body.

Invariants:
    - A body carries exactly one of "data" or "errors", never both, never neither
    - "errors" is a non-empty list of {"detail": str}
"""

from typing import Any


def data_envelope(payload: Any) -> dict:
    """Wrap a successful payload."""
    return {"data": payload}


def error_envelope(*details: str) -> dict:
    """Wrap one or more error details."""
    if not details:
        raise ValueError("error envelope needs at least one detail")
    return {"errors": [{"detail": d} for d in details]}
