"""Error Hierarchy — the rejection envelope and error normalization.

Invariants:
    - Every rejection carries message (str), detail (str) and http_status (int > 0)
    - normalize_error() never raises, whatever value it is handed
    - Missing status falls back to 400, missing message to DEFAULT_ERROR_MESSAGE,
      missing detail to the resolved message
    - normalize_error() is idempotent on an already-normalized RejectionError

Design Decisions:
    - Fields read from mappings AND attributes: mock values are plain dicts,
      organic failures are exceptions
    - bool excluded from numeric statuses (True would otherwise pass as 1)
    - inf and nan statuses fall back to 400 (JSON mock files accept Infinity/NaN)
"""

import math
from collections.abc import Mapping
from typing import Any

DEFAULT_ERROR_MESSAGE = "An error occurred."
DEFAULT_ERROR_STATUS = 400


class RejectionError(Exception):
    """Normalized failure of an operation — the only error a handler raises."""

    def __init__(
        self, message: str, detail: str | None = None,
        http_status: int = DEFAULT_ERROR_STATUS,
    ):
        super().__init__(message)
        self.message = message
        self.detail = detail or message
        self.http_status = http_status

    @property
    def status(self) -> int:
        return self.http_status

    def to_response(self) -> dict:
        """Convert to the REST rejection envelope."""
        return {"message": self.message, "detail": self.detail}

    def __repr__(self) -> str:
        return (
            f"RejectionError(message={self.message!r}, "
            f"detail={self.detail!r}, http_status={self.http_status})"
        )


class MockConfigError(Exception):
    """Mock response configuration could not be loaded."""


def read_field(value: Any, name: str) -> Any:
    """Read a field from a mapping or an object. Absent → None, never raises."""
    if isinstance(value, Mapping):
        return value.get(name)
    if value is None or isinstance(value, (str, bytes, int, float, bool)):
        return None
    try:
        return getattr(value, name, None)
    except Exception:
        # A raising property counts as an absent field
        return None


def resolve_status(value: Any) -> int:
    """Positive numeric status of a caught value, else DEFAULT_ERROR_STATUS."""
    status = read_field(value, "status")
    if isinstance(status, bool) or not isinstance(status, (int, float)):
        return DEFAULT_ERROR_STATUS
    if isinstance(status, float) and not math.isfinite(status):
        return DEFAULT_ERROR_STATUS
    if status > 0:
        return int(status)
    return DEFAULT_ERROR_STATUS


def resolve_message(value: Any) -> str:
    message = read_field(value, "message")
    return str(message) if message else DEFAULT_ERROR_MESSAGE


def normalize_error(caught: Any) -> RejectionError:
    """Normalize any caught value into a RejectionError.

    Accepts exceptions, mock-supplied dicts, strings, None — anything that
    can be raised or configured as a rejection value.
    """
    message = resolve_message(caught)
    detail = read_field(caught, "detail")
    return RejectionError(
        message=message,
        detail=str(detail) if detail else message,
        http_status=resolve_status(caught),
    )
