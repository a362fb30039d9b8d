"""
Outcome values returned by the book collection service.

Expected client errors are plain values here, never exceptions.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Expected, client-driven failures and the status each maps to."""
    INVALID_ID = "invalid_id"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    UNKNOWN_ROUTE = "unknown_route"

    @property
    def status_code(self) -> int:
        if self in (ErrorKind.INVALID_ID, ErrorKind.INVALID_INPUT):
            return 400
        return 404


@dataclass(frozen=True)
class BookError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class BookOutcome:
    """Either a successful (status, body) pair or a BookError."""
    status_code: int
    body: Any = None
    error: Optional[BookError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, body: Any, status_code: int = 200) -> "BookOutcome":
        return cls(status_code=status_code, body=body)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "BookOutcome":
        return cls(status_code=kind.status_code, error=BookError(kind, message))

    def to_body(self) -> Any:
        if self.error is not None:
            return {"message": self.error.message}
        return self.body
