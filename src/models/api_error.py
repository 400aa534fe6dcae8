"""Error kinds raised by the catalog and mapped to HTTP responses."""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorKind(Enum):
    """Kind of failure, carrying the HTTP status it maps to."""

    NOT_FOUND = 404
    VALIDATION_FAILED = 400
    UNAUTHORIZED = 401
    INTERNAL = 500

    @property
    def status_code(self) -> int:
        return self.value


class ApiError(Exception):
    """A fault with a known kind, message and optional structured details."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @classmethod
    def not_found(cls, message: str = "Resource not found") -> "ApiError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def validation_failed(
        cls, errors: List[str], message: str = "Invalid payload"
    ) -> "ApiError":
        return cls(ErrorKind.VALIDATION_FAILED, message, {"errors": list(errors)})

    @classmethod
    def unauthorized(
        cls, message: str = "Unauthorized: invalid or missing API key"
    ) -> "ApiError":
        return cls(ErrorKind.UNAUTHORIZED, message)

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.name}, message={self.message!r})"
