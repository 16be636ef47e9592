"""
Domain errors.

Services raise these; app.main translates them into HTTP responses.
"""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    """Base class for errors that map onto a client-facing response."""

    code: str = "APP_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_detail(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class NotFoundError(AppError):
    """A referenced or targeted entity does not exist."""

    def __init__(self, entity: str, key: Any) -> None:
        self.entity = entity
        self.key = key
        code = "".join(
            f"_{c}" if c.isupper() and i else c for i, c in enumerate(entity)
        ).upper()
        super().__init__(f"{entity} not found: {key}", code=f"{code}_NOT_FOUND")


class ConflictError(AppError):
    """Uniqueness or referential-integrity violation."""

    code = "CONFLICT"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class ValidationFailedError(AppError):
    """One or more present values failed their constraints."""

    code = "VALIDATION_FAILED"

    def __init__(self, field: str | None = None, reason: str | None = None,
                 errors: dict[str, str] | None = None) -> None:
        self.errors: dict[str, str] = dict(errors or {})
        if field is not None:
            self.errors[field] = reason or "invalid value"
        summary = "; ".join(f"{k}: {v}" for k, v in self.errors.items())
        super().__init__(f"Validation failed: {summary}")

    def to_detail(self) -> dict[str, Any]:
        detail = super().to_detail()
        detail["errors"] = self.errors
        return detail
