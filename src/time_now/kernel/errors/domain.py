"""Domain errors — value-object invariant violations."""

from __future__ import annotations

from typing import Any

from time_now.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a value-object invariant is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "ValidationError"]
