"""Application-layer errors."""

from __future__ import annotations

from time_now.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
