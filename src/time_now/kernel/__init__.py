"""Kernel – framework-agnostic building blocks."""

from time_now.kernel.errors import (
    ApplicationError,
    BaseError,
    ClockBeforeEpochError,
    ClockError,
    DomainError,
    InfrastructureError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ClockBeforeEpochError",
    "ClockError",
    "DomainError",
    "InfrastructureError",
    "ValidationError",
]
