"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        └── ClockError
            └── ClockBeforeEpochError
"""

from time_now.kernel.errors.application import ApplicationError
from time_now.kernel.errors.base import BaseError
from time_now.kernel.errors.domain import DomainError, ValidationError
from time_now.kernel.errors.infrastructure import (
    ClockBeforeEpochError,
    ClockError,
    InfrastructureError,
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
