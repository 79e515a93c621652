"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidKeyError
    │   ├── NotFoundError
    │   ├── ConflictError
    │   │   └── AlreadyExistsError
    │   └── ScopedFlagError
    ├── ApplicationError         (application.py)
    └── InfrastructureError      (infrastructure.py)
        ├── ConnectionError
        └── SerializationError
"""

from features.kernel.errors.application import ApplicationError
from features.kernel.errors.base import BaseError
from features.kernel.errors.domain import (
    AlreadyExistsError,
    ConflictError,
    DomainError,
    InvalidKeyError,
    NotFoundError,
    ScopedFlagError,
    ValidationError,
)
from features.kernel.errors.infrastructure import (
    ConnectionError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "AlreadyExistsError",
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "ConnectionError",
    "DomainError",
    "InfrastructureError",
    "InvalidKeyError",
    "NotFoundError",
    "ScopedFlagError",
    "SerializationError",
    "ValidationError",
]
