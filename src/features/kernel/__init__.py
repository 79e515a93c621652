"""Kernel – framework-agnostic building blocks."""

from features.kernel.errors import (
    AlreadyExistsError,
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidKeyError,
    NotFoundError,
    ScopedFlagError,
    ValidationError,
)

__all__ = [
    "AlreadyExistsError",
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InvalidKeyError",
    "NotFoundError",
    "ScopedFlagError",
    "ValidationError",
]
