"""Domain errors – flag validation, lookup and evaluation failures."""

from __future__ import annotations

from typing import Any

from features.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a flag rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules."""

    default_code = "validation_error"


class InvalidKeyError(ValidationError):
    """The flag key is empty."""

    default_code = "invalid_key"

    def __init__(self, message: str = "Key cannot be empty.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NotFoundError(DomainError):
    """No flag is stored under the requested key.

    ``fallback`` is the answer an evaluation would give if the error were
    ignored: ``False`` from ``is_enabled``, ``True`` from ``is_disabled``.
    It is ``None`` when the error comes from a plain lookup or delete.
    """

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        *,
        fallback: bool | None = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        kwargs.setdefault("key", identifier if isinstance(identifier, str) else None)
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier
        self.fallback = fallback


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class AlreadyExistsError(ConflictError):
    """A create-only write hit a key that is already stored."""

    default_code = "already_exists"

    def __init__(self, key: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Feature flag '{key}' already exists", key=key, **kwargs)


class ScopedFlagError(DomainError):
    """The flag is scoped to users or a rollout percentage.

    A global enabled/disabled answer is not defined for such a flag; ask
    ``user_has_access`` with a concrete identity instead.
    """

    default_code = "scoped_flag"

    def __init__(self, key: str, *, fallback: bool = False, **kwargs: Any) -> None:
        super().__init__(
            f"Feature flag '{key}' is scoped to users or a percentage",
            key=key,
            **kwargs,
        )
        self.fallback = fallback


__all__ = [
    "AlreadyExistsError",
    "ConflictError",
    "DomainError",
    "InvalidKeyError",
    "NotFoundError",
    "ScopedFlagError",
    "ValidationError",
]
