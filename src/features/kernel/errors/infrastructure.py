"""Infrastructure errors – storage backend and payload failures."""

from __future__ import annotations

from typing import Any

from features.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """A storage backend failed; the flag data itself may be fine."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """The backend named by ``resource`` (``"redis"``, ``"database"``) is unreachable."""

    default_code = "connection_error"

    def __init__(self, resource: str, message: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"resource": resource})
        super().__init__(message or f"Could not reach the {resource} backend", **kwargs)
        self.resource = resource


class SerializationError(InfrastructureError):
    """A stored or submitted flag payload could not be decoded.

    ``field`` names the offending payload field when one is to blame;
    ``payload_type`` is the Python type that was being decoded.
    """

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {k: v for k, v in (("field", field), ("payload_type", payload_type)) if v}
        kwargs.setdefault("detail", detail)
        super().__init__(message, **kwargs)
        self.field = field
        self.payload_type = payload_type


__all__ = [
    "ConnectionError",
    "InfrastructureError",
    "SerializationError",
]
