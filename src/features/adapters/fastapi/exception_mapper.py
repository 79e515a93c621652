"""FastAPI adapter – FeaturesExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi.responses import JSONResponse

from features.kernel.errors import (
    AlreadyExistsError,
    BaseError,
    InfrastructureError,
    InvalidKeyError,
    NotFoundError,
    ScopedFlagError,
    SerializationError,
)
from features.observability.logging import get_logger

_log = get_logger(__name__)


def error_body(error: str, description: str) -> dict[str, str]:
    return {"error": error, "error_description": description}


class FeaturesExceptionMapper:
    """Register error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"error": "bad_request", "error_description": "Key cannot be empty."}

    Mappings
    --------
    ``InvalidKeyError``     → 400 ``bad_request``
    ``AlreadyExistsError``  → 400 ``bad_request``
    ``SerializationError``  → 400 ``bad_request``
    ``NotFoundError``       → 404 ``not_found``
    ``ScopedFlagError``     → 409 ``scoped_flag``
    ``InfrastructureError`` → 503 ``service_unavailable``
    ``BaseError``           → 500 ``internal_error``

    Starlette resolves handlers along the exception's MRO, so the most
    specific registered class wins.
    """

    def __init__(self) -> None:
        self._map: list[tuple[type[BaseError], int, str]] = [
            (InvalidKeyError, 400, "bad_request"),
            (AlreadyExistsError, 400, "bad_request"),
            (SerializationError, 400, "bad_request"),
            (NotFoundError, 404, "not_found"),
            (ScopedFlagError, 409, "scoped_flag"),
            (InfrastructureError, 503, "service_unavailable"),
            (BaseError, 500, "internal_error"),
        ]

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        for exc_type, status, slug in self._map:
            app.add_exception_handler(exc_type, self._make_handler(status, slug))

    @staticmethod
    def _make_handler(status: int, slug: str) -> Callable[[Any, Any], Any]:
        def handler(request: Any, exc: BaseError) -> JSONResponse:  # noqa: ARG001
            if status >= 500:
                _log.error("features.request_failed", code=exc.code, key=exc.key, error=exc.message)
            return JSONResponse(status_code=status, content=error_body(slug, exc.message))

        return handler


__all__ = ["FeaturesExceptionMapper", "error_body"]
