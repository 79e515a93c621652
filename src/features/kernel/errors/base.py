"""Root error class for the features error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every error the library raises.

    ``code`` is a stable slug for callers and HTTP bodies; ``key`` names the
    feature flag the error concerns, when there is one.
    """

    default_code: str = "base_error"
    # Answer a failed evaluation stands for; set by the facade, else None.
    fallback: bool | None = None

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        key: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code else self.default_code
        self.key = key
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.key is not None:
            payload["key"] = self.key
        payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        if self.key is None:
            return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
        return f"{type(self).__name__}(code={self.code!r}, key={self.key!r}, message={self.message!r})"


__all__ = ["BaseError"]
