"""Config settings – FeaturesSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from features.config.settings.base import Settings
from features.config.validation import InvalidSettingValueError

BACKENDS = ("memory", "redis", "sqlalchemy")


@dataclasses.dataclass
class FeaturesSettings(Settings):
    """Which storage engine to build and how to log.

    Environment variables use the ``FEATURES_`` prefix, e.g.
    ``FEATURES_BACKEND=redis`` and ``FEATURES_REDIS_URL=redis://cache:6379/0``.
    """

    _prefix: ClassVar[str] = "FEATURES"

    backend: str = "memory"
    lock_stripes: int = 16
    redis_url: str = ""
    redis_prefix: str = "features:"
    database_url: str = ""
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if self.backend not in BACKENDS:
            raise InvalidSettingValueError(
                "backend", self.backend, f"expected one of {', '.join(BACKENDS)}"
            )
        if self.lock_stripes < 1:
            raise InvalidSettingValueError("lock_stripes", self.lock_stripes, "must be >= 1")
        if self.backend == "redis" and not self.redis_url:
            raise InvalidSettingValueError("redis_url", self.redis_url, "required by the redis backend")
        if self.backend == "sqlalchemy" and not self.database_url:
            raise InvalidSettingValueError(
                "database_url", self.database_url, "required by the sqlalchemy backend"
            )


__all__ = ["BACKENDS", "FeaturesSettings"]
