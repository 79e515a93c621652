"""Engine – storage port for feature flags."""
from __future__ import annotations

import abc

from features.engine.feature_flag import FeatureFlag, FeatureFlagKey


class Engine(abc.ABC):
    """Port: keyed storage of :class:`FeatureFlag` records.

    Concrete implementations live in ``engine.memory``, ``adapters/redis``
    and ``adapters/sqlalchemy``. Implementations must be safe to call from
    several threads at once; each key's record is the unit of atomicity.
    """

    @abc.abstractmethod
    def save(self, flag: FeatureFlag) -> None:
        """Insert *flag*; raise ``AlreadyExistsError`` if its key is stored."""

    @abc.abstractmethod
    def upsert(self, flag: FeatureFlag) -> None:
        """Insert *flag* or replace the record stored under its key."""

    @abc.abstractmethod
    def find(self, key: str) -> FeatureFlag:
        """Return the record for *key*; raise ``NotFoundError`` if absent."""

    @abc.abstractmethod
    def find_all(self) -> list[FeatureFlag]:
        """Return every stored record, in no particular order."""

    @abc.abstractmethod
    def delete(self, key: FeatureFlagKey) -> None:
        """Remove the record for *key*; raise ``NotFoundError`` if absent."""


__all__ = ["Engine"]
