"""Engine – MemoryEngine, the in-process reference backend."""
from __future__ import annotations

import contextlib
import threading

from features.engine.engine import Engine
from features.engine.feature_flag import FeatureFlag, FeatureFlagKey
from features.kernel.errors import AlreadyExistsError, NotFoundError
from features.observability.logging import get_logger

_log = get_logger(__name__)


class MemoryEngine(Engine):
    """Dict-backed engine guarded by striped locks.

    Each key maps to one of ``stripes`` locks, so writes to keys on different
    stripes proceed in parallel while writes to the same key are serialised.
    Stored records are immutable, so readers never see a half-applied write.

    Every instance owns its own store; build one per test for isolation.
    """

    def __init__(self, stripes: int = 16) -> None:
        if stripes < 1:
            raise ValueError("stripes must be >= 1")
        self._flags: dict[str, FeatureFlag] = {}
        self._locks = tuple(threading.Lock() for _ in range(stripes))

    def _lock_for(self, key: str) -> threading.Lock:
        return self._locks[hash(key) % len(self._locks)]

    def save(self, flag: FeatureFlag) -> None:
        with self._lock_for(flag.key):
            if flag.key in self._flags:
                raise AlreadyExistsError(flag.key)
            self._flags[flag.key] = flag
        _log.debug("feature_flag.saved", key=flag.key)

    def upsert(self, flag: FeatureFlag) -> None:
        with self._lock_for(flag.key):
            self._flags[flag.key] = flag
        _log.debug("feature_flag.upserted", key=flag.key)

    def find(self, key: str) -> FeatureFlag:
        flag = self._flags.get(key)
        if flag is None:
            raise NotFoundError("Feature flag", key)
        return flag

    def find_all(self) -> list[FeatureFlag]:
        # Stripes are always taken in index order.
        with contextlib.ExitStack() as stack:
            for lock in self._locks:
                stack.enter_context(lock)
            return list(self._flags.values())

    def delete(self, key: FeatureFlagKey) -> None:
        with self._lock_for(key.key):
            if self._flags.pop(key.key, None) is None:
                raise NotFoundError("Feature flag", key.key)
        _log.debug("feature_flag.deleted", key=key.key)

    def clear(self) -> None:
        """Drop every record (useful between test cases)."""
        with contextlib.ExitStack() as stack:
            for lock in self._locks:
                stack.enter_context(lock)
            self._flags.clear()

    def __len__(self) -> int:
        return len(self._flags)


__all__ = ["MemoryEngine"]
