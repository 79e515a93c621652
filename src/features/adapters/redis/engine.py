"""Redis adapter – RedisEngine."""
from __future__ import annotations

import contextlib
import re
from typing import Any, Iterator

from features.engine import Engine, FeatureFlag, FeatureFlagKey
from features.engine import codec
from features.kernel.errors import AlreadyExistsError, ConnectionError, NotFoundError
from features.observability.logging import get_logger

_log = get_logger(__name__)

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def _require_redis() -> Any:
    try:
        import redis
        return redis
    except ImportError as exc:
        raise ImportError("Install 'features[redis]' to use the Redis adapter") from exc


class RedisEngine(Engine):
    """Engine storing each flag as a JSON string under ``prefix + key``.

    Every operation is a single Redis command, so per-key atomicity comes
    from Redis itself: ``SET NX`` for :meth:`save`, ``DEL`` for :meth:`delete`.
    """

    def __init__(self, client: Any, prefix: str = "features:") -> None:
        self._client = client
        self._prefix = prefix
        # SCAN MATCH is a glob; the prefix itself must match literally.
        self._match = _GLOB_SPECIAL.sub(r"\\\1", prefix) + "*"

    @classmethod
    def from_url(cls, url: str, prefix: str = "features:", **kwargs: Any) -> "RedisEngine":
        redis = _require_redis()
        return cls(redis.Redis.from_url(url, **kwargs), prefix=prefix)

    def _name(self, key: str) -> str:
        return f"{self._prefix}{key}"

    @contextlib.contextmanager
    def _translate_errors(self) -> Iterator[None]:
        redis = _require_redis()
        try:
            yield
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as exc:
            raise ConnectionError("redis", str(exc), cause=exc) from exc

    def save(self, flag: FeatureFlag) -> None:
        with self._translate_errors():
            created = self._client.set(self._name(flag.key), codec.dumps(flag), nx=True)
        if not created:
            raise AlreadyExistsError(flag.key)
        _log.debug("feature_flag.saved", key=flag.key, backend="redis")

    def upsert(self, flag: FeatureFlag) -> None:
        with self._translate_errors():
            self._client.set(self._name(flag.key), codec.dumps(flag))
        _log.debug("feature_flag.upserted", key=flag.key, backend="redis")

    def find(self, key: str) -> FeatureFlag:
        with self._translate_errors():
            raw = self._client.get(self._name(key))
        if raw is None:
            raise NotFoundError("Feature flag", key)
        return codec.loads(raw)

    def find_all(self) -> list[FeatureFlag]:
        with self._translate_errors():
            names = list(self._client.scan_iter(match=self._match))
            if not names:
                return []
            values = self._client.mget(names)
        # A key deleted between SCAN and MGET comes back as None.
        return [codec.loads(raw) for raw in values if raw is not None]

    def delete(self, key: FeatureFlagKey) -> None:
        with self._translate_errors():
            removed = self._client.delete(self._name(key.key))
        if not removed:
            raise NotFoundError("Feature flag", key.key)
        _log.debug("feature_flag.deleted", key=key.key, backend="redis")

    def close(self) -> None:
        self._client.close()


__all__ = ["RedisEngine"]
