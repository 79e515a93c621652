"""Unit tests for the Redis engine – no running Redis required."""
from __future__ import annotations

import fnmatch
import threading
from typing import Any, Iterator
from unittest.mock import MagicMock, patch

import pytest
import redis

from features.adapters.redis import RedisEngine
from features.engine import Engine, FeatureFlag, FeatureFlagKey
from features.kernel.errors import (
    AlreadyExistsError,
    ConnectionError,
    NotFoundError,
    SerializationError,
)
from features.testing.contracts import EngineContract


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _DictRedis:
    """Thread-safe subset of the redis-py client used by RedisEngine."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def set(self, name: str, value: str, nx: bool = False) -> bool | None:
        with self._lock:
            if nx and name in self._data:
                return None
            self._data[name] = value.encode()
            return True

    def get(self, name: str) -> bytes | None:
        return self._data.get(name)

    def delete(self, *names: str) -> int:
        with self._lock:
            return sum(self._data.pop(n, None) is not None for n in names)

    def scan_iter(self, match: str) -> Iterator[bytes]:
        with self._lock:
            names = [n for n in self._data if fnmatch.fnmatchcase(n, match)]
        return iter(n.encode() for n in names)

    def mget(self, names: list[Any]) -> list[bytes | None]:
        return [self._data.get(n.decode() if isinstance(n, bytes) else n) for n in names]


def _make_engine() -> tuple[RedisEngine, MagicMock]:
    client = MagicMock()
    return RedisEngine(client, prefix="ff:"), client


# ---------------------------------------------------------------------------
# Contract
# ---------------------------------------------------------------------------


class TestRedisEngineContract(EngineContract):
    @pytest.fixture
    def engine(self) -> Engine:
        return RedisEngine(_DictRedis())


# ---------------------------------------------------------------------------
# Command usage
# ---------------------------------------------------------------------------


class TestRedisEngine:
    def test_save_uses_set_nx(self) -> None:
        engine, client = _make_engine()
        client.set.return_value = True
        engine.save(FeatureFlag(key="beta", enabled=True))
        client.set.assert_called_once_with("ff:beta", '{"key":"beta","enabled":true}', nx=True)

    def test_save_existing_raises(self) -> None:
        engine, client = _make_engine()
        client.set.return_value = None
        with pytest.raises(AlreadyExistsError):
            engine.save(FeatureFlag(key="beta"))

    def test_upsert_uses_plain_set(self) -> None:
        engine, client = _make_engine()
        engine.upsert(FeatureFlag(key="beta", percentage=10))
        client.set.assert_called_once_with("ff:beta", '{"key":"beta","enabled":false,"percentage":10}')

    def test_find_decodes_payload(self) -> None:
        engine, client = _make_engine()
        client.get.return_value = b'{"key":"beta","enabled":true,"users":["alice"]}'
        assert engine.find("beta") == FeatureFlag.new("beta", True, ["alice"])
        client.get.assert_called_once_with("ff:beta")

    def test_find_missing_raises(self) -> None:
        engine, client = _make_engine()
        client.get.return_value = None
        with pytest.raises(NotFoundError):
            engine.find("beta")

    def test_find_corrupt_payload_raises(self) -> None:
        engine, client = _make_engine()
        client.get.return_value = b"not json"
        with pytest.raises(SerializationError):
            engine.find("beta")

    def test_find_all_scans_prefix(self) -> None:
        engine, client = _make_engine()
        client.scan_iter.return_value = iter([b"ff:a", b"ff:b"])
        client.mget.return_value = [b'{"key":"a","enabled":true}', None]
        assert engine.find_all() == [FeatureFlag(key="a", enabled=True)]
        client.scan_iter.assert_called_once_with(match="ff:*")

    def test_find_all_matches_prefix_literally(self) -> None:
        client = MagicMock()
        client.scan_iter.return_value = iter([])
        RedisEngine(client, prefix="ff*[x]?:").find_all()
        client.scan_iter.assert_called_once_with(match="ff\\*\\[x\\]\\?:*")

    def test_find_all_empty_skips_mget(self) -> None:
        engine, client = _make_engine()
        client.scan_iter.return_value = iter([])
        assert engine.find_all() == []
        client.mget.assert_not_called()

    def test_delete_missing_raises(self) -> None:
        engine, client = _make_engine()
        client.delete.return_value = 0
        with pytest.raises(NotFoundError):
            engine.delete(FeatureFlagKey("beta"))

    def test_delete_existing(self) -> None:
        engine, client = _make_engine()
        client.delete.return_value = 1
        engine.delete(FeatureFlagKey("beta"))
        client.delete.assert_called_once_with("ff:beta")

    def test_connection_failure_is_translated(self) -> None:
        engine, client = _make_engine()
        client.get.side_effect = redis.exceptions.ConnectionError("refused")
        with pytest.raises(ConnectionError) as exc_info:
            engine.find("beta")
        assert exc_info.value.resource == "redis"

    def test_timeout_is_translated(self) -> None:
        engine, client = _make_engine()
        client.set.side_effect = redis.exceptions.TimeoutError("slow")
        with pytest.raises(ConnectionError):
            engine.upsert(FeatureFlag(key="beta"))

    def test_from_url(self) -> None:
        with patch.object(redis.Redis, "from_url", return_value=MagicMock()) as from_url:
            engine = RedisEngine.from_url("redis://localhost:6379/0", prefix="x:")
        from_url.assert_called_once_with("redis://localhost:6379/0")
        assert isinstance(engine, RedisEngine)

    def test_close(self) -> None:
        engine, client = _make_engine()
        engine.close()
        client.close.assert_called_once()
