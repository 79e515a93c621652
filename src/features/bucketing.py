"""Percentage rollout bucketing."""
from __future__ import annotations

import zlib

BUCKETS = 100


def bucket(user_id: str) -> int:
    """Map *user_id* to a stable bucket in ``[0, 100)``.

    CRC-32 (IEEE) of the UTF-8 bytes, modulo 100. The value never changes
    between runs or processes, so a user's rollout decision only moves when
    the stored percentage does.
    """
    return zlib.crc32(user_id.encode("utf-8")) % BUCKETS


def in_rollout(user_id: str, percentage: int) -> bool:
    """``True`` when *user_id* falls inside an inclusive *percentage* rollout."""
    return bucket(user_id) <= percentage


__all__ = ["BUCKETS", "bucket", "in_rollout"]
