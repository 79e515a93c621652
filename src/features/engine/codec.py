"""Engine – JSON boundary codec for :class:`FeatureFlag`.

Wire shape::

    {"key": "login_via_email", "enabled": true, "percentage": 20,
     "users": ["alice@example.org"]}

``percentage`` is omitted when ``0`` and ``users`` when empty. On decode every
field is optional and ``null`` counts as missing; a missing ``key`` decodes
to ``""`` so that validation, not decoding, reports it.
"""
from __future__ import annotations

import json
from typing import Any

from features.engine.feature_flag import FeatureFlag, User
from features.kernel.errors import SerializationError


def to_dict(flag: FeatureFlag) -> dict[str, Any]:
    payload: dict[str, Any] = {"key": flag.key, "enabled": flag.enabled}
    if flag.percentage:
        payload["percentage"] = flag.percentage
    if flag.users:
        payload["users"] = [user.id for user in flag.users]
    return payload


def _field(data: dict[str, Any], name: str, default: Any) -> Any:
    value = data.get(name)
    return default if value is None else value


def from_dict(data: Any) -> FeatureFlag:
    if not isinstance(data, dict):
        raise SerializationError(
            "Feature flag payload must be a JSON object", payload_type=type(data).__name__
        )

    # Absent and null fields both decode to the field default.
    key = _field(data, "key", "")
    enabled = _field(data, "enabled", False)
    percentage = _field(data, "percentage", 0)
    users = _field(data, "users", [])

    if not isinstance(key, str):
        raise SerializationError("'key' must be a string", field="key")
    if not isinstance(enabled, bool):
        raise SerializationError("'enabled' must be a boolean", field="enabled")
    # bool is a subclass of int
    if isinstance(percentage, bool) or not isinstance(percentage, int):
        raise SerializationError("'percentage' must be an integer", field="percentage")
    if not isinstance(users, list) or not all(isinstance(u, str) for u in users):
        raise SerializationError("'users' must be a list of strings", field="users")

    return FeatureFlag(
        key=key,
        enabled=enabled,
        percentage=percentage,
        users=tuple(User(u) for u in users),
    )


def dumps(flag: FeatureFlag) -> str:
    return json.dumps(to_dict(flag), separators=(",", ":"))


def loads(raw: str | bytes) -> FeatureFlag:
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SerializationError(str(exc), payload_type="FeatureFlag", cause=exc) from exc
    return from_dict(data)


__all__ = ["dumps", "from_dict", "loads", "to_dict"]
