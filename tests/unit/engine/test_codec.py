"""Unit tests for the FeatureFlag JSON codec."""

from __future__ import annotations

import json

import pytest

from features.engine import FeatureFlag, User, codec
from features.kernel.errors import SerializationError


class TestToDict:
    def test_omits_zero_percentage_and_empty_users(self) -> None:
        assert codec.to_dict(FeatureFlag(key="beta", enabled=True)) == {
            "key": "beta",
            "enabled": True,
        }

    def test_includes_percentage_and_users(self) -> None:
        flag = FeatureFlag.new("beta", False, ["alice@example.org"], 20)
        assert codec.to_dict(flag) == {
            "key": "beta",
            "enabled": False,
            "percentage": 20,
            "users": ["alice@example.org"],
        }

    def test_dumps_is_compact_json(self) -> None:
        raw = codec.dumps(FeatureFlag(key="login_via_email", enabled=True, percentage=20))
        assert raw == '{"key":"login_via_email","enabled":true,"percentage":20}'


class TestFromDict:
    def test_full_payload(self) -> None:
        flag = codec.from_dict(
            {"key": "beta", "enabled": True, "percentage": 5, "users": ["a", "b"]}
        )
        assert flag == FeatureFlag(key="beta", enabled=True, percentage=5, users=(User("a"), User("b")))

    def test_missing_fields_use_defaults(self) -> None:
        assert codec.from_dict({"percentage": 20, "enabled": True}) == FeatureFlag(
            key="", enabled=True, percentage=20
        )

    def test_null_fields_use_defaults(self) -> None:
        flag = codec.from_dict({"key": None, "enabled": None, "percentage": None, "users": None})
        assert flag == FeatureFlag(key="")

    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"key": 1}, "key"),
            ({"key": "beta", "enabled": "yes"}, "enabled"),
            ({"key": "beta", "percentage": "20"}, "percentage"),
            ({"key": "beta", "percentage": True}, "percentage"),
            ({"key": "beta", "users": "alice"}, "users"),
            ({"key": "beta", "users": [1, 2]}, "users"),
            ({"key": "beta", "users": ""}, "users"),
            ({"key": "beta", "users": 0}, "users"),
            ({"key": "beta", "users": False}, "users"),
            ({"key": "beta", "users": {}}, "users"),
        ],
    )
    def test_rejects_wrong_types(self, payload: dict, field: str) -> None:
        with pytest.raises(SerializationError) as exc_info:
            codec.from_dict(payload)
        assert exc_info.value.field == field
        assert exc_info.value.detail == {"field": field}

    def test_rejects_non_object(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            codec.from_dict(["beta"])
        assert exc_info.value.payload_type == "list"


class TestLoads:
    def test_loads_bytes(self) -> None:
        flag = codec.loads(b'{"key": "beta", "enabled": true}')
        assert flag == FeatureFlag(key="beta", enabled=True)

    def test_invalid_json_raises_serialization_error(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            codec.loads('{"percentage": 2: "enabled": true}')
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_round_trip_preserves_user_order(self) -> None:
        flag = FeatureFlag.new("beta", True, ["zoe", "adam", "mia"], 40)
        assert codec.loads(codec.dumps(flag)) == flag
