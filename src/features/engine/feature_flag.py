"""Engine – FeatureFlag, FeatureFlagKey and User value objects."""
from __future__ import annotations

import dataclasses
from typing import Iterable


@dataclasses.dataclass(frozen=True, slots=True)
class User:
    """Opaque user identity (an e-mail, an account id, …)."""

    id: str

    def __str__(self) -> str:
        return self.id


@dataclasses.dataclass(frozen=True, slots=True)
class FeatureFlagKey:
    """Addresses a stored flag without carrying the whole record."""

    key: str


@dataclasses.dataclass(frozen=True)
class FeatureFlag:
    """One feature flag's state.

    ``percentage`` is the inclusive rollout threshold; ``0`` means the flag is
    not percentage-scoped. ``users`` is the allow-list; empty means none.
    Instances are immutable, a later save replaces the whole record.
    """

    key: str
    enabled: bool = False
    percentage: int = 0
    users: tuple[User, ...] = ()

    @classmethod
    def new(
        cls,
        key: str,
        enabled: bool,
        users: Iterable[User | str] = (),
        percentage: int = 0,
    ) -> "FeatureFlag":
        """Build a flag, accepting raw identifier strings in *users*."""
        return cls(
            key=key,
            enabled=enabled,
            percentage=percentage,
            users=tuple(u if isinstance(u, User) else User(u) for u in users),
        )

    @property
    def is_scoped(self) -> bool:
        """``True`` when access depends on user identity or rollout."""
        return bool(self.users) or self.percentage != 0

    def has_user(self, user_id: str) -> bool:
        return any(user.id == user_id for user in self.users)

    def lookup_key(self) -> FeatureFlagKey:
        return FeatureFlagKey(self.key)


__all__ = ["FeatureFlag", "FeatureFlagKey", "User"]
