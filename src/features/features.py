"""Features – the evaluation facade over one storage :class:`Engine`."""
from __future__ import annotations

from typing import Callable

from features.bucketing import in_rollout
from features.engine import Engine, FeatureFlag, FeatureFlagKey
from features.kernel.errors import BaseError, InvalidKeyError, ScopedFlagError
from features.observability.logging import get_logger

_log = get_logger(__name__)


class Features:
    """Validate, store and evaluate feature flags.

    The facade holds no flag state; the injected engine owns every record.
    One instance may be shared by many threads.

    Usage::

        features = Features(MemoryEngine())
        features.save(FeatureFlag(key="login_via_email", enabled=True))
        features.is_enabled("login_via_email")  # True
        features.with_feature("login_via_email", send_magic_link)
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def valid(self, flag: FeatureFlag) -> bool:
        """Return ``True`` for a storable flag; raise ``InvalidKeyError`` otherwise."""
        if not flag.key:
            raise InvalidKeyError()
        return True

    def save(self, flag: FeatureFlag) -> None:
        """Validate *flag*, then insert it or replace the stored record.

        Create-only semantics are the caller's business: check with
        :meth:`find` first, or use ``engine.save`` directly.
        """
        try:
            self.valid(flag)
        except InvalidKeyError:
            _log.info("feature_flag.rejected", reason="invalid_key")
            raise
        self._engine.upsert(flag)

    def delete(self, key: str) -> None:
        self._engine.delete(FeatureFlagKey(key))

    def find(self, key: str) -> FeatureFlag:
        return self._engine.find(key)

    def find_all(self) -> list[FeatureFlag]:
        return self._engine.find_all()

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def is_enabled(self, key: str) -> bool:
        """Global answer for an unscoped flag.

        Raises ``NotFoundError`` for an unknown key and ``ScopedFlagError``
        for a flag with an allow-list or percentage. Every error raised here,
        backend failures included, carries ``fallback=False``.
        """
        flag = self._find_for_evaluation(key, fallback=False)
        if flag.is_scoped:
            raise ScopedFlagError(key, fallback=False)
        return flag.enabled

    def is_disabled(self, key: str) -> bool:
        """Complement of :meth:`is_enabled`; its errors carry ``fallback=True``."""
        flag = self._find_for_evaluation(key, fallback=True)
        if flag.is_scoped:
            raise ScopedFlagError(key, fallback=True)
        return not flag.enabled

    def with_feature(self, key: str, action: Callable[[], object]) -> None:
        """Run *action* only when *key* is unambiguously enabled."""
        if self._enabled_or_none(key):
            action()

    def without_feature(self, key: str, action: Callable[[], object]) -> None:
        """Run *action* unless *key* is unambiguously enabled."""
        if not self._enabled_or_none(key):
            action()

    def user_has_access(self, key: str, user_id: str) -> bool:
        """Decide access for one user.

        The allow-list wins over everything; a disabled flag grants nothing
        else; an enabled flag admits users whose bucket is within the
        rollout percentage.
        """
        try:
            flag = self._engine.find(key)
        except BaseError as exc:
            _log.debug("feature_flag.evaluation_suppressed", key=key, code=exc.code)
            return False

        if flag.has_user(user_id):
            return True
        if not flag.enabled:
            return False
        return in_rollout(user_id, flag.percentage)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find_for_evaluation(self, key: str, *, fallback: bool) -> FeatureFlag:
        try:
            return self._engine.find(key)
        except BaseError as exc:
            exc.fallback = fallback
            raise

    def _enabled_or_none(self, key: str) -> bool | None:
        try:
            return self.is_enabled(key)
        except BaseError as exc:
            _log.debug("feature_flag.evaluation_suppressed", key=key, code=exc.code)
            return None


__all__ = ["Features"]
