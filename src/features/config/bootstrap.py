"""Config – build the configured engine and facade."""
from __future__ import annotations

from features.config.settings.factory import SettingsFactory
from features.config.settings.features import FeaturesSettings
from features.engine import Engine, MemoryEngine
from features.features import Features
from features.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


def build_engine(settings: FeaturesSettings) -> Engine:
    """Return a fresh engine for ``settings.backend``.

    Adapter modules are imported lazily so the redis / sqlalchemy extras are
    only needed when selected.
    """
    if settings.backend == "redis":
        from features.adapters.redis import RedisEngine

        engine: Engine = RedisEngine.from_url(settings.redis_url, prefix=settings.redis_prefix)
    elif settings.backend == "sqlalchemy":
        from features.adapters.sqlalchemy import SqlAlchemyEngine

        engine = SqlAlchemyEngine.from_url(settings.database_url)
        engine.create_schema()
    else:
        engine = MemoryEngine(stripes=settings.lock_stripes)

    _log.info("features.engine_built", backend=settings.backend)
    return engine


def create_features(settings: FeaturesSettings | None = None, *, configure_logging: bool = False) -> Features:
    """Build a :class:`Features` facade bound to the configured engine.

    Without *settings*, ``FEATURES_*`` environment variables are read.
    """
    if settings is None:
        settings = SettingsFactory.from_environment(FeaturesSettings)
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level, json=settings.log_json)
    return Features(build_engine(settings))


__all__ = ["build_engine", "create_features"]
