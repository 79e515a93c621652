"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from features.config.settings.base import Settings
from features.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from features.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from features.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


class SettingsFactory:
    """Build a settings dataclass from layered sources.

    Later loaders win over earlier ones and *overrides* win over every
    loader. A loader whose source lacks a required value is skipped with a
    warning so the others may supply it; a value that was loaded but is
    invalid raises :class:`InvalidSettingValueError`.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """Merge *loaders* and *overrides* into one ``settings_cls`` instance.

        Raises
        ------
        MissingRequiredSettingError
            A field without a default has no value from any source.
        InvalidSettingValueError
            A loader produced a value that fails coercion or ``_validate``.
        ConfigError
            Construction or ``_validate`` failed on the merged values.
        """
        values: dict[str, Any] = {}
        for loader in loaders or ():
            values.update(SettingsFactory._load(loader, settings_cls))
        values.update(overrides or {})

        for f in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            required = f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
            if required and f.name not in values:
                raise MissingRequiredSettingError(settings_cls.env_key(f.name))

        try:
            return settings_cls(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc

    @classmethod
    def from_environment(
        cls, settings_cls: type[T], env_file: str | None = None, **overrides: Any
    ) -> T:
        """Read ``settings_cls`` from the process environment.

        With *env_file* the file is loaded first; variables already set in
        the environment keep precedence.
        """
        loader: SettingsLoader = EnvSettingsLoader() if env_file is None else DotenvSettingsLoader(env_file)
        return cls.create(settings_cls, [loader], overrides)

    @staticmethod
    def _load(loader: SettingsLoader, settings_cls: type[T]) -> dict[str, Any]:
        try:
            instance = loader.load(settings_cls)
        except InvalidSettingValueError:
            raise
        except ConfigError as exc:
            _log.warning(
                "settings.loader_skipped",
                loader=type(loader).__name__,
                settings=settings_cls.__name__,
                code=exc.code,
                error=exc.message,
            )
            return {}
        return dataclasses.asdict(instance)


__all__ = ["SettingsFactory"]
