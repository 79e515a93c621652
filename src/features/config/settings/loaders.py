"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Callable, TypeVar

from dotenv import load_dotenv

from features.config.settings.base import Settings
from features.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


def _to_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


# Keyed by annotation text; settings modules use ``from __future__ import annotations``.
_COERCERS: dict[str, Callable[[str], Any]] = {
    "bool": _to_bool,
    "int": int,
    "float": float,
    "str": str,
}


def _coercer(annotation: Any) -> Callable[[str], Any]:
    name = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "")
    if name.startswith("list"):
        return _to_list
    return _COERCERS.get(name, str)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    ``FeaturesSettings.lock_stripes`` is read from ``FEATURES_LOCK_STRIPES``.
    Unset variables leave the field default in place.
    """

    def load(self, settings_class: type[T]) -> T:
        values: dict[str, Any] = {}
        for f in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = settings_class.env_key(f.name)
            raw = os.environ.get(env_key)
            if raw is None:
                if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(env_key)
                continue
            try:
                values[f.name] = _coercer(f.type)(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
