"""Config – 12-factor settings and engine wiring."""

from features.config.bootstrap import build_engine, create_features
from features.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FeaturesSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from features.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FeaturesSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "build_engine",
    "create_features",
]
