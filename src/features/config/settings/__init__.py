"""Config settings – 12-factor env-based configuration."""
from features.config.settings.base import Settings
from features.config.settings.factory import SettingsFactory
from features.config.settings.features import FeaturesSettings
from features.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FeaturesSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
