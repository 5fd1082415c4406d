"""
Settings package for megu.

Configuration is stored with Qt's QSettings, either in the platform's
native store or in an INI file.

Usage:
    from megu.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigError, SettingsSection, ValidationResult
from .paths import PathSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigError",
    "ValidationResult",
    "SettingsSection",
    "PathSettings",
    "LoggingSettings",
]
