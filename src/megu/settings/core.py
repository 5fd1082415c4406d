"""
Core settings management for megu.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .types import ConfigError, ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Settings live in the platform's native store unless an INI file is
    given, and are grouped by profile.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file to use instead of the native store
        """
        if settings_file is not None:
            if Path(settings_file).is_dir():
                raise ConfigError(f"Settings file is a directory: {settings_file}")
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("megu", "megu")
        self.profile = profile

        # Use profile as a group: megu/default/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def scripts_path(self) -> Path:
        return self._paths.scripts_path

    @scripts_path.setter
    def scripts_path(self, value: Path) -> None:
        self._paths.scripts_path = value

    @property
    def extensions_path(self) -> Optional[Path]:
        return self._paths.extensions_path

    @extensions_path.setter
    def extensions_path(self, value: Optional[Path]) -> None:
        self._paths.extensions_path = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        return self._logging.log_file_path

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._logging.log_file_path = value

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        """Get path to the settings storage."""
        return self.settings.fileName()
