"""
Logging-related settings for megu.
"""

import logging

from .types import SettingsSection

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/megu.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(SettingsSection):
    """Console and CSV file logging options."""

    section = "logging"

    @property
    def console_logging(self) -> bool:
        return self._get_bool("console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set("console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Console level name; the file handler always records DEBUG."""
        return self._get_str("console_level", "INFO")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(
                f"Invalid console log level: {value}, keeping {self.console_log_level}"
            )
            return
        self._set("console_level", level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set("console_use_colors", value)

    @property
    def file_logging(self) -> bool:
        return self._get_bool("file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set("file_enabled", value)

    @property
    def log_file_path(self) -> str:
        """Get the CSV log file path; relative paths start at the working directory."""
        return self._get_str("file_path", LOG_FILE_PATH) or LOG_FILE_PATH

    @log_file_path.setter
    def log_file_path(self, value: str) -> None:
        self._set("file_path", str(value))
