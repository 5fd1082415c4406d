"""
Configuration type definitions and exceptions for megu.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be accessed."""
    pass


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str]


class SettingsSection:
    """Group of related keys inside one QSettings profile.

    INI files hand every value back as a string, so reads are coerced to the
    expected type. Writes are synced immediately.
    """

    section = ""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _key(self, name: str) -> str:
        return f"{self.section}/{name}"

    def _get_str(self, name: str, default: str = "") -> str:
        value = self.settings.value(self._key(name), default)
        return str(value) if value is not None else default

    def _get_bool(self, name: str, default: bool = False) -> bool:
        value = self.settings.value(self._key(name), default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _set(self, name: str, value: Any) -> None:
        self.settings.setValue(self._key(name), value)
        self.settings.sync()
