"""
Settings validation system for megu.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        scripts_path = self.settings.scripts_path
        if not scripts_path.exists():
            errors.append(f"Scripts path does not exist: {scripts_path}")
        elif not scripts_path.is_dir():
            errors.append(f"Scripts path is not a directory: {scripts_path}")

        extensions_path = self.settings.extensions_path
        if extensions_path and not extensions_path.is_dir():
            warnings.append(
                f"Extensions path not found, using builtin registry only: {extensions_path}"
            )

        if errors:
            logger.debug(f"Settings validation failed with {len(errors)} errors")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
