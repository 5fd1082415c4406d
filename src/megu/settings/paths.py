"""
Path-related settings for megu.
"""

from pathlib import Path
from typing import Optional

from .types import SettingsSection


class PathSettings(SettingsSection):
    """Directories the command line falls back to."""

    section = "paths"

    @property
    def scripts_path(self) -> Path:
        """Get the directory interpreted when no paths are given."""
        return Path(self._get_str("scripts", "."))

    @scripts_path.setter
    def scripts_path(self, value: Path) -> None:
        self._set("scripts", str(value))

    @property
    def extensions_path(self) -> Optional[Path]:
        """Get the directory holding file-based extensions ({prefix}/{suffix}.megu)."""
        path_str = self._get_str("extensions")
        return Path(path_str) if path_str else None

    @extensions_path.setter
    def extensions_path(self, value: Optional[Path]) -> None:
        self._set("extensions", str(value) if value else "")
