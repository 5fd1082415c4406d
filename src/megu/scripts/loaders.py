"""
File loader for Loot Table Script files.

Reads raw bytes and decodes them with orjson, then validates the result
into a ScriptModel.
"""

import logging
from pathlib import Path

import orjson

from .errors import (
    InvalidScript,
    ScriptFormatError,
    ScriptIOError,
    ScriptSyntaxError,
    StructureError,
)
from .formats import ScriptFormat
from .script import ScriptModel


class ScriptFileLoader:
    """Loads and validates script files."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("ScriptFileLoader initialized")

    def read(self, path: Path) -> ScriptModel:
        """Read a script file and decode it into a ScriptModel.

        The returned script is decoded only; extensions are not resolved.

        Args:
            path: Path to the script file

        Returns:
            Decoded ScriptModel

        Raises:
            ScriptIOError: If the file cannot be read
            ScriptSyntaxError: If the content is not JSON or not shaped
                like a script
            InvalidScript: If the script fails validation
        """
        try:
            with path.open("rb") as f:  # orjson works with bytes
                content = f.read()
        except OSError as error:
            raise ScriptIOError(path, error) from error

        try:
            fmt = ScriptFormat.from_dict(orjson.loads(content))
        except (orjson.JSONDecodeError, StructureError) as error:
            raise ScriptSyntaxError(path, error) from error

        try:
            script = ScriptModel.from_format(fmt)
        except ScriptFormatError as error:
            raise InvalidScript(path, error) from error

        self.logger.debug(
            f"Loaded {path} with {len(script.pools)} pools "
            f"and {len(script.remove)} removals"
        )
        return script
