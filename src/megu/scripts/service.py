"""
Main service for interpreting Loot Table Scripts.

Provides the high-level API: interpret a file, interpret every script in a
directory, and combine scripts in order into one resolved result.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .errors import NotAFile, NotExist, ReadError, ScriptReadError
from .extensions import ExtensionResolver, RegistryExtensionStore
from .loaders import ScriptFileLoader
from .meta import is_loot_table_script
from .script import ScriptModel, combine


class ScriptService:
    """Service for interpreting and combining Loot Table Scripts.

    Extensions are resolved through the injected resolver; without one the
    registry bundled with the package is used.
    """

    def __init__(self, resolver: Optional[ExtensionResolver] = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.loader = ScriptFileLoader()
        self.resolver = resolver or ExtensionResolver(RegistryExtensionStore.builtin())

    def interpret_file(self, path: Union[str, Path]) -> ScriptModel:
        """Read and decode one script file.

        Args:
            path: Path to a script file

        Returns:
            Decoded (not yet compiled) ScriptModel

        Raises:
            NotExist: If the path does not exist
            NotAFile: If the path is a directory
            ScriptReadError: If the file cannot be read or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise NotExist(path)
        if path.is_dir():
            raise NotAFile(path)

        self.logger.info(f"Interpreting {path}")
        try:
            return self.loader.read(path)
        except ReadError as error:
            raise ScriptReadError(path, error) from error

    def interpret_directory(self, path: Union[str, Path]) -> List[ScriptModel]:
        """Interpret every script file directly inside a directory.

        Files are taken in name order so the combination order is stable.

        Raises:
            NotExist: If the directory does not exist
            MeguError: For the first file that fails
        """
        path = Path(path)
        if not path.exists():
            raise NotExist(path)

        script_files = sorted(
            entry for entry in path.iterdir()
            if entry.is_file() and is_loot_table_script(entry)
        )
        self.logger.info(f"Found {len(script_files)} scripts in {path}")
        return [self.interpret_file(script_file) for script_file in script_files]

    def combine(self, scripts: Sequence[ScriptModel]) -> ScriptModel:
        """Compile scripts and merge them in the given order; the last one wins.

        Raises:
            CombineError: If one of the scripts fails to compile
        """
        result = combine(list(scripts), self.resolver)
        self.logger.info(f"Combined {len(scripts)} scripts into {len(result.pools)} pools")
        return result

    def compile_file(self, path: Union[str, Path]) -> ScriptModel:
        """Interpret one file and return its final, removal-applied result.

        Raises:
            MeguError: If the file cannot be interpreted
            ScriptFormatError: If its inheritance chain cannot be resolved
        """
        script = self.interpret_file(path).compile(self.resolver)
        script.apply_removals()
        return script


_default_service: Optional[ScriptService] = None


def get_default_service() -> ScriptService:
    """Return the shared service that uses the builtin extension registry."""
    global _default_service
    if _default_service is None:
        _default_service = ScriptService()
    return _default_service


def interpret_file(path: Union[str, Path]) -> ScriptModel:
    """Shortcut for ``get_default_service().interpret_file(path)``."""
    return get_default_service().interpret_file(path)


def combine_scripts(scripts: Sequence[ScriptModel]) -> ScriptModel:
    """Shortcut for ``get_default_service().combine(scripts)``."""
    return get_default_service().combine(scripts)
