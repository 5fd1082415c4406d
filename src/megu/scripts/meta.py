"""
Data pack helpers: script file sniffing and the ``pack.mcmeta`` check.
"""

from pathlib import Path
from typing import Any, Union

import orjson

from .errors import (
    MetaIOError,
    MetaNotAFile,
    MetaNotExist,
    MetaSyntaxError,
    NoCompilerOptions,
    StructureError,
)
from .models import COMPILER_OPTIONS_KEY, SCRIPT_EXTENSIONS


def is_loot_table_script(path: Union[str, Path]) -> bool:
    """Check if ``path`` has one of the Loot Table Script extensions."""
    return Path(path).name.endswith(SCRIPT_EXTENSIONS)


def check_meta(path: Union[str, Path]) -> None:
    """Check that a ``pack.mcmeta`` file declares ``compiler_options``.

    Raises:
        MetaNotExist: If the path does not exist
        MetaNotAFile: If the path is a directory
        MetaIOError: If the file cannot be read
        MetaSyntaxError: If the file is not valid JSON or ``compiler_options``
            is not a list of objects with a string ``name``
        NoCompilerOptions: If the field is missing
    """
    path = Path(path)
    if not path.exists():
        raise MetaNotExist(path)
    if path.is_dir():
        raise MetaNotAFile(path)

    try:
        content = path.read_bytes()
    except OSError as error:
        raise MetaIOError(path, error) from error

    try:
        data: Any = orjson.loads(content)
    except orjson.JSONDecodeError as error:
        raise MetaSyntaxError(path, error) from error

    if not isinstance(data, dict) or data.get(COMPILER_OPTIONS_KEY) is None:
        raise NoCompilerOptions(path)

    options = data[COMPILER_OPTIONS_KEY]
    if not isinstance(options, list):
        error = StructureError(COMPILER_OPTIONS_KEY, "expected a list")
        raise MetaSyntaxError(path, error)
    for index, option in enumerate(options):
        if not isinstance(option, dict) or not isinstance(option.get("name"), str):
            error = StructureError(
                f"{COMPILER_OPTIONS_KEY}[{index}]", "expected an object with a string name"
            )
            raise MetaSyntaxError(path, error)
