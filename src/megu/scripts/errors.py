"""
Error types for Loot Table Script processing.

Every layer wraps the error of the layer below it (``raise ... from``) and
keeps the original on ``.error``. The first error aborts the whole
operation, nothing is aggregated.
"""

from pathlib import Path
from typing import Optional


class ScriptFormatError(Exception):
    """Base class for every validation failure inside a script."""

    def __init__(self, value: str, error: Optional[Exception] = None):
        self.value = value
        self.error = error
        super().__init__(self.describe())

    def describe(self) -> str:
        if self.error is not None:
            return str(self.error)
        return f"Invalid value '{self.value}'"


# === NAMESPACE ===


class DecodeError(ScriptFormatError):
    """Raised when a namespace string cannot be decoded."""


class InvalidNamespace(DecodeError):
    def describe(self) -> str:
        return f"'{self.value}' contains characters not allowed in a namespace"


class TooManyColons(DecodeError):
    def describe(self) -> str:
        return f"'{self.value}' contains more than one ':'"


# === DROP TYPES ===


class DropTypeError(ScriptFormatError):
    """Raised when a drop node has an invalid or disallowed type.

    A plain ``DropTypeError`` wraps the ``DecodeError`` of its type string.
    """


class InvalidType(DropTypeError):
    def describe(self) -> str:
        return f"'{self.value}' is not a known drop type"


class NotAllow(DropTypeError):
    def describe(self) -> str:
        return f"'{self.value}' does not match its required 'unsafe' flag"


class InvalidNode(DropTypeError):
    def describe(self) -> str:
        return (
            f"'{self.value}' node cannot combine 'name' and 'children' "
            "or declare children on a non-composite type"
        )


# === EXTENSIONS ===


class ExtensionError(ScriptFormatError):
    """Raised when an 'extend' reference cannot be resolved.

    A plain ``ExtensionError`` wraps the ``DecodeError`` of the identifier.
    """


class NotFound(ExtensionError):
    def describe(self) -> str:
        return f"Does not recognize '{self.value}' in 'extend' field"


class CircularExtension(ExtensionError):
    def describe(self) -> str:
        return f"'{self.value}' extends itself through its inheritance chain"


class ExtensionUnreadable(ExtensionError):
    def describe(self) -> str:
        return f"Extension '{self.value}' could not be read: {self.error}"


# === STRUCTURE ===


class StructureError(ValueError):
    """Decoded data does not have the shape of a script."""

    def __init__(self, location: str, message: str):
        self.location = location
        super().__init__(f"{location}: {message}")


# === FILE READING ===


class ReadError(Exception):
    """Raised when a script file cannot be turned into a script model."""

    def __init__(self, path: Path, error: Exception):
        self.path = Path(path)
        self.error = error
        super().__init__(f"[{self.path}] {error}")


class ScriptIOError(ReadError):
    pass


class ScriptSyntaxError(ReadError):
    pass


class InvalidScript(ReadError):
    pass


# === TOP LEVEL ===


class MeguError(Exception):
    """Top level error of the orchestration layer."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        super().__init__(message)


class NotExist(MeguError):
    def __init__(self, path: Path):
        super().__init__(path, f"'{path}' does not exist")


class NotAFile(MeguError):
    def __init__(self, path: Path):
        super().__init__(path, f"'{path}' is not a file")


class ScriptReadError(MeguError):
    def __init__(self, path: Path, error: ReadError):
        self.error = error
        super().__init__(path, str(error))


class CombineError(Exception):
    """Raised when one of the combined scripts fails to compile."""

    def __init__(self, index: int, error: ScriptFormatError):
        self.index = index
        self.error = error
        super().__init__(f"Script #{index}: {error}")


# === PACK METADATA ===


class MetaError(Exception):
    """Raised when ``pack.mcmeta`` is missing or unusable."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        super().__init__(message)


class MetaNotExist(MetaError):
    def __init__(self, path: Path):
        super().__init__(path, f"'{path}' does not exist")


class MetaNotAFile(MetaError):
    def __init__(self, path: Path):
        super().__init__(path, f"'{path}' is a directory")


class MetaIOError(MetaError):
    def __init__(self, path: Path, error: Exception):
        self.error = error
        super().__init__(path, f"[{path}] {error}")


class MetaSyntaxError(MetaError):
    def __init__(self, path: Path, error: Exception):
        self.error = error
        super().__init__(path, f"[{path}] {error}")


class NoCompilerOptions(MetaError):
    def __init__(self, path: Path):
        super().__init__(path, f"'{path}' does not have 'compiler_options' field")
