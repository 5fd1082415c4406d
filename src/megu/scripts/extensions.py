"""
Extension resolution.

An ``extend`` reference is only an identifier. Resolving it looks the base
script up in an ``ExtensionStore`` every time; nothing is cached, so a deep
inheritance chain re-reads every ancestor on each compile.
"""

import logging
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Protocol, Union, cast

import orjson

from .errors import DecodeError, ExtensionError, ExtensionUnreadable, NotFound, StructureError
from .formats import ScriptFormat
from .models import SCRIPT_EXTENSIONS, RawRegistry, RawScript
from .namespace import Namespace

if TYPE_CHECKING:
    from .script import ScriptModel

BUILTIN_DATABASE = "database.json"


@dataclass(frozen=True)
class Extension:
    """Reference to a base script, as written in an ``extend`` field."""

    identifier: Namespace
    raw: str

    @classmethod
    def decode(cls, value: str) -> "Extension":
        """Validate an ``extend`` string.

        Raises:
            ExtensionError: Wrapping the DecodeError of the identifier
        """
        try:
            return cls(Namespace.decode(value), value)
        except DecodeError as error:
            raise ExtensionError(value, error) from error

    def __str__(self) -> str:
        return self.raw


class ExtensionStore(Protocol):
    """Backing store that maps identifiers to raw base scripts."""

    def lookup(self, identifier: Namespace) -> Optional[RawScript]:
        """Return the raw base script, or None if there is none."""
        ...


class RegistryExtensionStore:
    """Keyed in-memory registry of base scripts.

    Keys are namespace strings; they are decoded on construction so a key
    written without prefix matches the ``minecraft`` identifier.
    """

    def __init__(self, entries: Mapping[str, RawScript]):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._entries: Dict[Namespace, RawScript] = {
            Namespace.decode(key): value for key, value in entries.items()
        }
        self.logger.debug(f"Registry initialized with {len(self._entries)} entries")

    @classmethod
    def builtin(cls) -> "RegistryExtensionStore":
        """Load the registry bundled with the package."""
        data = orjson.loads(files("megu.resources").joinpath(BUILTIN_DATABASE).read_bytes())
        return cls(cast(RawRegistry, data))

    def lookup(self, identifier: Namespace) -> Optional[RawScript]:
        return self._entries.get(identifier)

    def identifiers(self) -> List[str]:
        """Return all registered identifiers, sorted."""
        return sorted(str(key) for key in self._entries)


class DirectoryExtensionStore:
    """Looks base scripts up as files laid out as ``{root}/{prefix}/{suffix}``.

    The first recognized script extension that exists wins, in the order of
    ``SCRIPT_EXTENSIONS``.
    """

    def __init__(self, root: Union[str, Path]):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.root = Path(root)

    def path_for(self, identifier: Namespace) -> Optional[Path]:
        """Return the script file for an identifier, or None.

        Files that would resolve outside the root directory are never
        returned, so a suffix such as ``/etc/passwd`` is simply not found.
        """
        root = self.root.resolve()
        base = (root / identifier.prefix / identifier.suffix).resolve()
        if root not in base.parents:
            self.logger.warning(f"Ignoring {identifier}: outside of {root}")
            return None
        for extension in SCRIPT_EXTENSIONS:
            candidate = base.with_name(base.name + extension)
            if candidate.is_file():
                return candidate
        return None

    def lookup(self, identifier: Namespace) -> Optional[RawScript]:
        path = self.path_for(identifier)
        if path is None:
            return None

        self.logger.debug(f"Reading extension {identifier} from {path}")
        try:
            return cast(RawScript, orjson.loads(path.read_bytes()))
        except (OSError, orjson.JSONDecodeError) as error:
            raise ExtensionUnreadable(str(identifier), error) from error


class ChainedExtensionStore:
    """Asks several stores in order; the first hit wins."""

    def __init__(self, *stores: ExtensionStore):
        self.stores = stores

    def lookup(self, identifier: Namespace) -> Optional[RawScript]:
        for store in self.stores:
            data = store.lookup(identifier)
            if data is not None:
                return data
        return None


class ExtensionResolver:
    """Resolves extension identifiers into decoded (uncompiled) scripts."""

    def __init__(self, store: ExtensionStore):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.store = store

    def resolve(self, identifier: Union[str, Namespace]) -> "ScriptModel":
        """Look up and decode the base script for an identifier.

        Args:
            identifier: Namespace string or already decoded Namespace

        Returns:
            The decoded base script, not yet compiled

        Raises:
            ExtensionError: If the identifier is invalid, unknown or its
                definition cannot be read
            ScriptFormatError: If the base script itself is invalid
        """
        from .script import ScriptModel

        if isinstance(identifier, Namespace):
            namespace = identifier
        else:
            namespace = Extension.decode(identifier).identifier

        data = self.store.lookup(namespace)
        if data is None:
            raise NotFound(str(identifier))

        self.logger.debug(f"Resolved extension {namespace}")
        try:
            fmt = ScriptFormat.from_dict(data)
        except StructureError as error:
            raise ExtensionUnreadable(str(identifier), error) from error
        return ScriptModel.from_format(fmt)
