"""
Script model and its composition pipeline.

A script goes through three stages: decode (``from_format``), compile
(inheritance merged through the extension resolver) and removal
(``apply_removals``). ``merge`` is the single primitive behind both
inheritance and combining several scripts.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .drops import DropNode, build_drop_node
from .errors import CircularExtension, CombineError, ScriptFormatError
from .extensions import Extension, ExtensionResolver
from .formats import ScriptFormat
from .models import EXTEND_KEY, POOLS_KEY, REMOVE_KEY, TYPE_KEY, RawScript
from .namespace import Namespace

logger = logging.getLogger(__name__)


@dataclass
class ScriptModel:
    """A validated Loot Table Script."""

    kind: Optional[str] = None
    extend: Optional[Extension] = None
    pools: Dict[Namespace, DropNode] = field(default_factory=dict)
    remove: List[Namespace] = field(default_factory=list)

    @classmethod
    def from_format(cls, fmt: ScriptFormat) -> "ScriptModel":
        """Validate a structurally checked script.

        Pool keys, drop nodes, the extend reference and the removal list
        are validated in that order; the first failure aborts.

        Raises:
            ScriptFormatError: DecodeError, DropTypeError or ExtensionError
        """
        pools: Dict[Namespace, DropNode] = {}
        for key, drop in fmt.pools.items():
            pools[Namespace.decode(key)] = build_drop_node(drop)

        extend = Extension.decode(fmt.extend) if fmt.extend is not None else None
        remove = [Namespace.decode(entry) for entry in fmt.remove]

        return cls(kind=fmt.type, extend=extend, pools=pools, remove=remove)

    @classmethod
    def from_dict(cls, data: Any) -> "ScriptModel":
        """Check the shape of decoded JSON and validate it.

        Raises:
            StructureError: If the data does not have the script shape
            ScriptFormatError: If validation fails
        """
        return cls.from_format(ScriptFormat.from_dict(data))

    def merge(self, other: "ScriptModel") -> None:
        """Merge this script into ``other``.

        Pool entries of this script overwrite entries with the same key,
        removal lists are concatenated (other's first). ``self`` is never
        modified.
        """
        other.pools.update(self.pools)
        other.remove.extend(self.remove)

    def compile(self, resolver: ExtensionResolver) -> "ScriptModel":
        """Resolve the inheritance chain into a new, flattened script.

        The returned script has no extend reference and still carries its
        removal list; removals are applied separately.

        Raises:
            ScriptFormatError: If any extension in the chain fails to resolve
        """
        return self._compile(resolver, ())

    def _compile(
        self, resolver: ExtensionResolver, chain: Tuple[Namespace, ...]
    ) -> "ScriptModel":
        if self.extend is None:
            base = ScriptModel()
        else:
            identifier = self.extend.identifier
            if identifier in chain:
                raise CircularExtension(str(self.extend))

            logger.debug(f"Compiling extension {identifier}")
            parent = resolver.resolve(self.extend.raw)
            base = parent._compile(resolver, chain + (identifier,))

        self.merge(base)
        if self.kind is not None:
            base.kind = self.kind
        return base

    def apply_removals(self) -> None:
        """Delete every pool listed in the removal list; missing keys are ignored."""
        for namespace in self.remove:
            if self.pools.pop(namespace, None) is not None:
                logger.debug(f"Removed pool {namespace}")

    def to_dict(self) -> RawScript:
        """Convert to the script file representation."""
        data: RawScript = {}
        if self.kind is not None:
            data[TYPE_KEY] = self.kind
        if self.extend is not None:
            data[EXTEND_KEY] = str(self.extend)
        data[POOLS_KEY] = {str(key): drop.to_dict() for key, drop in self.pools.items()}
        if self.remove:
            data[REMOVE_KEY] = [str(namespace) for namespace in self.remove]
        return data


def combine(scripts: List[ScriptModel], resolver: ExtensionResolver) -> ScriptModel:
    """Compile each script and merge them in order; later scripts win.

    Removals of all scripts are applied once, after the last merge.

    Raises:
        CombineError: If one of the scripts fails to compile
    """
    result = ScriptModel()
    for index, script in enumerate(scripts):
        try:
            compiled = script.compile(resolver)
        except ScriptFormatError as error:
            raise CombineError(index, error) from error
        compiled.merge(result)
        if compiled.kind is not None:
            result.kind = compiled.kind

    result.apply_removals()
    logger.debug(f"Combined {len(scripts)} scripts into {len(result.pools)} pools")
    return result
