"""
Drop types and drop node trees.

The set of drop types is closed. Everything that varies per type (which
suffix names it, whether it is unsafe) is a table lookup.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple

from .errors import DecodeError, DropTypeError, InvalidNode, InvalidType, NotAllow
from .formats import DropFormat
from .models import (
    CHILDREN_KEY,
    CONDITIONS_KEY,
    DEFAULT_PREFIX,
    FUNCTIONS_KEY,
    NAME_KEY,
    TYPE_KEY,
    UNSAFE_KEY,
)
from .namespace import Namespace


class DropType(Enum):
    """Kinds of drop nodes; values are the namespace suffixes."""

    ITEM = "item"
    TAG = "tag"
    LOOT_TABLE = "loot_table"
    GROUP = "group"
    ALTERNATIVES = "alternatives"
    SEQUENCE = "sequence"
    DYNAMIC = "dynamic"
    EMPTY = "empty"


DROP_TYPES_BY_SUFFIX: Dict[str, DropType] = {kind.value: kind for kind in DropType}

# Kinds that recurse into children; authors must mark them unsafe
UNSAFE_DROP_TYPES: FrozenSet[DropType] = frozenset(
    {DropType.GROUP, DropType.ALTERNATIVES, DropType.SEQUENCE}
)


def is_unsafe(kind: DropType) -> bool:
    """Return True if the kind requires an explicit ``"unsafe": true``."""
    return kind in UNSAFE_DROP_TYPES


def resolve_drop_type(value: str) -> DropType:
    """Map a drop type string such as ``"minecraft:item"`` to a DropType.

    Raises:
        DropTypeError: Wrapping the DecodeError if the string is not a
            namespace
        InvalidType: If the prefix is not ``minecraft`` or the suffix is
            unknown
    """
    try:
        namespace = Namespace.decode(value)
    except DecodeError as error:
        raise DropTypeError(value, error) from error

    if namespace.prefix != DEFAULT_PREFIX:
        raise InvalidType(value)

    kind = DROP_TYPES_BY_SUFFIX.get(namespace.suffix)
    if kind is None:
        raise InvalidType(value)
    return kind


@dataclass(frozen=True)
class DropNode:
    """A validated pool entry or composite child."""

    kind: DropType
    name: Optional[str] = None
    children: Optional[Tuple["DropNode", ...]] = None
    conditions: Tuple[Any, ...] = field(default_factory=tuple)
    functions: Tuple[Any, ...] = field(default_factory=tuple)
    unsafe: bool = False

    def __post_init__(self) -> None:
        if self.unsafe != is_unsafe(self.kind):
            raise NotAllow(f"{DEFAULT_PREFIX}:{self.kind.value}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the script file representation."""
        data: Dict[str, Any] = {TYPE_KEY: f"{DEFAULT_PREFIX}:{self.kind.value}"}
        if self.unsafe:
            data[UNSAFE_KEY] = True
        if self.name is not None:
            data[NAME_KEY] = self.name
        if self.children is not None:
            data[CHILDREN_KEY] = [child.to_dict() for child in self.children]
        if self.functions:
            data[FUNCTIONS_KEY] = list(self.functions)
        if self.conditions:
            data[CONDITIONS_KEY] = list(self.conditions)
        return data


def build_drop_node(fmt: DropFormat) -> DropNode:
    """Validate a drop format into a DropNode tree.

    Children are built depth-first; the first error aborts the whole tree.

    Args:
        fmt: Structurally checked drop node

    Returns:
        Validated DropNode

    Raises:
        DropTypeError: If the type is invalid, the unsafe flag does not
            match the type, or the node structure is not allowed
    """
    kind = resolve_drop_type(fmt.type)

    declared_unsafe = bool(fmt.unsafe)
    if declared_unsafe != is_unsafe(kind):
        raise NotAllow(fmt.type)

    children = None
    if fmt.children is not None:
        if not is_unsafe(kind) or fmt.name is not None:
            raise InvalidNode(fmt.type)
        children = tuple(build_drop_node(child) for child in fmt.children)

    return DropNode(
        kind=kind,
        name=fmt.name,
        children=children,
        conditions=tuple(fmt.conditions),
        functions=tuple(fmt.functions),
        unsafe=declared_unsafe,
    )
