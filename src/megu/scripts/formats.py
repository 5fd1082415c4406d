"""
Structural formats of a script file.

These dataclasses only check the JSON shape (which keys hold which JSON
types). Namespace and drop type validation happens when a format is turned
into a ``ScriptModel``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, cast

from .errors import StructureError
from .models import (
    CHILDREN_KEY,
    CONDITIONS_KEY,
    EXTEND_KEY,
    FUNCTIONS_KEY,
    NAME_KEY,
    POOLS_KEY,
    REMOVE_KEY,
    TYPE_KEY,
    UNSAFE_KEY,
    OpaqueList,
    RawDrop,
    RawScript,
)


def _optional(data: Dict[str, Any], key: str, kind: type, location: str) -> Any:
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        raise StructureError(f"{location}.{key}", f"expected {kind.__name__}")
    return value


@dataclass
class DropFormat:
    """Shape of one drop node."""

    type: str
    unsafe: Optional[bool] = None
    name: Optional[str] = None
    children: Optional[List["DropFormat"]] = None
    functions: OpaqueList = field(default_factory=list)
    conditions: OpaqueList = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, location: str = "drop") -> "DropFormat":
        """Create DropFormat from a decoded JSON value.

        Args:
            data: Decoded JSON value expected to be an object
            location: Dotted path used in error messages

        Returns:
            DropFormat instance

        Raises:
            StructureError: If the value does not have the drop node shape
        """
        if not isinstance(data, dict):
            raise StructureError(location, "expected object")
        raw = cast(RawDrop, data)

        drop_type = raw.get(TYPE_KEY)
        if not isinstance(drop_type, str):
            raise StructureError(f"{location}.{TYPE_KEY}", "required string")

        children = None
        raw_children = _optional(raw, CHILDREN_KEY, list, location)
        if raw_children is not None:
            children = [
                cls.from_dict(child, f"{location}.{CHILDREN_KEY}[{index}]")
                for index, child in enumerate(cast(List[Any], raw_children))
            ]

        return cls(
            type=drop_type,
            unsafe=_optional(raw, UNSAFE_KEY, bool, location),
            name=_optional(raw, NAME_KEY, str, location),
            children=children,
            functions=list(_optional(raw, FUNCTIONS_KEY, list, location) or []),
            conditions=list(_optional(raw, CONDITIONS_KEY, list, location) or []),
        )


@dataclass
class ScriptFormat:
    """Shape of a whole script file."""

    type: Optional[str] = None
    extend: Optional[str] = None
    pools: Dict[str, DropFormat] = field(default_factory=dict)
    remove: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ScriptFormat":
        """Create ScriptFormat from a decoded JSON value.

        Raises:
            StructureError: If the value does not have the script shape
        """
        if not isinstance(data, dict):
            raise StructureError("script", "expected object")
        raw = cast(RawScript, data)

        pools: Dict[str, DropFormat] = {}
        raw_pools = _optional(raw, POOLS_KEY, dict, "script")
        for key, value in cast(Dict[str, Any], raw_pools or {}).items():
            pools[key] = DropFormat.from_dict(value, f"{POOLS_KEY}.{key}")

        remove = cast(List[Any], _optional(raw, REMOVE_KEY, list, "script") or [])
        for index, entry in enumerate(remove):
            if not isinstance(entry, str):
                raise StructureError(f"{REMOVE_KEY}[{index}]", "expected string")

        return cls(
            type=_optional(raw, TYPE_KEY, str, "script"),
            extend=_optional(raw, EXTEND_KEY, str, "script"),
            pools=pools,
            remove=list(remove),
        )
