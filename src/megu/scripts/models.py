"""
Shared type aliases and constants for Loot Table Script data.

Raw data stays dict-based, exactly as orjson hands it over; the typed
models live in their own modules.
"""

from typing import Any, Dict, List, TypeAlias

RawScript: TypeAlias = Dict[str, Any]
"""A decoded script file (the top-level JSON object)."""

RawDrop: TypeAlias = Dict[str, Any]
"""A decoded drop node entry."""

RawRegistry: TypeAlias = Dict[str, RawScript]
"""Maps extension identifiers to raw base scripts."""

OpaqueList: TypeAlias = List[Any]
"""Conditions and functions, passed through uninterpreted."""


# Prefix assumed when a namespace is written without one
DEFAULT_PREFIX = "minecraft"

# Recognized script file suffixes (the last one is compound)
SCRIPT_EXTENSIONS = (".ult", ".megu", ".json.merge")

# Script keys
TYPE_KEY = "type"
EXTEND_KEY = "extend"
POOLS_KEY = "pools"
REMOVE_KEY = "remove"

# Drop node keys
UNSAFE_KEY = "unsafe"
NAME_KEY = "name"
CHILDREN_KEY = "children"
FUNCTIONS_KEY = "functions"
CONDITIONS_KEY = "conditions"

# Pack metadata
META_FILE_NAME = "pack.mcmeta"
COMPILER_OPTIONS_KEY = "compiler_options"
