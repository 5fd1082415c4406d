"""
Module for working with Loot Table Scripts.

Provides the namespace codec, the drop type registry, drop tree building,
extension resolution and the script composition pipeline
(decode, compile, merge, remove).
"""

from .service import ScriptService, interpret_file, combine_scripts, get_default_service
from .script import ScriptModel, combine
from .namespace import Namespace
from .drops import DropType, DropNode, build_drop_node, resolve_drop_type, is_unsafe
from .formats import ScriptFormat, DropFormat
from .extensions import (
    Extension,
    ExtensionStore,
    ExtensionResolver,
    RegistryExtensionStore,
    DirectoryExtensionStore,
    ChainedExtensionStore,
)
from .loaders import ScriptFileLoader
from .meta import is_loot_table_script, check_meta
from .models import SCRIPT_EXTENSIONS, DEFAULT_PREFIX

# Public exports
__all__ = [
    # Main service
    "ScriptService",
    "interpret_file",
    "combine_scripts",
    "get_default_service",
    # Models
    "ScriptModel",
    "combine",
    "Namespace",
    "DropType",
    "DropNode",
    "build_drop_node",
    "resolve_drop_type",
    "is_unsafe",
    "ScriptFormat",
    "DropFormat",
    # Extensions
    "Extension",
    "ExtensionStore",
    "ExtensionResolver",
    "RegistryExtensionStore",
    "DirectoryExtensionStore",
    "ChainedExtensionStore",
    # Files
    "ScriptFileLoader",
    "is_loot_table_script",
    "check_meta",
    # Constants
    "SCRIPT_EXTENSIONS",
    "DEFAULT_PREFIX",
]
