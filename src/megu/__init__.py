"""
megu: interpreter for Loot Table Script

Validates loot table scripts against the closed set of drop types,
resolves their ``extend`` inheritance and merges several scripts in order
into one resolved set of pools.
"""

__version__ = "0.1.0"
__author__ = "megu Contributors"

# Core service imports
from .scripts import (
    ScriptService,
    ScriptModel,
    interpret_file,
    combine_scripts,
    Namespace,
    DropType,
    DropNode,
    Extension,
    ExtensionResolver,
    RegistryExtensionStore,
    DirectoryExtensionStore,
)
from .utils.logging_config import setup_logging

__all__ = [
    # Services
    'ScriptService',
    'interpret_file',
    'combine_scripts',

    # Logging
    'setup_logging',

    # Data models
    'ScriptModel',
    'Namespace',
    'DropType',
    'DropNode',
    'Extension',
    'ExtensionResolver',
    'RegistryExtensionStore',
    'DirectoryExtensionStore',
]
