"""
Main entry point for megu.
Usage: python -m megu [PATH ...]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import orjson

from . import __version__
from .scripts import (
    ChainedExtensionStore,
    DirectoryExtensionStore,
    ExtensionResolver,
    RegistryExtensionStore,
    ScriptModel,
    ScriptService,
    check_meta,
)
from .scripts.errors import CombineError, MeguError, MetaError, ScriptFormatError
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="megu",
        description="Interpret and combine Loot Table Scripts.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="script files or directories, combined in the given order",
    )
    parser.add_argument(
        "--extensions", type=Path, help="directory with {prefix}/{suffix} base scripts"
    )
    parser.add_argument("--pack-meta", type=Path, help="pack.mcmeta file to check first")
    parser.add_argument("--log-level", help="console log level")
    parser.add_argument("--settings", type=Path, help="INI settings file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_resolver(settings: AppSettings, extensions: Optional[Path]) -> ExtensionResolver:
    """Directory extensions (when configured) take priority over the builtin registry."""
    builtin = RegistryExtensionStore.builtin()
    extensions = extensions or settings.extensions_path
    if extensions and extensions.is_dir():
        return ExtensionResolver(
            ChainedExtensionStore(DirectoryExtensionStore(extensions), builtin)
        )
    if extensions:
        logger = logging.getLogger(f"{__name__}.build_resolver")
        logger.warning(
            f"Extensions directory not found: {extensions}, using builtin registry only"
        )
    return ExtensionResolver(builtin)


def collect_scripts(service: ScriptService, paths: Sequence[Path]) -> List[ScriptModel]:
    scripts: List[ScriptModel] = []
    for path in paths:
        if path.is_dir():
            scripts.extend(service.interpret_directory(path))
        else:
            scripts.append(service.interpret_file(path))
    return scripts


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")

    try:
        settings = AppSettings(settings_file=args.settings)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(settings, console_level=args.log_level)
    logger.debug(f"Configuration loaded from {settings.get_settings_file_path()}")

    validation = settings.validate()
    for warning in validation.warnings:
        logger.warning(warning)
    if not args.paths and not validation.is_valid:
        for error in validation.errors:
            logger.error(error)
        return 1

    try:
        if args.pack_meta:
            check_meta(args.pack_meta)

        service = ScriptService(build_resolver(settings, args.extensions))
        paths = args.paths or [settings.scripts_path]
        result = service.combine(collect_scripts(service, paths))
    except (MeguError, CombineError, MetaError, ScriptFormatError) as e:
        logger.error(str(e))
        return 1

    sys.stdout.buffer.write(orjson.dumps(result.to_dict(), option=orjson.OPT_INDENT_2))
    sys.stdout.buffer.write(b"\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
