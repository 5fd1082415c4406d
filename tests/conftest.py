"""Shared fixtures for megu tests."""

from pathlib import Path
from typing import Any, Callable, Dict

import orjson
import pytest

from megu.scripts import ExtensionResolver, RegistryExtensionStore

EMERALD = {"type": "minecraft:item", "name": "minecraft:emerald"}
DIAMOND = {"type": "minecraft:item", "name": "minecraft:diamond"}
STICK = {"type": "minecraft:item", "name": "minecraft:stick"}

CREEPER_BASE: Dict[str, Any] = {
    "pools": {
        "minecraft:a": {"type": "minecraft:item", "name": "minecraft:gunpowder"},
        "minecraft:c": {"type": "minecraft:tag", "name": "minecraft:music_discs"},
    }
}


@pytest.fixture
def resolver() -> ExtensionResolver:
    """Resolver backed by a small in-memory registry."""
    return ExtensionResolver(
        RegistryExtensionStore({"minecraft:entities/creeper": CREEPER_BASE})
    )


@pytest.fixture
def write_script(tmp_path: Path) -> Callable[..., Path]:
    """Write a JSON script file below tmp_path and return its path."""

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(orjson.dumps(data))
        return path

    return _write
