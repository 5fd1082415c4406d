"""Tests for the script composition pipeline."""

from typing import Any, Dict

import pytest

from conftest import DIAMOND, EMERALD, STICK
from megu.scripts import (
    DropNode,
    DropType,
    ExtensionResolver,
    Namespace,
    RegistryExtensionStore,
    ScriptModel,
    combine,
)
from megu.scripts.errors import (
    CircularExtension,
    CombineError,
    DropTypeError,
    ExtensionError,
    InvalidNamespace,
    NotFound,
    StructureError,
)


def ns(value: str) -> Namespace:
    return Namespace.decode(value)


def item(name: str) -> DropNode:
    return DropNode(DropType.ITEM, name=name)


class TestScriptDecode:
    """Test ScriptModel.from_dict."""

    def test_full_script(self) -> None:
        """Test every field is decoded."""
        script = ScriptModel.from_dict(
            {
                "type": "minecraft:entity",
                "extend": "minecraft:entities/creeper",
                "pools": {"minecraft:a": EMERALD},
                "remove": ["minecraft:c"],
            }
        )
        assert script.kind == "minecraft:entity"
        assert script.extend is not None
        assert script.extend.identifier == ns("entities/creeper")
        assert script.pools == {ns("a"): item("minecraft:emerald")}
        assert script.remove == [ns("c")]

    def test_empty_script(self) -> None:
        """Test all fields are optional."""
        script = ScriptModel.from_dict({})
        assert script == ScriptModel()

    def test_invalid_pool_key(self) -> None:
        """Test pool keys are validated as namespaces."""
        with pytest.raises(InvalidNamespace):
            ScriptModel.from_dict({"pools": {"Bad Key": EMERALD}})

    def test_invalid_drop(self) -> None:
        """Test drop errors abort decoding."""
        with pytest.raises(DropTypeError):
            ScriptModel.from_dict({"pools": {"a": {"type": "minecraft:bogus"}}})

    def test_invalid_extend(self) -> None:
        """Test the extend reference is validated at decode time."""
        with pytest.raises(ExtensionError):
            ScriptModel.from_dict({"extend": "a:b:c"})

    def test_unknown_extend_decodes(self) -> None:
        """Test unknown extensions are only detected when compiling."""
        script = ScriptModel.from_dict({"extend": "entities/ghast"})
        assert script.extend is not None

    def test_invalid_removal(self) -> None:
        """Test removal entries are validated as namespaces."""
        with pytest.raises(InvalidNamespace):
            ScriptModel.from_dict({"remove": ["UPPER"]})

    def test_wrong_shape(self) -> None:
        """Test structural errors are reported before validation."""
        with pytest.raises(StructureError):
            ScriptModel.from_dict({"remove": "minecraft:a"})


class TestScriptMerge:
    """Test ScriptModel.merge."""

    def test_merge_overwrites_and_appends(self) -> None:
        """Test self entries overwrite other's and removals concatenate."""
        source = ScriptModel(pools={ns("a"): item("y"), ns("b"): item("z")}, remove=[ns("b")])
        target = ScriptModel(pools={ns("a"): item("x")}, remove=[ns("a")])
        source.merge(target)
        assert target.pools == {ns("a"): item("y"), ns("b"): item("z")}
        assert target.remove == [ns("a"), ns("b")]

    def test_merge_leaves_source_untouched(self) -> None:
        """Test the merged-from script is not modified."""
        source = ScriptModel(pools={ns("a"): item("y")}, remove=[ns("c")])
        source.merge(ScriptModel(pools={ns("b"): item("x")}, remove=[ns("d")]))
        assert source.pools == {ns("a"): item("y")}
        assert source.remove == [ns("c")]


class TestScriptCompile:
    """Test ScriptModel.compile."""

    def test_override_wins(self, resolver: ExtensionResolver) -> None:
        """Test the extending script overrides colliding base pools."""
        script = ScriptModel.from_dict(
            {
                "extend": "minecraft:entities/creeper",
                "pools": {"minecraft:a": EMERALD, "minecraft:b": DIAMOND},
            }
        )
        compiled = script.compile(resolver)
        assert compiled.pools[ns("a")] == item("minecraft:emerald")
        assert compiled.pools[ns("b")] == item("minecraft:diamond")
        assert ns("c") in compiled.pools
        assert compiled.extend is None

    def test_merge_override_law(self) -> None:
        """Test base {a: X} overridden by {a: Y, b: Z} gives {a: Y, b: Z}."""
        resolver = ExtensionResolver(
            RegistryExtensionStore({"base": {"pools": {"minecraft:a": STICK}}})
        )
        script = ScriptModel.from_dict(
            {"extend": "base", "pools": {"minecraft:a": EMERALD, "minecraft:b": DIAMOND}}
        )
        assert script.compile(resolver).pools == {
            ns("a"): item("minecraft:emerald"),
            ns("b"): item("minecraft:diamond"),
        }

    def test_without_extend_copies(self, resolver: ExtensionResolver) -> None:
        """Test compiling without extend copies pools into a new script."""
        script = ScriptModel.from_dict({"type": "chest", "pools": {"a": EMERALD}, "remove": ["b"]})
        compiled = script.compile(resolver)
        assert compiled == script
        assert compiled is not script
        compiled.pools.clear()
        assert script.pools

    def test_chain(self) -> None:
        """Test inheritance chains through several extends."""
        resolver = ExtensionResolver(
            RegistryExtensionStore(
                {
                    "grandparent": {"pools": {"a": STICK, "b": STICK}, "remove": ["x"]},
                    "parent": {"extend": "grandparent", "pools": {"b": DIAMOND}, "remove": ["y"]},
                }
            )
        )
        script = ScriptModel.from_dict({"extend": "parent", "pools": {"c": EMERALD}, "remove": ["z"]})
        compiled = script.compile(resolver)
        assert compiled.pools == {
            ns("a"): item("minecraft:stick"),
            ns("b"): item("minecraft:diamond"),
            ns("c"): item("minecraft:emerald"),
        }
        assert compiled.remove == [ns("x"), ns("y"), ns("z")]

    def test_type_inherited_when_not_declared(self) -> None:
        """Test a script without type keeps the type of its base."""
        resolver = ExtensionResolver(
            RegistryExtensionStore({"base": {"type": "minecraft:entity", "pools": {"a": STICK}}})
        )
        compiled = ScriptModel.from_dict({"extend": "base"}).compile(resolver)
        assert compiled.kind == "minecraft:entity"

    def test_declared_type_overrides_base(self) -> None:
        """Test a declared type replaces the type of the base."""
        resolver = ExtensionResolver(
            RegistryExtensionStore({"base": {"type": "minecraft:entity"}})
        )
        compiled = ScriptModel.from_dict({"type": "minecraft:chest", "extend": "base"}).compile(
            resolver
        )
        assert compiled.kind == "minecraft:chest"

    def test_combine_keeps_builtin_type(self) -> None:
        """Test combining a builtin extension without type keeps the builtin type."""
        resolver = ExtensionResolver(RegistryExtensionStore.builtin())
        script = ScriptModel.from_dict(
            {"extend": "minecraft:entities/creeper", "remove": ["minecraft:a"]}
        )
        assert combine([script], resolver).kind == "minecraft:entity"

    def test_compile_does_not_mutate(self, resolver: ExtensionResolver) -> None:
        """Test the compiled script is a new snapshot."""
        script = ScriptModel.from_dict({"extend": "entities/creeper", "remove": ["a"]})
        script.compile(resolver)
        assert script.pools == {}
        assert script.remove == [ns("a")]
        assert script.extend is not None

    def test_not_found(self, resolver: ExtensionResolver) -> None:
        """Test an unknown extension fails compilation."""
        with pytest.raises(NotFound):
            ScriptModel.from_dict({"extend": "entities/ghast"}).compile(resolver)

    def test_circular_extension(self) -> None:
        """Test an extension that reaches itself again is rejected."""
        resolver = ExtensionResolver(
            RegistryExtensionStore({"a": {"extend": "b"}, "b": {"extend": "a"}})
        )
        with pytest.raises(CircularExtension):
            ScriptModel.from_dict({"extend": "a"}).compile(resolver)


class TestScriptRemovals:
    """Test ScriptModel.apply_removals."""

    def test_removes_listed_pools(self) -> None:
        """Test listed pools are removed and missing ones ignored."""
        script = ScriptModel(
            pools={ns("a"): item("x"), ns("b"): item("y")},
            remove=[ns("a"), ns("missing")],
        )
        script.apply_removals()
        assert script.pools == {ns("b"): item("y")}

    def test_idempotent(self) -> None:
        """Test applying removals twice equals applying them once."""
        script = ScriptModel(
            pools={ns("a"): item("x"), ns("b"): item("y")}, remove=[ns("a"), ns("a")]
        )
        script.apply_removals()
        once = dict(script.pools)
        script.apply_removals()
        assert script.pools == once


class TestCombine:
    """Test combining several scripts."""

    def test_last_wins(self, resolver: ExtensionResolver) -> None:
        """Test later scripts override earlier ones on collision."""
        first = ScriptModel.from_dict({"pools": {"a": EMERALD}})
        second = ScriptModel.from_dict({"pools": {"a": DIAMOND}})
        assert combine([first, second], resolver).pools == {ns("a"): item("minecraft:diamond")}
        assert combine([second, first], resolver).pools == {ns("a"): item("minecraft:emerald")}

    def test_end_to_end(self, resolver: ExtensionResolver) -> None:
        """Test extension, merge and removal work together across scripts."""
        a = ScriptModel.from_dict(
            {"pools": {"minecraft:a": {"type": "minecraft:item", "name": "minecraft:emerald"}}}
        )
        b = ScriptModel.from_dict(
            {"extend": "minecraft:entities/creeper", "remove": ["minecraft:a"]}
        )
        result = combine([a, b], resolver)
        assert ns("c") in result.pools
        assert ns("a") not in result.pools

    def test_removals_applied_after_all_merges(self, resolver: ExtensionResolver) -> None:
        """Test an earlier removal also removes a later script's pool."""
        first = ScriptModel.from_dict({"remove": ["a"]})
        second = ScriptModel.from_dict({"pools": {"a": EMERALD, "b": DIAMOND}})
        result = combine([first, second], resolver)
        assert result.pools == {ns("b"): item("minecraft:diamond")}

    def test_empty(self, resolver: ExtensionResolver) -> None:
        """Test combining nothing gives an empty script."""
        assert combine([], resolver) == ScriptModel()

    def test_compile_error_reports_index(self, resolver: ExtensionResolver) -> None:
        """Test compile failures name the failing script."""
        scripts = [ScriptModel(), ScriptModel.from_dict({"extend": "entities/ghast"})]
        with pytest.raises(CombineError) as exc_info:
            combine(scripts, resolver)
        assert exc_info.value.index == 1
        assert isinstance(exc_info.value.error, NotFound)

    def test_inputs_untouched(self, resolver: ExtensionResolver) -> None:
        """Test combining does not modify the input scripts."""
        script = ScriptModel.from_dict({"pools": {"a": EMERALD}, "remove": ["a"]})
        combine([script], resolver)
        assert ns("a") in script.pools


class TestScriptToDict:
    """Test ScriptModel.to_dict."""

    def test_round_trip_shape(self) -> None:
        """Test the file representation keeps all fields."""
        data: Dict[str, Any] = {
            "type": "minecraft:entity",
            "extend": "entities/creeper",
            "pools": {"minecraft:a": EMERALD},
            "remove": ["minecraft:c"],
        }
        assert ScriptModel.from_dict(data).to_dict() == data
