"""Tests for local directory plugin discovery in PluginManager."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from stratagem.domain.context import StrategyContext
from stratagem.plugins.manager import PluginManager

_VALID_PLUGIN_SRC = """\
from stratagem.plugins import hookimpl
from stratagem.strategy.base import GraphStrategy


class Bang(GraphStrategy):
    def element_get_property_strategy(self, ctx):
        return lambda op: lambda key: op(key) + "!"


class BangPlugin:
    @hookimpl
    def register_graph_strategies(self):
        return [Bang()]
"""

_SYNTAX_ERROR_SRC = """\
def broken(
    # missing closing paren and colon
"""

_NO_HOOKS_SRC = """\
class PlainClass:
    \"\"\"A class with no hookimpl-decorated methods.\"\"\"
    def hello(self) -> str:
        return "world"
"""

_BAD_INIT_SRC = """\
from stratagem.plugins import hookimpl


class NeedsArgs:
    def __init__(self, required):
        self.required = required

    @hookimpl
    def register_graph_strategies(self):
        return []
"""


class TestLocalDiscovery:
    def test_discovers_local_plugin(self, tmp_path: Path) -> None:
        (tmp_path / "bang.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(entry_points=False, local_dir=tmp_path)

        assert pm.list_plugin_names() == ["stratagem_local_plugin_bang.BangPlugin"]

    def test_local_plugin_strategies_collected(self, tmp_path: Path) -> None:
        (tmp_path / "bang.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(entry_points=False, local_dir=tmp_path)
        seq = pm.build_graph_strategy()

        ctx: StrategyContext[Any] = StrategyContext(current="v1")
        get = seq.element_get_property_strategy(ctx)(lambda key: key)
        assert get("name") == "name!"

    def test_skips_bad_plugin_gracefully(self, tmp_path: Path) -> None:
        (tmp_path / "broken.py").write_text(_SYNTAX_ERROR_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(entry_points=False, local_dir=tmp_path)

        assert all("broken" not in n for n in names)

    def test_nonexistent_dir_is_noop(self, tmp_path: Path) -> None:
        pm = PluginManager()
        names = pm.discover_and_load(entry_points=False, local_dir=tmp_path / "missing")
        assert pm.is_loaded is True
        assert names == []

    def test_skips_underscore_prefixed_files(self, tmp_path: Path) -> None:
        (tmp_path / "_helpers.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(entry_points=False, local_dir=tmp_path)

        assert pm.list_plugin_names() == []

    def test_skips_classes_without_hookimpls(self, tmp_path: Path) -> None:
        (tmp_path / "plain.py").write_text(_NO_HOOKS_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(entry_points=False, local_dir=tmp_path)

        assert pm.list_plugin_names() == []

    def test_uninstantiable_class_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "needs_args.py").write_text(_BAD_INIT_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(entry_points=False, local_dir=tmp_path)

        assert pm.list_plugin_names() == []

    def test_files_loaded_in_name_order(self, tmp_path: Path) -> None:
        for name in ("b_second", "a_first"):
            (tmp_path / f"{name}.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(entry_points=False, local_dir=tmp_path)

        assert pm.list_plugin_names() == [
            "stratagem_local_plugin_a_first.BangPlugin",
            "stratagem_local_plugin_b_second.BangPlugin",
        ]
