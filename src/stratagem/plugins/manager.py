"""Plugin discovery, loading, and strategy collection.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus local directory discovery from ``.stratagem/plugins/``.
Plugins contribute strategies through ``register_graph_strategies``; the
collected strategies are chained into one :class:`SequenceGraphStrategy`.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import pluggy

from stratagem.plugins.hookspecs import PROJECT_NAME, StratagemHookSpec
from stratagem.strategy.base import GraphStrategy
from stratagem.strategy.sequence import SequenceGraphStrategy

ENTRY_POINT_GROUP = "stratagem.strategies"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages strategy plugin discovery, loading, and collection."""

    def __init__(self, *, blocked: Iterable[str] = ()) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(StratagemHookSpec)
        for name in blocked:
            self.block(name)
        self._loaded: bool = False

    def discover_and_load(
        self,
        *,
        entry_points: bool = True,
        local_dir: Path | None = None,
    ) -> list[str]:
        """Discover plugins from entry points and an optional local directory.

        Uses pluggy's native setuptools entry_point discovery for the
        ``stratagem.strategies`` group, then scans *local_dir* (typically
        ``.stratagem/plugins/``) for single-file Python plugins.

        Returns a list of loaded plugin names.
        """
        if entry_points:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
            self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        if self._pm.is_blocked(resolved_name):
            logger.debug("Skipping blocked plugin: %s", resolved_name)
            return
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def block(self, name: str) -> None:
        """Unregister plugin *name* if present and refuse it from now on."""
        self._pm.set_blocked(name)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins in registration order."""
        return [name for name, plugin in self._pm.list_name_plugin() if plugin is not None]

    # ------------------------------------------------------------------
    # Strategy collection
    # ------------------------------------------------------------------

    def collect_strategies(self) -> list[GraphStrategy]:
        """Gather strategies from every ``register_graph_strategies`` hookimpl.

        Plugins contribute in registration order, except that ``tryfirst``
        implementations come before all others and ``trylast`` ones after.
        Each plugin's own ordering is kept. Wrappers contribute nothing. A
        plugin whose hook raises or returns something other than a sequence
        of strategies is skipped.
        """
        rank = {name: i for i, (name, _plugin) in enumerate(self._pm.list_name_plugin())}
        impls = [
            impl
            for impl in self._pm.hook.register_graph_strategies.get_hookimpls()
            if not (impl.hookwrapper or impl.wrapper)
        ]
        impls.sort(key=lambda impl: (_priority(impl), rank.get(impl.plugin_name, len(rank))))

        collected: list[GraphStrategy] = []
        for impl in impls:
            collected.extend(self._plugin_strategies(impl.function, impl.plugin_name))
        return collected

    def build_graph_strategy(self) -> SequenceGraphStrategy:
        """Chain every collected strategy into one sequence."""
        strategies = self.collect_strategies()
        logger.debug("Composing %d plugin strategies", len(strategies))
        return SequenceGraphStrategy(*strategies)

    @staticmethod
    def _plugin_strategies(
        hook: Callable[[], object],
        plugin_name: str,
    ) -> list[GraphStrategy]:
        """Strategies contributed by a single hook implementation."""
        try:
            contributed = hook()
        except Exception:
            logger.warning(
                "Failed to collect strategies from plugin %s",
                plugin_name,
                exc_info=True,
            )
            return []

        if contributed is None:
            return []
        if not isinstance(contributed, Sequence) or isinstance(contributed, (str, bytes)):
            logger.warning("Plugin %s returned a non-sequence of strategies", plugin_name)
            return []

        strategies: list[GraphStrategy] = []
        for strategy in contributed:
            if not isinstance(strategy, GraphStrategy):
                logger.warning(
                    "Skipping %r from plugin %s: not a GraphStrategy",
                    strategy,
                    plugin_name,
                )
                continue
            strategies.append(strategy)
        return strategies

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Scan *local_dir* for single-file Python plugins.

        Each ``*.py`` file (excluding ``_``-prefixed names) is loaded as a
        module, in filename order. Classes defined in the module that carry
        pluggy hookimpl-decorated methods are instantiated and registered.

        Errors are logged as warnings but never raised.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"stratagem_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name:
                    continue
                if not self._has_hook_impls(obj):
                    continue
                try:
                    instance = obj()
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )
                    continue
                self.register_plugin(instance, name=f"{module_name}.{attr_name}")
                logger.debug("Loaded local plugin %s from %s", obj.__name__, py_file)

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry points may name a plugin class rather than an instance; calling
        hooks on the class would leave ``self`` unbound.
        """
        for plugin_name, plugin in list(self._pm.list_name_plugin()):
            if plugin is None or not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("stratagem")`` sets a ``stratagem_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False


def _priority(impl: pluggy.HookImpl) -> int:
    """Sort bucket for a hookimpl: tryfirst, plain, then trylast."""
    if impl.tryfirst:
        return 0
    if impl.trylast:
        return 2
    return 1
