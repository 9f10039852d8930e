"""Settings-driven assembly of the graph strategy for an application.

Applies the logging settings, prepares a PluginManager honoring the
``[plugins]`` settings, discovers entry-point and local strategy plugins,
and chains everything into one SequenceGraphStrategy.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from stratagem.config.logging import configure_logging
from stratagem.config.settings import StratagemSettings
from stratagem.plugins.manager import PluginManager
from stratagem.strategy.base import GraphStrategy
from stratagem.strategy.sequence import SequenceGraphStrategy

logger = logging.getLogger(__name__)


def load_graph_strategy(
    settings: StratagemSettings | None = None,
    *,
    outer: Sequence[GraphStrategy] = (),
    plugin_manager: PluginManager | None = None,
    setup_logging: bool = True,
) -> SequenceGraphStrategy:
    """Build the composed strategy described by *settings*.

    *outer* strategies are placed ahead of every plugin strategy, so they
    wrap the plugins and see each call first.

    With *setup_logging*, ``settings.verbose`` and ``settings.log_json`` are
    applied through :func:`configure_logging` before any plugin loads. Pass
    False when the host application owns the logging configuration.

    ``settings.plugins.blocked`` is applied to *plugin_manager* as well;
    blocking unregisters matching plugins it already holds. A manager that
    has already run discovery is not asked to discover again.
    """
    settings = settings or StratagemSettings.load()
    if setup_logging:
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    pm = plugin_manager or PluginManager()
    for name in settings.plugins.blocked:
        pm.block(name)

    if not pm.is_loaded:
        names = pm.discover_and_load(
            entry_points=settings.plugins.entry_points,
            local_dir=settings.local_plugin_dir,
        )
        logger.debug("Loaded strategy plugins: %s", names)
    return SequenceGraphStrategy(*outer, *pm.collect_strategies())
