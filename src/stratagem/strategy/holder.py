"""Strategy — the graph-side slot for an installed GraphStrategy.

A graph implementation owns one :class:`Strategy` and routes each
extension-point call through :meth:`Strategy.compose`::

    def add_vertex(self, *args):
        ctx = self.strategy.context(self)
        return self.strategy.compose(
            lambda s: s.add_vertex_strategy(ctx),
            self._add_vertex,
        )(*args)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from stratagem.domain.context import StrategyContext
from stratagem.strategy.base import GraphStrategy

T = TypeVar("T")
Op = TypeVar("Op")

logger = logging.getLogger(__name__)


class Strategy:
    """Holds the optional strategy installed on a graph.

    Parameters:
        graph: The base graph this holder belongs to, copied into every
            context built via :meth:`context`.
        graph_strategy: Strategy to install up front, if any.
    """

    def __init__(self, graph: Any = None, graph_strategy: GraphStrategy | None = None) -> None:
        self._graph = graph
        self._graph_strategy: GraphStrategy | None = None
        if graph_strategy is not None:
            self.set_graph_strategy(graph_strategy)

    @property
    def graph(self) -> Any:
        return self._graph

    @property
    def graph_strategy(self) -> GraphStrategy | None:
        """The installed strategy, or None when operations run unwrapped."""
        return self._graph_strategy

    def set_graph_strategy(self, graph_strategy: GraphStrategy | None) -> None:
        """Install *graph_strategy*, or clear the slot with None."""
        if graph_strategy is not None and not isinstance(graph_strategy, GraphStrategy):
            msg = f"Expected a GraphStrategy, got {type(graph_strategy).__name__}"
            raise TypeError(msg)
        self._graph_strategy = graph_strategy
        logger.debug("Graph strategy set to %r", graph_strategy)

    def context(self, current: T) -> StrategyContext[T]:
        """Build a call-site context for *current* on this holder's graph."""
        return StrategyContext(current=current, graph=self._graph)

    def compose(
        self,
        extract: Callable[[GraphStrategy], Callable[[Op], Op]],
        impl: Op,
    ) -> Op:
        """Wrap *impl* with the installed strategy's transformer.

        *extract* picks the extension point, typically
        ``lambda s: s.add_vertex_strategy(ctx)``. With no strategy installed,
        *impl* comes back unchanged and *extract* is not called.
        """
        if self._graph_strategy is None:
            return impl
        return extract(self._graph_strategy)(impl)
