"""SequenceGraphStrategy — an ordered chain of strategies acting as one.

For every extension point, the transformers of the chained strategies are
composed right-to-left: the first strategy in the sequence is the outermost
wrapper, closest to the caller, and the last is closest to the underlying
operation.

INVARIANT: Each strategy's extraction method runs exactly once per build,
in sequence order, with the context given at build time.
INVARIANT: Extraction failures propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from stratagem.domain.context import StrategyContext
from stratagem.domain.operations import (
    AddEdgeTransformer,
    AddVertexTransformer,
    ElementGetPropertyTransformer,
    ElementSetPropertyTransformer,
    GraphAnnotationsSetTransformer,
    GraphQueryIdsTransformer,
    GraphQueryVerticesTransformer,
    RemoveElementTransformer,
    RemovePropertyTransformer,
    Transformer,
)
from stratagem.domain.types import ExtensionPoint
from stratagem.strategy.base import GraphStrategy, compose

logger = logging.getLogger(__name__)


class SequenceGraphStrategy(GraphStrategy):
    """Composes an ordered sequence of strategies into a single strategy.

    The sequence is fixed at construction. Duplicates are allowed and are
    applied once per occurrence. Since the result is itself a
    :class:`GraphStrategy`, sequences nest::

        SequenceGraphStrategy(SequenceGraphStrategy(a, b), c)

    behaves like ``SequenceGraphStrategy(a, b, c)``.
    """

    def __init__(self, *strategies: GraphStrategy) -> None:
        for strategy in strategies:
            if not isinstance(strategy, GraphStrategy):
                msg = f"Expected a GraphStrategy, got {type(strategy).__name__}"
                raise TypeError(msg)
        self._strategies: tuple[GraphStrategy, ...] = strategies
        logger.debug("Sequence of %d strategies: %s", len(strategies), strategies)

    @property
    def strategies(self) -> tuple[GraphStrategy, ...]:
        """The chained strategies, outermost first."""
        return self._strategies

    def __repr__(self) -> str:
        inner = ", ".join(repr(s) for s in self._strategies)
        return f"{self.__class__.__name__}({inner})"

    def build(self, point: ExtensionPoint, ctx: StrategyContext[Any]) -> Transformer[Any]:
        """Compose the transformer for *point* from every strategy in the sequence."""
        method_name = ExtensionPoint(point).method_name
        return self._compose_strategies(lambda s: getattr(s, method_name)(ctx))

    # ------------------------------------------------------------------
    # Extension points
    # ------------------------------------------------------------------

    def add_vertex_strategy(self, ctx: StrategyContext[Any]) -> AddVertexTransformer:
        return self._compose_strategies(lambda s: s.add_vertex_strategy(ctx))

    def add_edge_strategy(self, ctx: StrategyContext[Any]) -> AddEdgeTransformer:
        return self._compose_strategies(lambda s: s.add_edge_strategy(ctx))

    def graph_query_vertices_strategy(
        self, ctx: StrategyContext[Any]
    ) -> GraphQueryVerticesTransformer:
        return self._compose_strategies(lambda s: s.graph_query_vertices_strategy(ctx))

    def graph_query_ids_strategy(self, ctx: StrategyContext[Any]) -> GraphQueryIdsTransformer:
        return self._compose_strategies(lambda s: s.graph_query_ids_strategy(ctx))

    def remove_element_strategy(self, ctx: StrategyContext[Any]) -> RemoveElementTransformer:
        return self._compose_strategies(lambda s: s.remove_element_strategy(ctx))

    def remove_property_strategy(self, ctx: StrategyContext[Any]) -> RemovePropertyTransformer:
        return self._compose_strategies(lambda s: s.remove_property_strategy(ctx))

    def element_get_property_strategy(
        self, ctx: StrategyContext[Any]
    ) -> ElementGetPropertyTransformer:
        return self._compose_strategies(lambda s: s.element_get_property_strategy(ctx))

    def element_set_property_strategy(
        self, ctx: StrategyContext[Any]
    ) -> ElementSetPropertyTransformer:
        return self._compose_strategies(lambda s: s.element_set_property_strategy(ctx))

    def graph_annotations_set_strategy(
        self, ctx: StrategyContext[Any]
    ) -> GraphAnnotationsSetTransformer:
        return self._compose_strategies(lambda s: s.graph_annotations_set_strategy(ctx))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _compose_strategies(
        self,
        extract: Callable[[GraphStrategy], Transformer[Any]],
    ) -> Transformer[Any]:
        """Extract one transformer per strategy, then fold them outermost-first.

        Extraction happens before folding so a failing strategy aborts the
        build without a partially composed result.
        """
        transformers = [extract(s) for s in self._strategies]
        return compose(transformers)
