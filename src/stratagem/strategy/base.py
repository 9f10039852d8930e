"""GraphStrategy base class and the generic transformer composition helpers.

A strategy contributes one transformer per extension point. A transformer
maps an operation to an operation of the same shape; the base class returns
:func:`identity` everywhere, so subclasses override only the extension
points they intercept.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from typing import TYPE_CHECKING, Any

from stratagem.domain.operations import (
    AddEdgeTransformer,
    AddVertexTransformer,
    ElementGetPropertyTransformer,
    ElementSetPropertyTransformer,
    GraphAnnotationsSetTransformer,
    GraphQueryIdsTransformer,
    GraphQueryVerticesTransformer,
    Op,
    RemoveElementTransformer,
    RemovePropertyTransformer,
    Transformer,
)

if TYPE_CHECKING:
    from stratagem.domain.context import StrategyContext


def identity(op: Op) -> Op:
    """The pass-through transformer."""
    return op


def _compose_pair(
    outer: Transformer[Op],
    inner: Transformer[Op],
) -> Transformer[Op]:
    if outer is identity:
        return inner
    if inner is identity:
        return outer

    def composed(op: Op) -> Op:
        return outer(inner(op))

    return composed


def compose(transformers: Iterable[Transformer[Op]]) -> Transformer[Op]:
    """Fold *transformers* into one: ``compose([t1, t2, t3])(op) == t1(t2(t3(op)))``.

    The first transformer is the outermost wrapper. An empty iterable yields
    :func:`identity`; a single transformer is returned as-is.
    """
    return reduce(_compose_pair, transformers, identity)


class GraphStrategy:
    """Pass-through strategy for every extension point.

    Each ``*_strategy`` method receives the call-site context and returns a
    transformer for that extension point's operation.

    Usage::

        class ReadOnlyStrategy(GraphStrategy):
            def add_vertex_strategy(self, ctx):
                def transform(op):
                    def refuse(*args):
                        raise PermissionError("graph is read-only")
                    return refuse
                return transform
    """

    def add_vertex_strategy(self, ctx: StrategyContext[Any]) -> AddVertexTransformer:
        return identity

    def add_edge_strategy(self, ctx: StrategyContext[Any]) -> AddEdgeTransformer:
        return identity

    def graph_query_vertices_strategy(
        self, ctx: StrategyContext[Any]
    ) -> GraphQueryVerticesTransformer:
        return identity

    def graph_query_ids_strategy(self, ctx: StrategyContext[Any]) -> GraphQueryIdsTransformer:
        return identity

    def remove_element_strategy(self, ctx: StrategyContext[Any]) -> RemoveElementTransformer:
        return identity

    def remove_property_strategy(self, ctx: StrategyContext[Any]) -> RemovePropertyTransformer:
        return identity

    def element_get_property_strategy(
        self, ctx: StrategyContext[Any]
    ) -> ElementGetPropertyTransformer:
        return identity

    def element_set_property_strategy(
        self, ctx: StrategyContext[Any]
    ) -> ElementSetPropertyTransformer:
        return identity

    def graph_annotations_set_strategy(
        self, ctx: StrategyContext[Any]
    ) -> GraphAnnotationsSetTransformer:
        return identity

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
