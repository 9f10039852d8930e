"""stratagem — ordered composition of graph strategies.

A graph implementation exposes a fixed catalog of extension points (vertex
and edge creation, queries, element and property mutation, removal). Each
installed :class:`GraphStrategy` may wrap the operation behind any of them;
:class:`SequenceGraphStrategy` chains an ordered list of strategies into one.
"""

from stratagem.domain.context import StrategyContext
from stratagem.domain.types import ExtensionPoint
from stratagem.strategy.base import GraphStrategy, compose, identity
from stratagem.strategy.holder import Strategy
from stratagem.strategy.sequence import SequenceGraphStrategy

__all__ = [
    "ExtensionPoint",
    "GraphStrategy",
    "SequenceGraphStrategy",
    "Strategy",
    "StrategyContext",
    "compose",
    "identity",
]
