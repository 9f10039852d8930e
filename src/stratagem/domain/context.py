"""Call-site context handed to every strategy when it builds a transformer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class StrategyContext(Generic[T]):
    """Immutable description of the call site.

    Attributes:
        current: The object the operation acts on: the graph for vertex
            creation, the out-vertex for edge creation, the element for
            property access, the query or annotations object otherwise.
        graph: The base graph the operation belongs to.
    """

    current: T
    graph: Any = None
