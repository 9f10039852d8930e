"""Operation shapes and their transformer types, one pair per extension point.

Graph elements are owned by the graph implementation; this package never
inspects them, so they are typed as opaque aliases here.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeAlias, TypeVar

Vertex: TypeAlias = Any
Edge: TypeAlias = Any
Property: TypeAlias = Any
GraphQuery: TypeAlias = Any

Op = TypeVar("Op", bound=Callable[..., Any])

Transformer: TypeAlias = Callable[[Op], Op]

# --- operation shapes ---

AddVertexOp: TypeAlias = Callable[..., Vertex]
AddEdgeOp: TypeAlias = Callable[..., Edge]
GraphQueryVerticesOp: TypeAlias = Callable[[], Iterable[Vertex]]
GraphQueryIdsOp: TypeAlias = Callable[..., GraphQuery]
RemoveElementOp: TypeAlias = Callable[[], None]
RemovePropertyOp: TypeAlias = Callable[[], None]
ElementGetPropertyOp: TypeAlias = Callable[[str], Property]
ElementSetPropertyOp: TypeAlias = Callable[[str, Any], None]
GraphAnnotationsSetOp: TypeAlias = Callable[[str, Any], None]

# --- transformer types ---

AddVertexTransformer: TypeAlias = Callable[[AddVertexOp], AddVertexOp]
AddEdgeTransformer: TypeAlias = Callable[[AddEdgeOp], AddEdgeOp]
GraphQueryVerticesTransformer: TypeAlias = Callable[[GraphQueryVerticesOp], GraphQueryVerticesOp]
GraphQueryIdsTransformer: TypeAlias = Callable[[GraphQueryIdsOp], GraphQueryIdsOp]
RemoveElementTransformer: TypeAlias = Callable[[RemoveElementOp], RemoveElementOp]
RemovePropertyTransformer: TypeAlias = Callable[[RemovePropertyOp], RemovePropertyOp]
ElementGetPropertyTransformer: TypeAlias = Callable[[ElementGetPropertyOp], ElementGetPropertyOp]
ElementSetPropertyTransformer: TypeAlias = Callable[[ElementSetPropertyOp], ElementSetPropertyOp]
GraphAnnotationsSetTransformer: TypeAlias = Callable[
    [GraphAnnotationsSetOp], GraphAnnotationsSetOp
]
