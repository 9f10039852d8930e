"""Extension point catalog.

The catalog is closed: graph implementations consult strategies at exactly
these nine seams, and each seam has its own operation shape
(see :mod:`stratagem.domain.operations`).
"""

from __future__ import annotations

from enum import StrEnum


class ExtensionPoint(StrEnum):
    """Named seams of the graph API at which strategies may intercept."""

    ADD_VERTEX = "add_vertex"
    ADD_EDGE = "add_edge"
    GRAPH_QUERY_VERTICES = "graph_query_vertices"
    GRAPH_QUERY_IDS = "graph_query_ids"
    REMOVE_ELEMENT = "remove_element"
    REMOVE_PROPERTY = "remove_property"
    ELEMENT_GET_PROPERTY = "element_get_property"
    ELEMENT_SET_PROPERTY = "element_set_property"
    GRAPH_ANNOTATIONS_SET = "graph_annotations_set"

    @property
    def method_name(self) -> str:
        """Name of the :class:`GraphStrategy` method that extracts this point's transformer."""
        return f"{self.value}_strategy"
