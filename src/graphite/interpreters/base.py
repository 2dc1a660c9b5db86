"""Graph building blocks shared by both interpreters."""

from __future__ import annotations

import itertools
import logging
import math

from graphite.errors import Position, SemanticError
from graphite.ir.graph import Edge, Graph

logger = logging.getLogger(__name__)


def parse_weight(text: str, position: Position) -> float:
    """Convert a weight literal to a finite, non-negative number."""
    try:
        value = float(text)
    except ValueError:
        raise SemanticError(f"weight must be a number, got {text!r}", position) from None
    if not math.isfinite(value):
        raise SemanticError(f"weight {text!r} is not finite", position)
    if value < 0 or text.startswith("-"):
        raise SemanticError(f"weight must not be negative, got {text}", position)
    return value


class GraphBuilder:
    """Accumulates vertices and edges for one compile.

    The graph under construction is private to the builder until
    ``finish`` hands it over.
    """

    def __init__(self) -> None:
        self._graph = Graph()
        self._edge_ids = (f"e{n}" for n in itertools.count())

    def has_vertex(self, vertex_id: str) -> bool:
        return vertex_id in self._graph.vertices

    def declare_vertex(self, vertex_id: str, attrs: dict[str, str] | None = None) -> None:
        """Add a vertex; declaring an existing one only merges attributes."""
        vertex = self._graph.add_vertex(vertex_id)
        if attrs:
            vertex.attrs.update(attrs)

    def connect(
        self,
        source: str,
        target: str,
        directed: bool,
        weight: float | None = None,
        attrs: dict[str, str] | None = None,
    ) -> Edge:
        edge = Edge(
            id=next(self._edge_ids),
            source=source,
            target=target,
            directed=directed,
            weight=weight,
            attrs=dict(attrs or {}),
        )
        self._graph.add_edge(edge)
        return edge

    def add_subgraph(self, name: str, members: list[str]) -> None:
        existing = self._graph.subgraphs.setdefault(name, [])
        for member in members:
            if member not in existing:
                existing.append(member)

    def finish(self) -> Graph:
        graph, self._graph = self._graph, Graph()
        logger.debug("built graph: %d vertices, %d edges", graph.vertex_count(), graph.edge_count())
        return graph
