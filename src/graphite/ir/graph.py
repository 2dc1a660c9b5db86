"""Graph model: the validated output of every front end.

This module owns the canonical graph data structure handed to downstream
consumers (layout, rendering, algorithm simulation). Vertices keep ordered
lists of incident edge ids; edges record their endpoints, direction and
optional weight. Analysis helpers go through a networkx view of the graph.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import networkx as nx


@dataclass
class Vertex:
    id: str
    ins: list[str] = field(default_factory=list)
    outs: list[str] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)


@dataclass
class Edge:
    id: str
    source: str
    target: str
    directed: bool
    weight: float | None = None
    attrs: dict[str, str] = field(default_factory=dict)

    def other(self, vertex_id: str) -> str:
        """Endpoint reached when leaving ``vertex_id`` along this edge."""
        if not self.directed and self.target == vertex_id:
            return self.source
        return self.target


@dataclass
class Graph:
    vertices: dict[str, Vertex] = field(default_factory=dict)
    edges: dict[str, Edge] = field(default_factory=dict)
    subgraphs: dict[str, list[str]] = field(default_factory=dict)

    # ── Construction ─────────────────────────────────────────────────────────

    def add_vertex(self, vertex_id: str) -> Vertex:
        """Return the vertex with this id, creating it if absent."""
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            vertex = Vertex(id=vertex_id)
            self.vertices[vertex_id] = vertex
        return vertex

    def add_edge(self, edge: Edge) -> None:
        """Register ``edge`` and link it into its endpoints' adjacency lists.

        Undirected edges are linked both ways so traversal can treat either
        endpoint as the origin. A self-loop is linked once per list.
        """
        source = self.vertices[edge.source]
        target = self.vertices[edge.target]
        self.edges[edge.id] = edge
        source.outs.append(edge.id)
        target.ins.append(edge.id)
        if not edge.directed and source is not target:
            target.outs.append(edge.id)
            source.ins.append(edge.id)

    # ── Queries ──────────────────────────────────────────────────────────────

    def vertex_count(self) -> int:
        return len(self.vertices)

    def edge_count(self) -> int:
        return len(self.edges)

    def neighbours(self, vertex_id: str) -> list[str]:
        vertex = self.vertices[vertex_id]
        return [self.edges[edge_id].other(vertex_id) for edge_id in vertex.outs]

    def edges_between(self, source: str, target: str) -> list[Edge]:
        return [e for e in self.edges.values() if (e.source, e.target) == (source, target)]

    def check_invariants(self) -> None:
        """Raise AssertionError naming the first broken structural invariant."""
        for edge in self.edges.values():
            assert edge.source in self.vertices, f"edge {edge.id}: unknown source {edge.source!r}"
            assert edge.target in self.vertices, f"edge {edge.id}: unknown target {edge.target!r}"
            source = self.vertices[edge.source]
            target = self.vertices[edge.target]
            assert source.outs.count(edge.id) == 1, f"edge {edge.id} not in outs of {source.id!r} exactly once"
            assert target.ins.count(edge.id) == 1, f"edge {edge.id} not in ins of {target.id!r} exactly once"
            if not edge.directed:
                assert target.outs.count(edge.id) == 1, f"edge {edge.id} not in outs of {target.id!r} exactly once"
                assert source.ins.count(edge.id) == 1, f"edge {edge.id} not in ins of {source.id!r} exactly once"
            if edge.weight is not None:
                assert math.isfinite(edge.weight) and edge.weight >= 0, f"edge {edge.id}: bad weight {edge.weight}"
        for vertex in self.vertices.values():
            for edge_id in (*vertex.ins, *vertex.outs):
                assert edge_id in self.edges, f"vertex {vertex.id!r} references unknown edge {edge_id}"
                edge = self.edges[edge_id]
                assert vertex.id in (edge.source, edge.target), f"vertex {vertex.id!r} is not an endpoint of {edge_id}"

    # ── networkx view ────────────────────────────────────────────────────────

    def to_networkx(self) -> nx.MultiDiGraph:
        """Build a MultiDiGraph; undirected edges appear in both directions."""
        g: nx.MultiDiGraph = nx.MultiDiGraph()
        for vertex_id in self.vertices:
            g.add_node(vertex_id)
        for edge in self.edges.values():
            g.add_edge(edge.source, edge.target, key=edge.id, weight=edge.weight, directed=edge.directed)
            if not edge.directed and edge.source != edge.target:
                g.add_edge(edge.target, edge.source, key=edge.id, weight=edge.weight, directed=False)
        return g

    def is_dag(self) -> bool:
        return nx.is_directed_acyclic_graph(self.to_networkx())

    def topological_order(self) -> list[str] | None:
        try:
            return list(nx.topological_sort(self.to_networkx()))
        except nx.NetworkXUnfeasible:
            return None

    def connected_components(self) -> list[set[str]]:
        """Weakly connected components, largest first."""
        components = nx.weakly_connected_components(self.to_networkx())
        return sorted(components, key=lambda c: (-len(c), sorted(c)))

    # ── Serialization ────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "vertices": {
                v.id: {"ins": list(v.ins), "outs": list(v.outs), **({"attrs": dict(v.attrs)} if v.attrs else {})}
                for v in self.vertices.values()
            },
            "edges": {
                e.id: {
                    "from": e.source,
                    "to": e.target,
                    "directed": e.directed,
                    "weight": e.weight,
                    **({"attrs": dict(e.attrs)} if e.attrs else {}),
                }
                for e in self.edges.values()
            },
        }
        if self.subgraphs:
            data["subgraphs"] = {name: list(members) for name, members in self.subgraphs.items()}
        return data
