"""adot interpreter: evaluates a Document into a Graph.

A vertex comes into existence the first time any statement names it.
Subgraphs are flattened into the one graph; named subgraphs additionally
record which vertices they mention. ``cost`` on a relation becomes the edge
weight; every other attribute is carried along uninterpreted.
"""

from __future__ import annotations

import logging

from graphite.interpreters.base import GraphBuilder, parse_weight
from graphite.ir.ast import AttrList, Block, Document, Relation, SubgraphStmt, VertexRef
from graphite.ir.graph import Graph

logger = logging.getLogger(__name__)

COST_ATTR = "cost"


def _attr_dict(attrs: AttrList | None, skip: str | None = None) -> dict[str, str]:
    if attrs is None:
        return {}
    return {a.key: a.value for a in attrs.items if a.key != skip}


class AdotInterpreter:
    def __init__(self, document: Document) -> None:
        self.document = document
        self.builder = GraphBuilder()

    def evaluate(self) -> Graph:
        self.eval_block(self.document.body)
        return self.builder.finish()

    def eval_block(self, block: Block) -> list[str]:
        """Evaluate every statement; return the vertex ids mentioned, in order."""
        mentioned: list[str] = []
        for stmt in block.statements:
            if isinstance(stmt, VertexRef):
                ids = self.eval_vertex(stmt)
            elif isinstance(stmt, Relation):
                ids = self.eval_relation(stmt)
            elif isinstance(stmt, SubgraphStmt):
                ids = self.eval_subgraph(stmt)
            else:
                raise TypeError(f"unknown adot statement: {stmt!r}")
            for vertex_id in ids:
                if vertex_id not in mentioned:
                    mentioned.append(vertex_id)
        return mentioned

    def eval_vertex(self, stmt: VertexRef) -> list[str]:
        self.builder.declare_vertex(stmt.id.name, _attr_dict(stmt.attrs))
        return [stmt.id.name]

    def eval_relation(self, stmt: Relation) -> list[str]:
        weight = None
        cost = stmt.attrs.get(COST_ATTR) if stmt.attrs else None
        if cost is not None:
            weight = parse_weight(cost.value, cost.position)
        self.builder.declare_vertex(stmt.source.name)
        self.builder.declare_vertex(stmt.target.name)
        self.builder.connect(
            stmt.source.name,
            stmt.target.name,
            directed=stmt.directed,
            weight=weight,
            attrs=_attr_dict(stmt.attrs, skip=COST_ATTR),
        )
        return [stmt.source.name, stmt.target.name]

    def eval_subgraph(self, stmt: SubgraphStmt) -> list[str]:
        members = self.eval_block(stmt.body)
        if stmt.name is not None:
            self.builder.add_subgraph(stmt.name.name, members)
            logger.debug("subgraph %s: %d member(s)", stmt.name.name, len(members))
        return members


def evaluate_adot(document: Document) -> Graph:
    """Evaluate a parsed adot Document into a Graph.

    Raises:
        SemanticError: On an invalid ``cost`` value.
    """
    return AdotInterpreter(document).evaluate()
