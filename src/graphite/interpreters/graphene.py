"""graphene interpreter: evaluates statements into a Graph.

Vertices must be declared with ``vertex(...)`` before an edge or arc uses
them; declaring one twice is harmless.
"""

from __future__ import annotations

import logging
from typing import Sequence

from graphite.errors import SemanticError
from graphite.interpreters.base import GraphBuilder, parse_weight
from graphite.ir.ast import ArcStmt, EdgeStmt, GrapheneStatement, Identifier, VertexStmt
from graphite.ir.graph import Graph

logger = logging.getLogger(__name__)


class GrapheneInterpreter:
    def __init__(self, statements: Sequence[GrapheneStatement]) -> None:
        self.statements = statements
        self.builder = GraphBuilder()

    def evaluate(self) -> Graph:
        for stmt in self.statements:
            if isinstance(stmt, VertexStmt):
                self.eval_vertex(stmt)
            elif isinstance(stmt, (EdgeStmt, ArcStmt)):
                self.eval_connection(stmt)
            else:
                raise TypeError(f"unknown graphene statement: {stmt!r}")
        return self.builder.finish()

    def eval_vertex(self, stmt: VertexStmt) -> None:
        for ident in stmt.ids:
            self.builder.declare_vertex(ident.name)

    def eval_connection(self, stmt: EdgeStmt | ArcStmt) -> None:
        for ident in (*stmt.sources, *stmt.targets):
            self.require_declared(ident)
        weight = parse_weight(stmt.weight.text, stmt.weight.position) if stmt.weight else None
        directed = isinstance(stmt, ArcStmt)
        for source in stmt.sources:
            for target in stmt.targets:
                self.builder.connect(source.name, target.name, directed=directed, weight=weight)
        logger.debug(
            "%s: %d edge(s) from line %d",
            "arc" if directed else "edge",
            len(stmt.sources) * len(stmt.targets),
            stmt.position.line,
        )

    def require_declared(self, ident: Identifier) -> None:
        if not self.builder.has_vertex(ident.name):
            raise SemanticError(f"vertex {ident.name!r} is not declared", ident.position)


def evaluate_graphene(statements: Sequence[GrapheneStatement]) -> Graph:
    """Evaluate parsed graphene statements into a Graph.

    Raises:
        SemanticError: On an undeclared vertex or an invalid weight.
    """
    return GrapheneInterpreter(statements).evaluate()
