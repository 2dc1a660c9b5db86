"""graphite: compile graph description languages into a validated Graph."""

from graphite.compiler import compile_adot, compile_graphene, compile_source
from graphite.errors import CompileError, LexError, ParseError, Position, SemanticError, Stage
from graphite.ir.graph import Edge, Graph, Vertex

__all__ = [
    "CompileError",
    "Edge",
    "Graph",
    "LexError",
    "ParseError",
    "Position",
    "SemanticError",
    "Stage",
    "Vertex",
    "compile_adot",
    "compile_graphene",
    "compile_source",
]
