"""Intermediate representation: AST nodes and the Graph model."""

from graphite.ir import ast
from graphite.ir.graph import Edge, Graph, Vertex

__all__ = [
    "Edge",
    "Graph",
    "Vertex",
    "ast",
]
