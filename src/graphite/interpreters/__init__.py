"""Interpreters: evaluate each language's AST into the shared Graph."""

from graphite.interpreters.adot import AdotInterpreter, evaluate_adot
from graphite.interpreters.base import GraphBuilder, parse_weight
from graphite.interpreters.graphene import GrapheneInterpreter, evaluate_graphene

__all__ = [
    "AdotInterpreter",
    "GrapheneInterpreter",
    "GraphBuilder",
    "evaluate_adot",
    "evaluate_graphene",
    "parse_weight",
]
