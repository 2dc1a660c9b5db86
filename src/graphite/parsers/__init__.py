"""Recursive-descent parsers, one per language."""

from graphite.parsers.adot import AdotParser, parse_adot
from graphite.parsers.graphene import GrapheneParser, parse_graphene

__all__ = [
    "AdotParser",
    "GrapheneParser",
    "parse_adot",
    "parse_graphene",
]
