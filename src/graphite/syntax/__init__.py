"""Lexical layer: token kinds, lexical rules and the lexer."""

from graphite.syntax.lexer import Lexer, tokenize
from graphite.syntax.types import ADOT_RULES, GRAPHENE_RULES, AdotToken, GrapheneToken, LexicalRules, Token

__all__ = [
    "ADOT_RULES",
    "GRAPHENE_RULES",
    "AdotToken",
    "GrapheneToken",
    "Lexer",
    "LexicalRules",
    "Token",
    "tokenize",
]
