"""graphene parser: hand-rolled recursive descent.

Grammar::

    program   := statement* EOF
    statement := ( "vertex" "(" idset ")"
                 | ("edge" | "arc") "(" idset "," idset ("," weight)? ")" ) ";"?
    idset     := IDENT | "[" IDENT ("," IDENT)* ","? "]"
    weight    := "-"? NUMBER | IDENT

Weights are kept as literal text; sign and numeric checks belong to the
interpreter.
"""

from __future__ import annotations

from typing import Iterable

from graphite.errors import ParseError
from graphite.ir.ast import ArcStmt, EdgeStmt, GrapheneStatement, Identifier, VertexStmt, WeightLiteral
from graphite.parsers.base import TokenCursor
from graphite.syntax.lexer import Lexer
from graphite.syntax.types import GrapheneToken as T
from graphite.syntax.types import Token

_STATEMENT_KEYWORDS = (T.Vertex, T.Edge, T.Arc)


class GrapheneParser:
    """Parser for the function-call graph language."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.cursor = TokenCursor(tokens)

    @classmethod
    def from_source(cls, src: str) -> GrapheneParser:
        return cls(Lexer.graphene(src).tokens())

    def parse(self) -> list[GrapheneStatement]:
        statements: list[GrapheneStatement] = []
        while not self.cursor.check(T.EOF):
            statements.append(self.parse_statement())
        return statements

    def parse_statement(self) -> GrapheneStatement:
        keyword = self.cursor.expect(*_STATEMENT_KEYWORDS, what="'vertex', 'edge' or 'arc'")
        self.cursor.expect(T.LParen)
        if keyword.kind is T.Vertex:
            ids = self.parse_idset()
            self.cursor.expect(T.RParen)
            stmt: GrapheneStatement = VertexStmt(ids=ids, position=keyword.position)
        else:
            sources = self.parse_idset()
            self.cursor.expect(T.Comma)
            targets = self.parse_idset()
            weight = None
            if self.cursor.accept(T.Comma):
                weight = self.parse_weight()
            self.cursor.expect(T.RParen, what="',' or ')'" if weight is None else None)
            node = ArcStmt if keyword.kind is T.Arc else EdgeStmt
            stmt = node(sources=sources, targets=targets, weight=weight, position=keyword.position)
        self.cursor.accept(T.Semicolon)
        return stmt

    def parse_idset(self) -> tuple[Identifier, ...]:
        if not self.cursor.accept(T.LBracket):
            return (self.parse_identifier(what="identifier or '['"),)
        ids = [self.parse_identifier()]
        while self.cursor.accept(T.Comma):
            if self.cursor.check(T.RBracket):
                break
            ids.append(self.parse_identifier())
        self.cursor.expect(T.RBracket, what="',' or ']'")
        return tuple(ids)

    def parse_identifier(self, what: str = "identifier") -> Identifier:
        token = self.cursor.expect(T.Ident, what=what)
        return Identifier(name=token.literal, position=token.position)

    def parse_weight(self) -> WeightLiteral:
        minus = self.cursor.accept(T.Minus)
        if minus is not None:
            number = self.cursor.expect(T.Number)
            return WeightLiteral(text="-" + number.literal, position=minus.position)
        token = self.cursor.current
        if not self.cursor.check(T.Number, T.Ident):
            raise ParseError.expected("weight", token.describe(), token.position)
        self.cursor.advance()
        return WeightLiteral(text=token.literal, position=token.position)


def parse_graphene(src: str) -> list[GrapheneStatement]:
    """Parse graphene source text into a list of statements.

    Raises:
        LexError: On an unrecognized character.
        ParseError: If the token sequence matches no production.
    """
    return GrapheneParser.from_source(src).parse()
