"""adot parser: hand-rolled recursive descent.

Grammar::

    document  := "graph" IDENT? block EOF
    block     := "{" statement* "}"
    statement := (subgraph | relation) ";"?
    subgraph  := "subgraph" IDENT? block
    relation  := IDENT (("->" | "--") IDENT)? attrlist?
    attrlist  := "[" (attr (("," | ";") attr)* ("," | ";")?)? "]"
    attr      := IDENT "=" value
    value     := IDENT | "-"? NUMBER

Statements need no separator: an identifier after a complete relation starts
the next one. An attribute list binds to the relation right before it, so an
attribute list that opens a statement is rejected, as is a second list on
one statement or a key repeated inside one list. Subgraphs nest at most
``MAX_SUBGRAPH_DEPTH`` levels deep.
"""

from __future__ import annotations

from typing import Iterable

from graphite.errors import ParseError
from graphite.ir.ast import (
    AdotStatement,
    Attr,
    AttrList,
    Block,
    Document,
    Identifier,
    Relation,
    SubgraphStmt,
    VertexRef,
)
from graphite.parsers.base import TokenCursor
from graphite.syntax.lexer import Lexer
from graphite.syntax.types import AdotToken as T
from graphite.syntax.types import Token

MAX_SUBGRAPH_DEPTH = 100


class AdotParser:
    """Parser for the block/attribute graph language."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.cursor = TokenCursor(tokens)
        self.depth = 0

    @classmethod
    def from_source(cls, src: str) -> AdotParser:
        return cls(Lexer.adot(src).tokens())

    def parse(self) -> Document:
        keyword = self.cursor.expect(T.Graph)
        name = self.parse_optional_name()
        body = self.parse_block()
        self.cursor.expect(T.EOF)
        return Document(name=name, body=body, position=keyword.position)

    def parse_optional_name(self) -> Identifier | None:
        token = self.cursor.accept(T.Ident)
        if token is None:
            return None
        return Identifier(name=token.literal, position=token.position)

    def parse_block(self) -> Block:
        self.cursor.expect(T.LBrace)
        statements: list[AdotStatement] = []
        while not self.cursor.check(T.RBrace):
            statements.append(self.parse_statement())
        self.cursor.advance()
        return Block(statements=tuple(statements))

    def parse_statement(self) -> AdotStatement:
        token = self.cursor.current
        if token.kind is T.Subgraph:
            stmt: AdotStatement = self.parse_subgraph()
        elif token.kind is T.Ident:
            stmt = self.parse_relation()
        elif token.kind is T.LBracket:
            raise ParseError("attribute list has no preceding statement", token.position)
        else:
            raise ParseError.expected("statement or '}'", token.describe(), token.position)
        self.cursor.accept(T.Semicolon)
        return stmt

    def parse_subgraph(self) -> SubgraphStmt:
        keyword = self.cursor.advance()
        if self.depth >= MAX_SUBGRAPH_DEPTH:
            raise ParseError(f"subgraphs nested deeper than {MAX_SUBGRAPH_DEPTH} levels", keyword.position)
        self.depth += 1
        name = self.parse_optional_name()
        body = self.parse_block()
        self.depth -= 1
        return SubgraphStmt(name=name, body=body, position=keyword.position)

    def parse_relation(self) -> VertexRef | Relation:
        first = self.cursor.advance()
        source = Identifier(name=first.literal, position=first.position)
        operator = self.cursor.accept(T.DirectedEdge, T.Edge)
        if operator is None:
            return VertexRef(id=source, attrs=self.parse_optional_attrs())
        last = self.cursor.expect(T.Ident)
        target = Identifier(name=last.literal, position=last.position)
        return Relation(
            source=source,
            target=target,
            directed=operator.kind is T.DirectedEdge,
            attrs=self.parse_optional_attrs(),
        )

    def parse_optional_attrs(self) -> AttrList | None:
        if not self.cursor.check(T.LBracket):
            return None
        attrs = self.parse_attr_list()
        extra = self.cursor.current
        if extra.kind is T.LBracket:
            raise ParseError("only one attribute list per statement", extra.position)
        return attrs

    def parse_attr_list(self) -> AttrList:
        opening = self.cursor.expect(T.LBracket)
        items: list[Attr] = []
        seen: set[str] = set()
        while not self.cursor.check(T.RBracket):
            attr = self.parse_attr()
            if attr.key in seen:
                raise ParseError(f"duplicate attribute {attr.key!r}", attr.position)
            seen.add(attr.key)
            items.append(attr)
            if not self.cursor.accept(T.Comma, T.Semicolon):
                break
        self.cursor.expect(T.RBracket, what="',' or ']'")
        return AttrList(items=tuple(items), position=opening.position)

    def parse_attr(self) -> Attr:
        key = self.cursor.expect(T.Ident, what="attribute name")
        self.cursor.expect(T.Eq)
        return Attr(key=key.literal, value=self.parse_value(), position=key.position)

    def parse_value(self) -> str:
        if self.cursor.accept(T.Minus):
            return "-" + self.cursor.expect(T.Number).literal
        token = self.cursor.current
        if not self.cursor.check(T.Ident, T.Number):
            raise ParseError.expected("attribute value", token.describe(), token.position)
        return self.cursor.advance().literal


def parse_adot(src: str) -> Document:
    """Parse adot source text into a Document.

    Raises:
        LexError: On an unrecognized character.
        ParseError: If the token sequence matches no production.
    """
    return AdotParser.from_source(src).parse()
