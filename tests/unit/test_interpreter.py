"""Tests for graphite.interpreters — vertex tables, edge creation and semantic checks."""

import math

import pytest

from graphite.errors import Position, SemanticError, Stage
from graphite.interpreters import GraphBuilder, evaluate_adot, evaluate_graphene, parse_weight
from graphite.parsers import parse_adot, parse_graphene
from graphite.parsers.adot import MAX_SUBGRAPH_DEPTH

HERE = Position(line=1, column=1, offset=0)


def _graphene(src: str):
    return evaluate_graphene(parse_graphene(src))


def _adot(src: str):
    return evaluate_adot(parse_adot(src))


# ─── Weights ─────────────────────────────────────────────────────────────────


class TestParseWeight:
    def test_integer_and_decimal(self):
        assert parse_weight("5", HERE) == 5
        assert parse_weight("10.23", HERE) == pytest.approx(10.23)
        assert parse_weight("0", HERE) == 0

    def test_negative_rejected(self):
        with pytest.raises(SemanticError) as info:
            parse_weight("-8", HERE)
        assert info.value.stage == Stage.SEMANTIC
        assert "negative" in info.value.message

    @pytest.mark.parametrize("text", ["-0", "-0.0"])
    def test_negative_zero_rejected(self, text):
        with pytest.raises(SemanticError, match="must not be negative"):
            parse_weight(text, HERE)

    def test_non_numeric_rejected(self):
        with pytest.raises(SemanticError) as info:
            parse_weight("heavy", HERE)
        assert "must be a number" in info.value.message

    def test_non_finite_rejected(self):
        huge = "9" * 400
        assert math.isinf(float(huge))
        with pytest.raises(SemanticError) as info:
            parse_weight(huge, HERE)
        assert "not finite" in info.value.message

    def test_nan_and_inf_words_rejected(self):
        with pytest.raises(SemanticError):
            parse_weight("inf", HERE)
        with pytest.raises(SemanticError):
            parse_weight("nan", HERE)


# ─── GraphBuilder ────────────────────────────────────────────────────────────


class TestGraphBuilder:
    def test_edge_ids_are_sequential(self):
        b = GraphBuilder()
        b.declare_vertex("A")
        b.declare_vertex("B")
        first = b.connect("A", "B", directed=True)
        second = b.connect("B", "A", directed=False)
        assert (first.id, second.id) == ("e0", "e1")

    def test_redeclaring_vertex_is_idempotent(self):
        b = GraphBuilder()
        b.declare_vertex("A", {"color": "red"})
        b.declare_vertex("A")
        graph = b.finish()
        assert list(graph.vertices) == ["A"]
        assert graph.vertices["A"].attrs == {"color": "red"}

    def test_finish_hands_over_graph(self):
        b = GraphBuilder()
        b.declare_vertex("A")
        graph = b.finish()
        b.declare_vertex("B")
        assert list(graph.vertices) == ["A"]


# ─── graphene ────────────────────────────────────────────────────────────────


class TestGrapheneInterpreter:
    def test_vertices_and_weighted_edge(self):
        graph = _graphene("vertex([A, B])\nedge(A, B, 5)")
        assert list(graph.vertices) == ["A", "B"]
        (edge,) = graph.edges.values()
        assert (edge.source, edge.target, edge.directed, edge.weight) == ("A", "B", False, 5)

    def test_edge_fans_out_over_targets(self):
        graph = _graphene("vertex([A, B, C, D])\nedge(A, [B, C, D], 5)")
        assert [(e.source, e.target) for e in graph.edges.values()] == [("A", "B"), ("A", "C"), ("A", "D")]
        assert all(e.weight == 5 for e in graph.edges.values())

    def test_source_and_target_lists_expand_pairwise(self):
        graph = _graphene("vertex([A, B, C, D])\narc([A, B], [C, D])")
        pairs = [(e.source, e.target) for e in graph.edges.values()]
        assert pairs == [("A", "C"), ("A", "D"), ("B", "C"), ("B", "D")]
        assert all(e.directed for e in graph.edges.values())

    def test_arc_is_directed(self):
        graph = _graphene("vertex([E, C])\narc(E, C, 8)")
        edge = graph.edges["e0"]
        assert edge.directed
        assert graph.vertices["E"].outs == ["e0"]
        assert graph.vertices["E"].ins == []
        assert graph.vertices["C"].ins == ["e0"]
        assert graph.vertices["C"].outs == []

    def test_undirected_edge_registered_both_ways(self):
        graph = _graphene("vertex([A, B])\nedge(A, B)")
        assert graph.vertices["A"].outs == ["e0"]
        assert graph.vertices["A"].ins == ["e0"]
        assert graph.vertices["B"].outs == ["e0"]
        assert graph.vertices["B"].ins == ["e0"]

    def test_redeclaration_is_idempotent(self):
        graph = _graphene("vertex(A)\nvertex([A, B])\nvertex(B)")
        assert list(graph.vertices) == ["A", "B"]

    def test_undeclared_target_is_semantic_error(self):
        with pytest.raises(SemanticError) as info:
            _graphene("vertex(A)\nedge(A, B)")
        assert info.value.stage == Stage.SEMANTIC
        assert "vertex 'B' is not declared" in info.value.message
        assert (info.value.position.line, info.value.position.column) == (2, 9)

    def test_use_before_declaration_is_error(self):
        with pytest.raises(SemanticError):
            _graphene("arc(A, B)\nvertex([A, B])")

    def test_negative_weight_is_semantic_error(self):
        with pytest.raises(SemanticError) as info:
            _graphene("vertex([A, B])\narc(A, B, -2)")
        assert info.value.position.column == 11

    def test_negative_zero_weight_is_semantic_error(self):
        with pytest.raises(SemanticError, match="must not be negative"):
            _graphene("vertex([A, B])\nedge(A, B, -0)")

    def test_identifier_weight_is_semantic_error(self):
        with pytest.raises(SemanticError):
            _graphene("vertex([A, B])\nedge(A, B, heavy)")

    def test_self_loop(self):
        graph = _graphene("vertex(A)\nedge(A, A, 1)")
        assert graph.vertices["A"].outs == ["e0"]
        assert graph.vertices["A"].ins == ["e0"]
        graph.check_invariants()


# ─── adot ────────────────────────────────────────────────────────────────────


class TestAdotInterpreter:
    def test_first_use_declares_vertices(self):
        graph = _adot("graph { a -> b; b -- c }")
        assert list(graph.vertices) == ["a", "b", "c"]

    def test_cost_becomes_weight(self):
        graph = _adot("graph { c -- d [cost=10.5] }")
        edge = graph.edges["e0"]
        assert edge.weight == pytest.approx(10.5)
        assert edge.attrs == {}

    def test_other_attributes_are_retained(self):
        graph = _adot("graph { a -> b [cost=1, color=red] }")
        assert graph.edges["e0"].attrs == {"color": "red"}

    def test_vertex_attributes_are_retained(self):
        graph = _adot("graph { c [cost=10] }")
        assert graph.vertices["c"].attrs == {"cost": "10"}
        assert graph.edges == {}

    def test_vertex_cost_is_not_validated(self):
        graph = _adot("graph { c [cost=cheap] }")
        assert graph.vertices["c"].attrs == {"cost": "cheap"}

    def test_negative_cost_is_semantic_error(self):
        with pytest.raises(SemanticError) as info:
            _adot("graph { a -- b [cost=-3] }")
        assert "negative" in info.value.message

    def test_negative_zero_cost_is_semantic_error(self):
        with pytest.raises(SemanticError, match="must not be negative"):
            _adot("graph { a -- b [cost=-0] }")

    def test_non_numeric_cost_is_semantic_error(self):
        with pytest.raises(SemanticError) as info:
            _adot("graph { a -- b [cost=cheap] }")
        assert info.value.position.column == 17

    def test_subgraphs_are_flattened_and_recorded(self):
        graph = _adot("graph { subgraph left { a -- b } subgraph { c } b -> c }")
        assert list(graph.vertices) == ["a", "b", "c"]
        assert graph.subgraphs == {"left": ["a", "b"]}
        assert len(graph.edges) == 2

    def test_nested_subgraph_members_count_for_parent(self):
        graph = _adot("graph { subgraph outer { x subgraph inner { y -> z } } }")
        assert graph.subgraphs == {"outer": ["x", "y", "z"], "inner": ["y", "z"]}

    def test_repeated_subgraph_name_merges_members(self):
        graph = _adot("graph { subgraph s { a } subgraph s { b a } }")
        assert graph.subgraphs == {"s": ["a", "b"]}

    def test_deepest_allowed_nesting_evaluates(self):
        depth = MAX_SUBGRAPH_DEPTH
        graph = _adot("graph { " + "subgraph s { " * depth + "a -> b" + " }" * depth + " }")
        assert graph.subgraphs == {"s": ["a", "b"]}
        assert graph.edge_count() == 1
