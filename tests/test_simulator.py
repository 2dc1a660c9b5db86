"""Tests for graphite.simulator — immutable steps, states and algorithm traces."""

import dataclasses

import pytest

from graphite import compile_adot, compile_graphene
from graphite.simulator import (
    ALGORITHMS,
    ArrayStateBuilder,
    StepBuilder,
    TableStateBuilder,
    run_algorithm,
)

# ─── Builders ────────────────────────────────────────────────────────────────


class TestBuilders:
    def test_array_state(self):
        state = ArrayStateBuilder("Queue").data(["A", "B"]).highlighted([1]).build()
        assert state.title == "Queue"
        assert state.data == ("A", "B")
        assert state.highlighted == frozenset({1})
        assert state.type == "array"

    def test_table_state(self):
        state = TableStateBuilder("Distances").columns("Vertex", "Distance").row("A", 0).row("B", 2.5).build()
        assert state.columns == ("Vertex", "Distance")
        assert state.rows == (("A", "0"), ("B", "2.5"))
        assert state.type == "table"

    def test_table_row_width_checked(self):
        with pytest.raises(ValueError, match="2 columns"):
            TableStateBuilder("T").columns("a", "b").row("only one")

    def test_step_is_frozen(self):
        step = StepBuilder("start").build()
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.description = "changed"  # type: ignore[misc]
        with pytest.raises(TypeError):
            step.vertex_highlights["A"] = "sky"  # type: ignore[index]

    def test_step_does_not_alias_builder_input(self):
        highlights = {"A": "sky"}
        builder = StepBuilder("one").vertex_highlights(highlights)
        first = builder.build()
        highlights["B"] = "orange"
        second = builder.vertex_highlights({"C": "slate"}).build()
        assert dict(first.vertex_highlights) == {"A": "sky"}
        assert dict(second.vertex_highlights) == {"C": "slate"}


# ─── BFS ─────────────────────────────────────────────────────────────────────


class TestBfs:
    def test_visit_order_on_undirected_graph(self):
        graph = compile_graphene("vertex([A, B, C, D])\nedge(A, [B, C])\nedge(C, D)")
        steps = run_algorithm("bfs", graph, start="A")
        final = steps[-1]
        visit_order = next(s for s in final.states if s.title == "Visit Order")
        assert visit_order.data == ("A", "B", "C", "D")
        assert steps[0].description == "Push start vertex A to the queue."

    def test_directed_edges_are_followed_one_way(self):
        graph = compile_adot("graph { a -> b; c -> a }")
        steps = run_algorithm("bfs", graph, start="a")
        visit_order = steps[-1].states[1]
        assert visit_order.data == ("a", "b")

    def test_earlier_steps_unchanged_by_later_ones(self):
        graph = compile_graphene("vertex([A, B])\nedge(A, B)")
        steps = run_algorithm("bfs", graph, start="A")
        snapshots = [(s.description, s.states, dict(s.vertex_highlights)) for s in steps]
        run_algorithm("bfs", graph, start="B")
        assert snapshots == [(s.description, s.states, dict(s.vertex_highlights)) for s in steps]
        assert steps[0].states[1].data == ()

    def test_pushed_edges_highlighted(self):
        graph = compile_graphene("vertex([A, B])\narc(A, B)")
        steps = run_algorithm("bfs", graph, start="A")
        push = next(s for s in steps if s.description == "Push all adjacent vertices to the queue.")
        assert dict(push.edge_highlights) == {"e0": "sky"}
        assert push.vertex_highlights["A"] == "orange"


# ─── Dijkstra ────────────────────────────────────────────────────────────────


class TestDijkstra:
    def test_shortest_distances(self):
        graph = compile_adot(
            "graph { s -> a [cost=4]; s -> b [cost=1]; b -> a [cost=2]; a -> t [cost=1]; x }"
        )
        steps = run_algorithm("dijkstra", graph, start="s")
        final = steps[-1]
        table = final.states[0]
        distances = {row[0]: row[1] for row in table.rows}
        assert distances == {"s": "0", "a": "3", "b": "1", "t": "4", "x": "∞"}
        assert final.labels["t"] == "4"
        assert set(final.edge_highlights) == {"e1", "e2", "e3"}

    def test_step_to_dict(self):
        graph = compile_graphene("vertex([A, B])\nedge(A, B, 2)")
        data = run_algorithm("dijkstra", graph, start="A")[-1].to_dict()
        assert data["labels"] == {"A": "0", "B": "2"}
        assert data["edge_highlights"] == {"e0": "orange"}
        (table,) = data["states"]
        assert table["type"] == "table"
        assert table["columns"] == ["Vertex", "Distance", "Previous"]
        assert table["rows"] == [["A", "0", "-"], ["B", "2", "A"]]

    def test_unweighted_edges_count_as_one(self):
        graph = compile_graphene("vertex([A, B, C])\nedge(A, B)\nedge(B, C)")
        final = run_algorithm("dijkstra", graph, start="A")[-1]
        assert final.labels == {"A": "0", "B": "1", "C": "2"}


# ─── Registry ────────────────────────────────────────────────────────────────


def test_registry_contents():
    assert set(ALGORITHMS) == {"bfs", "dijkstra"}
    assert all(alg.params[0].name == "start" for alg in ALGORITHMS.values())


def test_every_algorithm_has_a_guide():
    assert "queue" in ALGORITHMS["bfs"].guide
    assert "priority queue" in ALGORITHMS["dijkstra"].guide


def test_unknown_algorithm():
    graph = compile_graphene("vertex(A)")
    with pytest.raises(ValueError, match="Unknown algorithm 'dfs'"):
        run_algorithm("dfs", graph, start="A")


def test_unknown_start_vertex():
    graph = compile_graphene("vertex(A)")
    with pytest.raises(ValueError, match="unknown vertex 'Z'"):
        run_algorithm("bfs", graph, start="Z")


def test_missing_start_vertex():
    graph = compile_graphene("vertex(A)")
    with pytest.raises(ValueError, match="missing parameter 'start'"):
        run_algorithm("bfs", graph)


def test_unexpected_parameter():
    graph = compile_graphene("vertex(A)")
    with pytest.raises(ValueError, match="unknown parameter"):
        run_algorithm("bfs", graph, start="A", goal="A")
