import math

from algorithms import get_algorithm
from algorithms.dijkstra import LINE_INIT, LINE_TRACE, LINE_UPDATE, LINE_VISIT
from engine import Recorder
from graph import NodeColor


def run(graph, start_id, end_id=None):
    rec = Recorder(graph)
    end = graph.get_node(end_id) if end_id is not None else None
    metrics = rec.run(get_algorithm("dijkstra"), graph.get_node(start_id), end)
    return rec, metrics


def test_shortest_path_on_triangle(triangle):
    rec, metrics = run(triangle, 0, 2)
    assert rec.result.distances == {0: 0, 1: 1, 2: 3}
    assert rec.result.path == [0, 1, 2]
    assert rec.result.found is True
    assert metrics.path_cost == 3
    assert metrics.nodes_visited == 3


def test_trace_messages_and_lines(triangle):
    rec, _ = run(triangle, 0, 2)
    assert [(s.message, s.code_line) for s in rec.steps] == [
        ("Initialized distances and priority queue.", LINE_INIT),
        ("Visiting Node 0.", LINE_VISIT),
        ("Updated distance of Node 1 to 1 via Node 0.", LINE_UPDATE),
        ("Updated distance of Node 2 to 4 via Node 0.", LINE_UPDATE),
        ("Visiting Node 1.", LINE_VISIT),
        ("Updated distance of Node 2 to 3 via Node 1.", LINE_UPDATE),
        ("Visiting Node 2.", LINE_VISIT),
        ("Tracing back path via Node 2.", LINE_TRACE),
        ("Tracing back path via Node 1.", LINE_TRACE),
    ]


def test_stale_queue_entries_produce_no_steps(triangle):
    # node 2 is enqueued twice (priority 4, then 3) but visited once
    rec, _ = run(triangle, 0, 2)
    visits = [s.message for s in rec.steps if s.message == "Visiting Node 2."]
    assert len(visits) == 1


def test_path_nodes_are_red_at_the_end(triangle):
    run(triangle, 0, 2)
    assert triangle.get_node(2).color == NodeColor.PATH
    assert triangle.get_node(1).color == NodeColor.PATH
    assert triangle.get_node(0).color == NodeColor.VISITED


def test_no_end_means_no_trace(triangle):
    rec, metrics = run(triangle, 0)
    assert not any(s.code_line == LINE_TRACE for s in rec.steps)
    assert rec.result.path == []
    assert metrics.path_found is False


def test_unreachable_end(triangle):
    island = triangle.add_node(9, 9, 9)
    rec, _ = run(triangle, 0, island.id)
    assert rec.result.distances[island.id] == math.inf
    assert rec.result.path == []
    assert rec.result.found is False


def test_start_equals_end(triangle):
    rec, _ = run(triangle, 1, 1)
    assert rec.result.path == [1]
    assert rec.result.found is True
