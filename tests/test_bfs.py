from algorithms import get_algorithm
from algorithms.bfs import LINE_DISCOVER, LINE_START, LINE_VISIT
from engine import Recorder
from graph import NodeColor


def run(graph, start_id):
    rec = Recorder(graph)
    rec.run(get_algorithm("bfs"), graph.get_node(start_id))
    return rec


def test_bfs_trace_on_triangle(triangle):
    rec = run(triangle, 0)
    assert [s.message for s in rec.steps] == [
        "Starting BFS from Node 0.",
        "Visiting Node 0.",
        "Discovered Node 1 from Node 0.",
        "Discovered Node 2 from Node 0.",
        "Visiting Node 1.",
        "Visiting Node 2.",
    ]
    assert [s.code_line for s in rec.steps] == [
        LINE_START, LINE_VISIT, LINE_DISCOVER, LINE_DISCOVER, LINE_VISIT, LINE_VISIT,
    ]
    assert rec.result.visit_order == [0, 1, 2]
    assert rec.result.previous == {1: 0, 2: 0}


def test_bfs_marks_only_the_reachable_set(triangle):
    island = triangle.add_node(50, 0, 0)
    run(triangle, 0)
    assert all(triangle.get_node(i).visited for i in (0, 1, 2))
    assert island.visited is False
    assert island.color == NodeColor.UNVISITED


def test_bfs_visits_each_node_once(path_graph):
    rec = run(path_graph, 1)
    visiting = [s.message for s in rec.steps if s.message.startswith("Visiting")]
    assert len(visiting) == len(set(visiting)) == 4
    assert rec.result.visit_order == [1, 0, 2, 3]


def test_bfs_single_node():
    from graph import Graph

    g = Graph()
    g.add_node()
    rec = run(g, 0)
    assert [s.message for s in rec.steps] == ["Starting BFS from Node 0.", "Visiting Node 0."]
