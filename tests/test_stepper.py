from algorithms import get_algorithm, get_algorithm_code_lines
from algorithms.step import NO_LINE
from engine import CodeCursor, Recorder, StepPlayer
from graph import NodeColor


def recorded(graph, kind="bfs", start=0, end=None):
    rec = Recorder(graph)
    rec.run(get_algorithm(kind), graph.get_node(start),
            graph.get_node(end) if end is not None else None)
    graph.reset_traversal_state()
    cursor = CodeCursor()
    cursor.load(get_algorithm_code_lines(kind))
    seen = []
    player = StepPlayer(graph, cursor, on_step=seen.append)
    player.load(rec.steps)
    return player, seen


def state(graph):
    return [(n.id, n.visited, int(n.color)) for n in graph.nodes.values()]


def test_nothing_applied_after_load(triangle):
    player, seen = recorded(triangle)
    assert player.current_idx == -1
    assert player.current_step is None
    assert seen == []
    assert all(not n.visited for n in triangle.nodes.values())


def test_next_step_applies_snapshot_and_line(triangle):
    player, seen = recorded(triangle)
    assert player.next_step() is True
    assert player.current_idx == 0
    assert state(triangle) == [
        (0, True, NodeColor.VISITED),
        (1, False, NodeColor.UNVISITED),
        (2, False, NodeColor.UNVISITED),
    ]
    assert player.code_cursor.index == 1
    assert seen[-1].message == "Starting BFS from Node 0."


def test_next_then_previous_restores_state(triangle):
    player, _ = recorded(triangle)
    player.next_step()
    player.next_step()
    before = state(triangle)
    player.next_step()
    player.previous_step()
    assert state(triangle) == before
    assert player.current_idx == 1


def test_cursor_clamps_at_both_ends(triangle):
    player, _ = recorded(triangle)
    assert player.previous_step() is False
    player.next_step()
    assert player.previous_step() is False
    assert player.current_idx == 0
    player.goto_step(player.total_steps - 1)
    assert player.next_step() is False
    assert player.is_finished


def test_apply_step_is_idempotent(triangle):
    player, _ = recorded(triangle)
    player.apply_step(3)
    once = state(triangle)
    player.apply_step(3)
    assert state(triangle) == once


def test_apply_step_out_of_range_is_a_no_op(triangle):
    player, seen = recorded(triangle)
    assert player.apply_step(99) is False
    assert player.apply_step(-1) is False
    assert seen == []


def test_finish_lands_both_cursors_at_the_end(triangle):
    player, seen = recorded(triangle, "dijkstra", 0, 2)
    player.finish()
    assert player.current_idx == player.total_steps - 1
    assert player.code_cursor.index == player.code_cursor.last_index
    assert seen[-1].message == "Tracing back path via Node 1."
    assert triangle.get_node(2).color == NodeColor.PATH


def test_removed_nodes_are_skipped(triangle):
    player, _ = recorded(triangle)
    triangle.remove_node(triangle.get_node(2))
    player.finish()
    assert [n.id for n in triangle.nodes.values()] == [0, 1]
    assert triangle.get_node(1).visited is True


def test_added_nodes_are_left_alone(triangle):
    player, _ = recorded(triangle)
    extra = triangle.add_node(5, 5, 5)
    extra.visited = True
    player.finish()
    assert extra.visited is True
    assert extra.color == NodeColor.UNVISITED


def test_execute_current_code_line_moves_both_cursors(triangle):
    player, _ = recorded(triangle)
    assert player.code_cursor.index == NO_LINE
    player.execute_current_code_line()
    assert player.current_idx == 0
    assert player.code_cursor.index == 0
    player.execute_current_code_line()
    assert player.current_idx == 1
    assert player.code_cursor.index == 1


def test_previous_then_next_restores_state(triangle):
    player, seen = recorded(triangle)
    for _ in range(4):
        player.next_step()
    before = state(triangle)
    line_before = player.code_cursor.index
    player.previous_step()
    assert state(triangle) != before
    player.next_step()
    assert state(triangle) == before
    assert player.code_cursor.index == line_before
    assert player.current_idx == 3
    assert seen[-1].message == "Discovered Node 2 from Node 0."
