import dataclasses

import pytest

from algorithms import get_algorithm
from engine import Recorder
from graph import NodeColor


def test_steps_are_frozen_snapshots(triangle):
    rec = Recorder(triangle)
    rec.run(get_algorithm("bfs"), triangle.get_node(0))

    first = rec.steps[0]
    assert first.snapshot_for(0).visited is True
    assert first.snapshot_for(1).visited is False

    # editing the live graph afterwards does not rewrite history
    triangle.highlight(triangle.get_node(0), NodeColor.PATH)
    triangle.remove_node(triangle.get_node(2))
    assert first.snapshot_for(0).color == NodeColor.VISITED
    assert first.node_ids == [0, 1, 2]

    with pytest.raises(dataclasses.FrozenInstanceError):
        first.message = "changed"


def test_record_step_snapshots_every_node(triangle):
    rec = Recorder(triangle)
    step = rec.record_step("hello", 3)
    assert step.to_dict()["nodes"] == [
        {"id": 0, "visited": False, "color": "#ffffff"},
        {"id": 1, "visited": False, "color": "#ffffff"},
        {"id": 2, "visited": False, "color": "#ffffff"},
    ]
    assert rec.steps == [step]


def test_new_run_replaces_the_old_one(triangle):
    rec = Recorder(triangle)
    rec.run(get_algorithm("dfs"), triangle.get_node(0))
    triangle.reset_traversal_state()
    metrics = rec.run(get_algorithm("bfs"), triangle.get_node(0))
    assert metrics.algo_kind == "bfs"
    assert metrics.total_steps == len(rec.steps) == 6
    assert rec.steps[0].message == "Starting BFS from Node 0."


def test_clear(triangle):
    rec = Recorder(triangle)
    rec.run(get_algorithm("bfs"), triangle.get_node(0))
    rec.clear()
    assert rec.steps == []
    assert rec.result is None
    assert rec.metrics is None
