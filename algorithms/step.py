"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields TraceEvents.  The Recorder
turns each event into a Step: a frozen-in-time picture of every node's
visited flag and colour, plus the message and the pseudo-code line.

Design decisions:
  - Step and NodeSnapshot are frozen dataclasses holding plain values
    (ints, bools, str).  Nothing inside a Step points back into the live
    graph, so later mutations can never rewrite history.
  - `nodes` is a tuple, ordered like `graph.nodes` at record time.
  - NO_LINE is the "no pseudo-code line" sentinel.
"""

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Tuple


NO_LINE = -1


class TraceEvent(NamedTuple):
    """What an algorithm yields: 'record a step now, with this text and line'."""
    message:   str
    code_line: int = NO_LINE


@dataclass(frozen=True)
class NodeSnapshot:
    id:      int
    visited: bool
    color:   int


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        nodes     : One NodeSnapshot per node present when the step was recorded.
        message   : Human-readable description for the status panel.
        code_line : Index into the active pseudo-code listing, or NO_LINE.
    """

    nodes:     Tuple[NodeSnapshot, ...] = ()
    message:   str                      = ""
    code_line: int                      = NO_LINE

    def snapshot_for(self, node_id: int) -> Optional[NodeSnapshot]:
        for snap in self.nodes:
            if snap.id == node_id:
                return snap
        return None

    @property
    def node_ids(self) -> List[int]:
        return [snap.id for snap in self.nodes]

    def to_dict(self) -> dict:
        return {
            "nodes": [
                {"id": s.id, "visited": s.visited, "color": f"#{s.color:06x}"}
                for s in self.nodes
            ],
            "message":   self.message,
            "code_line": self.code_line,
        }


# ---------------------------------------------------------------------------
# Return value of every algorithm generator
# ---------------------------------------------------------------------------
@dataclass
class SearchResult:
    """
    Attributes:
        visit_order : Node ids in the order they were marked visited.
        distances   : {node_id: cost from start} — Dijkstra distances / A* gScores.
        previous    : {node_id: predecessor id} for every node with a predecessor.
        path        : Node ids on the traced path, start → end (empty if none).
        found       : Whether the end node was reached (always True for BFS/DFS).
    """

    visit_order: List[int]            = field(default_factory=list)
    distances:   Dict[int, float]     = field(default_factory=dict)
    previous:    Dict[int, int]       = field(default_factory=dict)
    path:        List[int]            = field(default_factory=list)
    found:       bool                 = True
