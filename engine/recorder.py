"""
recorder.py — Run Recorder & Run Summary
==========================================
Runs an algorithm generator to completion against the live graph and
records a Step for every TraceEvent it yields, then computes the small
run summary the status panel shows.

Usage:
    rec = Recorder(graph)
    metrics = rec.run(get_algorithm("dijkstra"), start, end)
    rec.steps        # every Step, in the algorithm's logical event order
    rec.result       # the generator's SearchResult

Execution is eager and synchronous: all steps of a run exist before
playback starts.  There is no cancellation; a new run clears the old one.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from graph import Graph, Node
from algorithms import AlgoInfo
from algorithms.step import Step, NodeSnapshot, SearchResult, NO_LINE

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the summary line renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_kind:     str         = ""
    algo_label:    str         = ""
    start:         Optional[int] = None
    end:           Optional[int] = None
    total_steps:   int         = 0
    nodes_visited: int         = 0
    path:          List[int]   = field(default_factory=list)
    path_cost:     float       = 0.0
    path_found:    bool        = False
    wall_time_ms:  float       = 0.0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        graph   : The live graph snapshots are taken from.
        steps   : Steps recorded so far (append-only during a run).
        result  : SearchResult returned by the last generator, if any.
        metrics : RunMetrics of the last completed run, if any.
    """

    def __init__(self, graph: Graph):
        self.graph:   Graph                  = graph
        self.steps:   List[Step]             = []
        self.result:  Optional[SearchResult] = None
        self.metrics: Optional[RunMetrics]   = None

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------
    def record_step(self, message: str, code_line: int = NO_LINE) -> Step:
        """Snapshot every live node and append the Step."""
        step = Step(
            nodes=tuple(
                NodeSnapshot(id=node.id, visited=bool(node.visited), color=int(node.color))
                for node in self.graph.nodes.values()
            ),
            message=message,
            code_line=code_line,
        )
        self.steps.append(step)
        return step

    def clear(self) -> None:
        self.steps = []
        self.result = None
        self.metrics = None

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(self, info: AlgoInfo, start: Node, end: Optional[Node] = None) -> RunMetrics:
        """Exhaust `info.fn`, record every step, compute metrics."""
        self.clear()
        logger.info("Running %s from node %s (end=%s)", info.label, start.id,
                    end.id if end is not None else None)

        started = time.monotonic()
        trace = info.fn(self.graph, start, end)
        while True:
            try:
                event = next(trace)
            except StopIteration as stop:
                self.result = stop.value
                break
            self.record_step(event.message, event.code_line)
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(info, start, end, wall_ms)
        logger.info("%s recorded %d steps", info.label, len(self.steps))
        return self.metrics

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(
        self, info: AlgoInfo, start: Node, end: Optional[Node], wall_ms: float
    ) -> RunMetrics:
        result = self.result or SearchResult()
        path = list(result.path)

        path_cost = 0.0
        for a_id, b_id in zip(path, path[1:]):
            a, b = self.graph.get_node(a_id), self.graph.get_node(b_id)
            edge = self.graph.edge_between(a, b) if a and b else None
            if edge:
                path_cost += edge.weight

        return RunMetrics(
            algo_kind=info.kind.value,
            algo_label=info.label,
            start=start.id,
            end=end.id if end is not None else None,
            total_steps=len(self.steps),
            nodes_visited=len(result.visit_order),
            path=path,
            path_cost=path_cost,
            path_found=bool(path),
            wall_time_ms=round(wall_ms, 2),
        )
