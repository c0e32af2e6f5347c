"""
stepper.py — Step Player
=========================
A cursor over a recorded step sequence.  Moving the cursor writes the
step's snapshot back onto the live graph (visited flags + colours, via
the renderer), reports the step's message and lights the step's
pseudo-code line.

Cursor:
    current_idx ∈ [-1, len(steps) - 1];  -1 = nothing applied yet.
    next / previous clamp at the ends (no-op, never an error).

Playback against an edited graph:
    nodes added after a step was recorded are left untouched by it, and
    snapshot entries for nodes that have since been removed are skipped.

This class is NOT thread-safe; drive it from one thread.
"""

import logging
from typing import Callable, Dict, List, Optional

from graph import Graph
from algorithms.step import Step, NodeSnapshot
from engine.code_cursor import CodeCursor

logger = logging.getLogger(__name__)


class StepPlayer:
    """
    Attributes:
        graph       : Live graph the snapshots are applied to.
        code_cursor : Pseudo-code cursor moved to each applied step's line.
        steps       : The recorded sequence being played.
        current_idx : Index of the step currently shown.
        on_step     : Optional callback(Step) fired after a step is applied.
                      The session hooks its status text here.
    """

    def __init__(
        self,
        graph: Graph,
        code_cursor: CodeCursor,
        on_step: Optional[Callable[[Step], None]] = None,
    ):
        self.graph:       Graph      = graph
        self.code_cursor: CodeCursor = code_cursor
        self.steps:       List[Step] = []
        self.current_idx: int        = -1
        self.on_step:     Optional[Callable[[Step], None]] = on_step

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: List[Step]) -> None:
        """Take a freshly recorded sequence; nothing is applied yet."""
        self.steps = list(steps)
        self.current_idx = -1

    def reset(self) -> None:
        self.steps = []
        self.current_idx = -1

    # ------------------------------------------------------------------
    # Application
    # ------------------------------------------------------------------
    def apply_step(self, index: int) -> bool:
        """
        Write step `index` onto the live graph.  Out-of-range indices do
        nothing and return False.  Does not move `current_idx`.
        """
        if not 0 <= index < len(self.steps):
            return False
        step = self.steps[index]

        by_id: Dict[int, NodeSnapshot] = {snap.id: snap for snap in step.nodes}
        for node in self.graph.nodes.values():
            snap = by_id.get(node.id)
            if snap is None:
                continue
            node.visited = snap.visited
            self.graph.highlight(node, snap.color)

        self.code_cursor.move_to(step.code_line)
        if self.on_step:
            self.on_step(step)
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step.  Returns False if already at the last one."""
        if self.current_idx >= len(self.steps) - 1:
            return False
        self.current_idx += 1
        logger.debug("next -> step %d/%d", self.current_idx, len(self.steps))
        return self.apply_step(self.current_idx)

    def previous_step(self) -> bool:
        """Rewind one step.  Returns False at the first step (or before it)."""
        if self.current_idx <= 0:
            return False
        self.current_idx -= 1
        logger.debug("previous -> step %d/%d", self.current_idx, len(self.steps))
        return self.apply_step(self.current_idx)

    def goto_step(self, index: int) -> bool:
        """Jump straight to a recorded step index."""
        if not 0 <= index < len(self.steps):
            return False
        self.current_idx = index
        return self.apply_step(index)

    def finish(self) -> None:
        """Play every remaining step in order, then light the listing's last line."""
        while self.current_idx < len(self.steps) - 1:
            self.current_idx += 1
            self.apply_step(self.current_idx)
        self.code_cursor.jump_to_end()

    def execute_current_code_line(self) -> None:
        """Advance the step cursor and the code cursor together by one."""
        line = self.code_cursor.index
        self.next_step()
        if line < self.code_cursor.last_index:
            self.code_cursor.move_to(line + 1)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return bool(self.steps) and self.current_idx == len(self.steps) - 1
