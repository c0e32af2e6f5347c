"""
code_cursor.py — Pseudo-Code Cursor
====================================
A cursor over the static pseudo-code listing of the selected algorithm.
It moves either because the StepPlayer applied a step (jump to that
step's line) or because the user walks the listing by hand (up/down).

`index` is always in [-1, len(lines) - 1]; -1 means no line is lit.
"""

from typing import Callable, List, Optional

from algorithms.step import NO_LINE


class CodeCursor:
    """
    Attributes:
        lines        : The listing currently loaded.
        index        : Highlighted line, or NO_LINE.
        on_highlight : Optional callback(index) fired whenever the lit line changes.
    """

    def __init__(self, on_highlight: Optional[Callable[[int], None]] = None):
        self.lines:        List[str] = []
        self.index:        int       = NO_LINE
        self.on_highlight: Optional[Callable[[int], None]] = on_highlight

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.rewind()

    def rewind(self) -> None:
        """Back to NO_LINE, keeping the listing."""
        self._goto(NO_LINE)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_line(self) -> bool:
        if self.index >= len(self.lines) - 1:
            return False
        self._goto(self.index + 1)
        return True

    def previous_line(self) -> bool:
        if self.index <= 0:
            return False
        self._goto(self.index - 1)
        return True

    def move_to(self, index: int) -> None:
        """Light `index`; anything outside the listing means NO_LINE."""
        self._goto(index if 0 <= index < len(self.lines) else NO_LINE)

    def jump_to_end(self) -> None:
        self._goto(len(self.lines) - 1)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_line(self) -> Optional[str]:
        if 0 <= self.index < len(self.lines):
            return self.lines[self.index]
        return None

    @property
    def last_index(self) -> int:
        return len(self.lines) - 1

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, index: int) -> None:
        self.index = index
        if self.on_highlight:
            self.on_highlight(index)
