"""
controls.py — UI Panels
=========================
Every panel is a pure function that takes state and returns HTML.

Panels:
  • algorithm_selector  – dropdown of registered algorithms
  • mode_panel          – mode buttons + "Mode: X" display
  • selection_panel     – start / end node display
  • view_panel          – display toggles (edge weights, grid, pseudocode)
  • status_panel        – the current step message
  • help_panel          – what the current mode expects next
  • step_counter        – "Step i / n"
  • run_summary         – RunMetrics of the last run
  • pseudocode_viewer   – listing with the live line highlighted

Design:
  - All panels are stateless render functions.
  - Output is raw HTML strings; user-visible text goes through markupsafe.escape.
"""

from typing import Dict, List, Optional

from markupsafe import escape

from algorithms import AlgoInfo
from engine import Mode, RunMetrics


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "bfs") -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.kind.value == selected_key else ''
        options.append(f'<option value="{algo.kind.value}" {sel}>{escape(algo.label)}</option>')
    return f"""
    <div class="panel algorithm-selector">
      <label for="algorithm-select">Algorithm:</label>
      <select id="algorithm-select">{''.join(options)}</select>
      <button id="btn-run">Start Algorithm</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------
_MODE_BUTTONS = [
    (Mode.ADD_NODE,     "Add Node"),
    (Mode.ADD_EDGE,     "Add Edge"),
    (Mode.REMOVE_NODE,  "Remove Node"),
    (Mode.REMOVE_EDGE,  "Remove Edge"),
    (Mode.SELECT_START, "Select Start"),
    (Mode.SELECT_END,   "Select End"),
]


def mode_panel(mode: Mode = Mode.NONE) -> str:
    buttons = []
    for m, label in _MODE_BUTTONS:
        active = 'active' if m is mode else ''
        buttons.append(f'<button class="mode-btn {active}" data-mode="{m.value}">{label}</button>')
    return f"""
    <div class="panel mode-panel">
      <div class="button-row">{''.join(buttons)}</div>
      <div id="mode-display">Mode: {escape(mode.label)}</div>
    </div>
    """


def selection_panel(start: Optional[int] = None, end: Optional[int] = None) -> str:
    start_txt = f"Node {start}" if start is not None else "None"
    end_txt = f"Node {end}" if end is not None else "None"
    return f"""
    <div class="panel selection-panel">
      Start: <span id="start-node-display">{start_txt}</span>
      &nbsp; End: <span id="end-node-display">{end_txt}</span>
    </div>
    """


# ---------------------------------------------------------------------------
# Display toggles
# ---------------------------------------------------------------------------
_VIEW_TOGGLES = [
    ("weights", "Show Edge Weights"),
    ("grid",    "Show Grid"),
    ("code",    "Show Algorithm Code"),
]


def view_panel(view: Dict[str, bool]) -> str:
    boxes = []
    for key, label in _VIEW_TOGGLES:
        checked = "checked" if view.get(key) else ""
        boxes.append(
            f'<label><input type="checkbox" class="view-toggle" data-view="{key}" {checked}> {label}</label>'
        )
    return f'<div class="panel view-panel">{"<br>".join(boxes)}</div>'


# ---------------------------------------------------------------------------
# Text panels
# ---------------------------------------------------------------------------
def status_panel(status: str = "") -> str:
    return f'<div id="status-panel" class="panel">{escape(status)}</div>'


def help_panel(text: str = "") -> str:
    return f'<div id="help-text" class="panel">{escape(text)}</div>'


def step_counter(current_step: int = -1, total_steps: int = 0) -> str:
    return (
        f'<div class="step-info">Step <span id="current-step">{current_step + 1}</span>'
        f' / <span id="total-steps">{total_steps}</span></div>'
    )


def run_summary(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return '<div class="panel run-summary placeholder">Run an algorithm to see a summary.</div>'
    path = " → ".join(str(n) for n in metrics.path) if metrics.path else "—"
    return f"""
    <div class="panel run-summary">
      <table>
        <tr><td>Algorithm:</td><td><strong>{escape(metrics.algo_label)}</strong></td></tr>
        <tr><td>Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Nodes Visited:</td><td><strong>{metrics.nodes_visited}</strong></td></tr>
        <tr><td>Path:</td><td><strong>{escape(path)}</strong></td></tr>
        <tr><td>Path Cost:</td><td><strong>{metrics.path_cost:g}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div class="placeholder">Start an algorithm to view its pseudocode</div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """
