"""
ui/
---
Presentation layer.

    from ui import CanvasRenderer
    from ui import status_panel, pseudocode_viewer, …
"""

from ui.canvas import CanvasRenderer, CanvasConfig, render_canvas, project, unproject_to_ground

from ui.controls import (
    algorithm_selector,
    mode_panel,
    selection_panel,
    view_panel,
    status_panel,
    help_panel,
    step_counter,
    run_summary,
    pseudocode_viewer,
)

__all__ = [
    "CanvasRenderer",
    "CanvasConfig",
    "render_canvas",
    "project",
    "unproject_to_ground",
    "algorithm_selector",
    "mode_panel",
    "selection_panel",
    "view_panel",
    "status_panel",
    "help_panel",
    "step_counter",
    "run_summary",
    "pseudocode_viewer",
]
