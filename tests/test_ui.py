import pytest

from algorithms import get_algorithm_code_lines, list_algorithms
from engine import Mode, Session
from graph import Graph, NodeColor
from ui import (
    CanvasRenderer,
    algorithm_selector,
    mode_panel,
    project,
    pseudocode_viewer,
    run_summary,
    status_panel,
    step_counter,
    unproject_to_ground,
    view_panel,
)


# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
def test_canvas_tracks_scene_contents():
    scene = CanvasRenderer()
    g = Graph(renderer=scene)
    a, b = g.add_node(), g.add_node(10, 0, 0)
    edge = g.add_edge(a, b)
    assert set(scene.nodes) == {0, 1}
    assert set(scene.edges) == {edge.id}

    g.highlight(a, NodeColor.VISITED)
    assert scene.color_of(0) == 0x00FF00

    g.remove_node(a)
    assert set(scene.nodes) == {1}
    assert scene.edges == {}
    assert scene.color_of(0) is None


def test_svg_paints_highlight_colours():
    scene = CanvasRenderer()
    g = Graph(renderer=scene)
    node = g.add_node()
    g.highlight(node, NodeColor.PATH)
    svg = scene.to_svg()
    assert svg.startswith('<svg id="scene"')
    assert 'data-id="0"' in svg
    assert 'fill="#ff0000"' in svg


@pytest.mark.parametrize("x,z", [(0, 0), (25, -40), (-80, 60)])
def test_click_on_ground_lands_under_the_cursor(x, z):
    sx, sy = project(x, 0.0, z)
    gx, gy, gz = unproject_to_ground(sx, sy)
    assert gx == pytest.approx(x)
    assert gy == 0.0
    assert gz == pytest.approx(z)


def test_session_playback_reaches_the_scene():
    scene = CanvasRenderer()
    s = Session(renderer=scene)
    s.generate("grid", seed=2)
    s.change_mode(Mode.SELECT_START)
    s.select_node(0)
    s.run_algorithm("dfs")
    s.finish_algorithm()
    assert set(scene.nodes) == set(s.graph.nodes)
    assert all(scene.color_of(i) == NodeColor.DEPTH_VISITED for i in scene.nodes)


# ---------------------------------------------------------------------------
# Panels
# ---------------------------------------------------------------------------
def test_algorithm_selector_lists_all_four():
    html = algorithm_selector(list_algorithms(), "dijkstra")
    for key in ("bfs", "dfs", "dijkstra", "astar"):
        assert f'value="{key}"' in html
    assert '<option value="dijkstra" selected>' in html
    assert "A* Search" in html


def test_mode_panel_marks_active_mode():
    html = mode_panel(Mode.SELECT_END)
    assert 'class="mode-btn active" data-mode="selectEndNode"' in html
    assert "Mode: SelectEndNode" in html


def test_text_is_escaped():
    assert "&lt;b&gt;" in status_panel("<b>")


def test_step_counter_is_one_based():
    assert '<span id="current-step">0</span>' in step_counter(-1, 5)
    assert '<span id="current-step">3</span>' in step_counter(2, 5)


def test_pseudocode_viewer_highlights_current_line():
    lines = get_algorithm_code_lines("bfs")
    html = pseudocode_viewer(lines, 4)
    assert 'class="code-line highlight" data-line="4"' in html
    assert html.count("highlight") == 1
    assert "placeholder" in pseudocode_viewer([])


def test_run_summary(session):
    assert "placeholder" in run_summary(None)
    session.change_mode(Mode.SELECT_START)
    session.select_node(0)
    session.change_mode(Mode.SELECT_END)
    session.select_node(2)
    html = run_summary(session.run_algorithm("dijkstra"))
    assert "Dijkstra&#39;s Algorithm" in html
    assert "0 → 1 → 2" in html


def test_weight_labels_only_when_asked():
    scene = CanvasRenderer()
    g = Graph(renderer=scene)
    a, b, c = g.add_node(), g.add_node(10, 0, 0), g.add_node(20, 0, 0)
    g.add_edge(a, b, 3.0)
    g.add_edge(b, c, 2.5)
    assert 'class="weight"' not in scene.to_svg()
    svg = scene.to_svg(show_weights=True)
    assert ">3</text>" in svg
    assert ">2.5</text>" in svg
    assert 'class="grid"' not in scene.to_svg(show_grid=False)


def test_renderers_do_not_share_config():
    one, two = CanvasRenderer(), CanvasRenderer()
    one.config.show_weights = True
    assert two.config.show_weights is False


def test_view_panel_reflects_toggles():
    html = view_panel({"weights": True, "grid": False, "code": True})
    assert 'data-view="weights" checked' in html
    assert 'data-view="grid" >' in html
