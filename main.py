"""
main.py — Graph Traversal Lab Flask App
========================================
The web server that hosts the step-through traversal tool.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current session state
  GET  /api/code/<kind>        – static pseudocode listing for an algorithm
  POST /api/graph/generate     – replace the graph with a random / grid one
  POST /api/graph/reset        – empty the graph
  POST /api/node/add           – add a node (scene coords, or screen coords on the ground plane)
  POST /api/node/remove        – remove a node and its edges
  POST /api/edge/add           – connect two nodes
  POST /api/edge/remove        – disconnect two nodes
  POST /api/mode               – change interaction mode
  POST /api/select             – a node was clicked (meaning depends on mode)
  POST /api/view               – flip a display toggle (weights / grid / code)
  POST /api/run                – run an algorithm and record its steps
  POST /api/reset              – reset traversal (keep graph)
  POST /api/step/next          – next recorded step
  POST /api/step/prev          – previous recorded step
  POST /api/code/next          – next pseudocode line
  POST /api/code/prev          – previous pseudocode line
  POST /api/code/execute       – step + code line together
  POST /api/finish             – jump to the last step

State management:
  Each browser gets a server-side Session (engine.session) held in an
  in-process SessionStore; the Flask session cookie only carries its id.
  Idle sessions are evicted by the store.  Every command runs under its
  session's lock, together with the repaint payload it answers with.
"""

import logging
import math
from functools import wraps

from flask import Flask, render_template_string, request, jsonify, session

from config import Config
from algorithms import get_algorithm_code_lines, list_algorithms
from engine import Session, SessionStore, PreconditionError, UnknownNodeError
from ui import (
    CanvasRenderer,
    unproject_to_ground,
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


app = Flask(__name__)
app.config.from_object(Config)
app.config.from_prefixed_env("TRAVERSAL_LAB")

logger = logging.getLogger(__name__)

STORE = SessionStore(
    renderer_factory=CanvasRenderer,
    max_sessions=app.config["MAX_SESSIONS"],
    idle_timeout=app.config["SESSION_IDLE_TIMEOUT"],
)


# ---------------------------------------------------------------------------
# Session Helpers
# ---------------------------------------------------------------------------
def current_session() -> Session:
    """The caller's Session, created (with the default graph) on first use."""
    s = STORE.get(session.get("sid"))
    if s is None:
        s = STORE.create()
        kind = app.config.get("DEFAULT_GRAPH", "random")
        if kind in ("random", "grid"):
            s.generate(kind, seed=app.config.get("DEFAULT_GRAPH_SEED"))
        session["sid"] = s.id
    return s


def payload(s: Session) -> dict:
    """Everything the page needs to repaint after a command."""
    return {
        "state":      s.to_dict(),
        "svg":        s.renderer.to_svg(show_weights=s.view["weights"], show_grid=s.view["grid"]),
        "status":     status_panel(s.status),
        "help":       help_panel(s.help_text),
        "mode":       mode_panel(s.mode),
        "view":       view_panel(s.view),
        "selection":  selection_panel(
            s.start_node.id if s.start_node else None,
            s.end_node.id if s.end_node else None,
        ),
        "steps":      step_counter(s.player.current_idx, s.player.total_steps),
        "summary":    run_summary(s.metrics),
        "pseudocode": (pseudocode_viewer(s.code_cursor.lines, s.code_cursor.index)
                       if s.view["code"] else ""),
    }


def session_command(fn):
    """Run `fn(s, ...)` under the session lock and answer with the repaint payload."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        s = current_session()
        with s.lock:
            fn(s, *args, **kwargs)
            return jsonify(payload(s))
    return wrapper


# ---------------------------------------------------------------------------
# Request parsing: bad fields raise ValueError (400)
# ---------------------------------------------------------------------------
def body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def number(data: dict, key: str, default=None):
    """A finite numeric field; integral values come back as int."""
    value = data.get(key, default)
    if value is None or isinstance(value, bool):
        raise ValueError(f"Missing or invalid field: {key}")
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid number for {key}: {value!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"Invalid number for {key}: {value!r}")
    return int(value) if value.is_integer() else value


def node_ref(data: dict, key: str = "id") -> int:
    value = number(data, key)
    if not isinstance(value, int):
        raise ValueError(f"Invalid node id for {key}: {value!r}")
    return value


# ---------------------------------------------------------------------------
# Error handling: JSON notices the page shows as alerts
# ---------------------------------------------------------------------------
@app.errorhandler(PreconditionError)
def handle_precondition(err):
    return jsonify({"error": str(err)}), 400


@app.errorhandler(ValueError)
def handle_bad_value(err):
    logger.warning("Bad request: %s", err)
    return jsonify({"error": str(err)}), 400


@app.errorhandler(UnknownNodeError)
def handle_unknown_node(err):
    return jsonify({"error": err.args[0]}), 404


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    s = current_session()
    with s.lock:
        p = payload(s)
        selected = s.algorithm.value if s.algorithm else "bfs"
    return render_template_string(
        INDEX_TEMPLATE,
        algo_selector=algorithm_selector(list_algorithms(), selected),
        **p,
    )


@app.route("/api/state")
@session_command
def api_state(s):
    pass


@app.route("/api/code/<kind>")
def api_code_lines(kind):
    return jsonify({"algorithm": kind, "lines": get_algorithm_code_lines(kind)})


# ---------------------------------------------------------------------------
# API: Graph editing
# ---------------------------------------------------------------------------
@app.route("/api/graph/generate", methods=["POST"])
@session_command
def api_graph_generate(s):
    data = body()
    seed = number(data, "seed") if data.get("seed") is not None else None
    s.generate(data.get("kind", "random"), seed=seed)


@app.route("/api/graph/reset", methods=["POST"])
@session_command
def api_graph_reset(s):
    s.reset_graph()


@app.route("/api/node/add", methods=["POST"])
@session_command
def api_node_add(s):
    data = body()
    if "sx" in data and "sy" in data:
        x, y, z = unproject_to_ground(number(data, "sx"), number(data, "sy"), s.renderer.config)
    else:
        x, y, z = number(data, "x", 0), number(data, "y", 0), number(data, "z", 0)
    s.add_node(x, y, z)


@app.route("/api/node/remove", methods=["POST"])
@session_command
def api_node_remove(s):
    s.remove_node(node_ref(body()))


@app.route("/api/edge/add", methods=["POST"])
@session_command
def api_edge_add(s):
    data = body()
    s.add_edge(node_ref(data, "node1"), node_ref(data, "node2"), number(data, "weight", 1))


@app.route("/api/edge/remove", methods=["POST"])
@session_command
def api_edge_remove(s):
    data = body()
    s.remove_edge(node_ref(data, "node1"), node_ref(data, "node2"))


# ---------------------------------------------------------------------------
# API: Modes, selection & display
# ---------------------------------------------------------------------------
@app.route("/api/mode", methods=["POST"])
@session_command
def api_mode(s):
    s.change_mode(body().get("mode", "none"))


@app.route("/api/select", methods=["POST"])
@session_command
def api_select(s):
    data = body()
    s.select_node(node_ref(data), number(data, "weight", 1))


@app.route("/api/view", methods=["POST"])
@session_command
def api_view(s):
    data = body()
    on = data.get("on")
    if on is not None and not isinstance(on, bool):
        raise ValueError(f"Invalid toggle value: {on!r}")
    s.toggle_view(str(data.get("option", "")), on)


# ---------------------------------------------------------------------------
# API: Run & playback
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
@session_command
def api_run(s):
    s.run_algorithm(body().get("algorithm", "bfs"))


@app.route("/api/reset", methods=["POST"])
@session_command
def api_reset(s):
    s.reset_traversal()


@app.route("/api/step/next", methods=["POST"])
@session_command
def api_step_next(s):
    s.next_step()


@app.route("/api/step/prev", methods=["POST"])
@session_command
def api_step_prev(s):
    s.previous_step()


@app.route("/api/code/next", methods=["POST"])
@session_command
def api_code_next(s):
    s.next_code_line()


@app.route("/api/code/prev", methods=["POST"])
@session_command
def api_code_prev(s):
    s.previous_code_line()


@app.route("/api/code/execute", methods=["POST"])
@session_command
def api_code_execute(s):
    s.execute_current_code_line()


@app.route("/api/finish", methods=["POST"])
@session_command
def api_finish(s):
    s.finish_algorithm()


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Graph Traversal Lab</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: Arial, sans-serif; display: flex; height: 100vh; background: #f0f0f0; }
    #sidebar { width: 340px; padding: 16px; overflow-y: auto; background: #fff; border-right: 1px solid #ccc; }
    #main { flex: 1; display: flex; flex-direction: column; align-items: center; padding: 12px; }
    .panel { margin-bottom: 12px; }
    .button-row { display: flex; flex-wrap: wrap; gap: 4px; margin-bottom: 6px; }
    .mode-btn.active { background: #333; color: #fff; }
    #status-panel { font-weight: bold; min-height: 1.4em; }
    #help-text { color: #555; }
    .code-block { font-family: monospace; background: #1e1e1e; color: #ddd; padding: 8px; white-space: pre; }
    .code-line.highlight { background: #665c00; color: #fff; }
    .placeholder { color: #888; }
    .keys { font-size: 12px; color: #666; }
    #scene .node { cursor: pointer; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="mode">{{ mode|safe }}</div>
    <div id="selection">{{ selection|safe }}</div>
    <div id="view">{{ view|safe }}</div>
    <div class="panel">
      <div class="button-row">
        <button data-generate="random">Random Graph</button>
        <button data-generate="grid">Grid Graph</button>
        <button id="btn-reset-graph">Reset Graph</button>
      </div>
      <label>Edge weight: <input id="edge-weight" type="number" value="1" min="0" step="any"></label>
    </div>
    {{ algo_selector|safe }}
    <div id="help">{{ help|safe }}</div>
    <div id="steps">{{ steps|safe }}</div>
    <div id="summary">{{ summary|safe }}</div>
    <p class="keys">→ / ← step &nbsp; ↑ / ↓ code line &nbsp; Space execute line &nbsp; Enter finish &nbsp; R reset</p>
  </div>
  <div id="main">
    <div id="status">{{ status|safe }}</div>
    <div id="canvas">{{ svg|safe }}</div>
    <div id="pseudocode">{{ pseudocode|safe }}</div>
  </div>
  <script>
    let mode = {{ state.mode|tojson }};

    function repaint(data) {
      if (data.error) { alert(data.error); return; }
      for (const key of ['status', 'help', 'mode', 'view', 'selection', 'steps', 'summary', 'pseudocode']) {
        document.getElementById(key).innerHTML = data[key];
      }
      document.getElementById('canvas').innerHTML = data.svg;
      mode = data.state.mode;
    }

    async function post(url, payload = {}) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(payload),
      });
      repaint(await res.json());
    }

    document.addEventListener('click', (e) => {
      const modeBtn = e.target.closest('.mode-btn');
      if (modeBtn) { post('/api/mode', {mode: modeBtn.dataset.mode}); return; }
      const gen = e.target.closest('[data-generate]');
      if (gen) { post('/api/graph/generate', {kind: gen.dataset.generate}); return; }
      if (e.target.id === 'btn-reset-graph') { post('/api/graph/reset'); return; }
      if (e.target.id === 'btn-run') {
        post('/api/run', {algorithm: document.getElementById('algorithm-select').value});
        return;
      }
      const svg = e.target.closest('#scene');
      if (!svg) return;
      const node = e.target.closest('.node');
      const edge = e.target.closest('.edge');
      if (node) {
        const weight = parseFloat(document.getElementById('edge-weight').value) || 1;
        post('/api/select', {id: +node.dataset.id, weight: weight});
      } else if (edge && mode === 'removeEdge') {
        post('/api/edge/remove', {node1: +edge.dataset.node1, node2: +edge.dataset.node2});
      } else if (mode === 'addNode') {
        const pt = svg.createSVGPoint();
        pt.x = e.clientX; pt.y = e.clientY;
        const local = pt.matrixTransform(svg.getScreenCTM().inverse());
        post('/api/node/add', {sx: local.x, sy: local.y});
      }
    });

    document.addEventListener('change', (e) => {
      const toggle = e.target.closest('.view-toggle');
      if (toggle) post('/api/view', {option: toggle.dataset.view, on: toggle.checked});
    });

    document.addEventListener('keydown', (e) => {
      if (e.target.tagName === 'INPUT' || e.target.tagName === 'SELECT') return;
      switch (e.key) {
        case 'ArrowRight': post('/api/step/next'); break;
        case 'ArrowLeft':  post('/api/step/prev'); break;
        case 'ArrowUp':    post('/api/code/prev'); break;
        case 'ArrowDown':  post('/api/code/next'); break;
        case ' ':          e.preventDefault(); post('/api/code/execute'); break;
        case 'Enter':      post('/api/finish'); break;
        case 'r': case 'R': post('/api/reset'); break;
      }
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Graph Traversal Lab on http://localhost:%s", app.config["PORT"])
    app.run(debug=app.config["DEBUG"], host=app.config["HOST"], port=app.config["PORT"])
