"""
session.py — Interactive Session
=================================
One user's whole working context: the graph, the recorder / player /
code cursor built around it, the start & end selection, the interaction
mode and the two text panels (status + help).

Lifecycle:
    created   →  SessionStore.create()
    new run   →  run_algorithm()  (implies reset_traversal())
    reset     →  reset_traversal() / reset_graph()
    torn down →  SessionStore.drop()  →  close()

Every input command the front-end can send is a method here.  The
session validates run preconditions (start / end node present) and
raises PreconditionError; the algorithms themselves never re-check.
"""

import logging
import secrets
import threading
import time
from collections import OrderedDict
from enum import Enum
from typing import Callable, Dict, Optional, Union

from graph import Graph, Node, NodeColor, Renderer, NullRenderer
from algorithms import AlgorithmKind, get_algorithm, get_algorithm_code_lines
from algorithms.step import Step
from engine.code_cursor import CodeCursor
from engine.recorder import Recorder, RunMetrics
from engine.stepper import StepPlayer

logger = logging.getLogger(__name__)


class PreconditionError(ValueError):
    """A command was issued before the state it needs exists (no start node, …)."""


class UnknownNodeError(KeyError):
    """A command named a node id the graph does not hold."""


# ---------------------------------------------------------------------------
# Interaction modes
# ---------------------------------------------------------------------------
class Mode(str, Enum):
    NONE         = "none"
    ADD_NODE     = "addNode"
    ADD_EDGE     = "addEdge"
    REMOVE_NODE  = "removeNode"
    REMOVE_EDGE  = "removeEdge"
    SELECT_START = "selectStartNode"
    SELECT_END   = "selectEndNode"

    @property
    def label(self) -> str:
        return self.value[:1].upper() + self.value[1:]


HELP_TEXT: Dict[Mode, str] = {
    Mode.NONE:         "Select a mode to begin.",
    Mode.ADD_NODE:     "Click on the scene to add a node.",
    Mode.ADD_EDGE:     "Select two nodes to add an edge between them.",
    Mode.REMOVE_NODE:  "Select a node to remove it.",
    Mode.REMOVE_EDGE:  "Select an edge to remove it.",
    Mode.SELECT_START: "Select a node to set as the start node.",
    Mode.SELECT_END:   "Select a node to set as the end node.",
}

# display toggles: edge-weight labels, ground grid, pseudo-code panel
DEFAULT_VIEW: Dict[str, bool] = {"weights": False, "grid": True, "code": True}


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
class Session:
    """
    Attributes:
        id            : Opaque session key.
        graph         : The live graph.
        renderer      : Rendering collaborator shared with the graph.
        recorder      : Records steps for the current run.
        code_cursor   : Pseudo-code cursor for the selected algorithm.
        player        : Step cursor over the recorded run.
        algorithm     : Kind of the last run (None before the first).
        start_node    : Selected start node.
        end_node      : Selected end node.
        mode          : Current interaction Mode.
        pending_node  : First node picked in ADD_EDGE mode.
        status        : Status panel text.
        help_text     : Help panel text.
        metrics       : RunMetrics of the last run.
        view          : Display toggles, see DEFAULT_VIEW.
        lock          : Held by the HTTP layer for a whole command, so
                        overlapping requests never interleave.
    """

    def __init__(self, session_id: Optional[str] = None, renderer: Optional[Renderer] = None,
                 graph: Optional[Graph] = None):
        self.id:           str                     = session_id or secrets.token_hex(8)
        self.renderer:     Renderer                = renderer or NullRenderer()
        self.code_cursor:  CodeCursor              = CodeCursor()
        self.algorithm:    Optional[AlgorithmKind] = None
        self.start_node:   Optional[Node]          = None
        self.end_node:     Optional[Node]          = None
        self.mode:         Mode                    = Mode.NONE
        self.pending_node: Optional[Node]          = None
        self.status:       str                     = ""
        self.help_text:    str                     = HELP_TEXT[Mode.NONE]
        self.metrics:      Optional[RunMetrics]    = None
        self.view:         Dict[str, bool]         = dict(DEFAULT_VIEW)
        self.lock:         threading.RLock         = threading.RLock()
        self._attach(graph or Graph(renderer=self.renderer))

    def _attach(self, graph: Graph) -> None:
        graph.renderer = self.renderer
        self.graph    = graph
        self.recorder = Recorder(graph)
        self.player   = StepPlayer(graph, self.code_cursor, on_step=self._on_step)

    def _on_step(self, step: Step) -> None:
        self.status = step.message

    # ==================================================================
    # ALGORITHM RUN & PLAYBACK
    # ==================================================================
    def run_algorithm(self, kind: Union[str, AlgorithmKind]) -> RunMetrics:
        info = get_algorithm(kind)
        if info is None:
            raise ValueError(f"Unknown algorithm: {kind}")
        if self.start_node is None:
            logger.warning("Run of %s refused: no start node", info.kind.value)
            raise PreconditionError("Please select a start node.")
        if info.needs_end and self.end_node is None:
            logger.warning("Run of %s refused: no end node", info.kind.value)
            raise PreconditionError("Please select an end node.")

        self.reset_traversal()
        self.algorithm = info.kind
        self.code_cursor.load(get_algorithm_code_lines(info.kind))
        self.metrics = self.recorder.run(info, self.start_node, self.end_node)
        self.player.load(self.recorder.steps)
        self.status = info.done_message
        return self.metrics

    def reset_traversal(self) -> None:
        self.graph.reset_traversal_state()
        self.recorder.clear()
        self.player.reset()
        self.code_cursor.rewind()
        self.metrics = None
        self.status = "Traversal reset. Select a mode to continue."
        self.help_text = HELP_TEXT[self.mode]

    def next_step(self) -> bool:
        return self.player.next_step()

    def previous_step(self) -> bool:
        return self.player.previous_step()

    def next_code_line(self) -> bool:
        return self.code_cursor.next_line()

    def previous_code_line(self) -> bool:
        return self.code_cursor.previous_line()

    def execute_current_code_line(self) -> None:
        self.player.execute_current_code_line()

    def finish_algorithm(self) -> None:
        self.player.finish()

    # ==================================================================
    # GRAPH EDITING
    # ==================================================================
    def add_node(self, x: float, y: float, z: float = 0.0) -> Node:
        node = self.graph.add_node(x, y, z)
        self.help_text = f"Node {node.id} added."
        return node

    def add_edge(self, a_id: int, b_id: int, weight: float = 1) -> None:
        a, b = self._node(a_id), self._node(b_id)
        self.graph.add_edge(a, b, weight)
        self.help_text = "Edge added."

    def remove_node(self, node_id: int) -> None:
        node = self._node(node_id)
        if node is self.start_node:
            self.start_node = None
        if node is self.end_node:
            self.end_node = None
        if node is self.pending_node:
            self.pending_node = None
        self.graph.remove_node(node)
        self.help_text = f"Node {node.id} removed. Select another node to remove or change mode."

    def remove_edge(self, a_id: int, b_id: int) -> bool:
        edge = self.graph.edge_between(self._node(a_id), self._node(b_id))
        if edge is None:
            return False
        self.graph.remove_edge(edge)
        self.help_text = "Edge removed. Select another edge to remove or change mode."
        return True

    def reset_graph(self) -> None:
        """Drop every node and edge; ids start again from 0."""
        self.graph.clear()
        self._attach(Graph(renderer=self.renderer))
        self.start_node = None
        self.end_node = None
        self.pending_node = None
        self.code_cursor.rewind()
        self.metrics = None
        self.status = ""
        self.help_text = "Graph reset. Select a mode to begin."

    def generate(self, kind: str = "random", seed: Optional[int] = None) -> None:
        if kind not in ("random", "grid"):
            raise ValueError(f"Unknown graph kind: {kind}")
        self.reset_graph()
        if kind == "random":
            graph = Graph.generate_random(seed=seed, renderer=self.renderer)
            message = "Random graph generated."
        else:
            graph = Graph.generate_grid(seed=seed, renderer=self.renderer)
            message = "Grid graph generated."
        self._attach(graph)
        self.help_text = message
        logger.info("Session %s: %s (%r)", self.id, message, graph)

    # ==================================================================
    # MODES & SELECTION
    # ==================================================================
    def change_mode(self, mode: Union[str, Mode]) -> None:
        self.mode = Mode(mode)
        self.pending_node = None
        self.help_text = HELP_TEXT[self.mode]

    def select_node(self, node_id: int, weight: float = 1) -> None:
        """A node was picked in the scene; what that means depends on the mode."""
        node = self._node(node_id)
        mode = self.mode

        if mode is Mode.ADD_EDGE:
            if self.pending_node is not None and self.pending_node is not node:
                self.graph.add_edge(self.pending_node, node, weight)
                self.pending_node = None
                self.help_text = "Edge added."
            else:
                self.pending_node = node
                self.help_text = "Select the second node to connect."
        elif mode is Mode.REMOVE_NODE:
            self.remove_node(node_id)
        elif mode is Mode.REMOVE_EDGE:
            self.graph.remove_edges_of(node)
            self.help_text = (
                f"Edges connected to Node {node.id} removed. Select another node or change mode."
            )
        elif mode is Mode.SELECT_START:
            if self.start_node is not None:
                self.graph.highlight(self.start_node, NodeColor.UNVISITED)
            self.start_node = node
            self.graph.highlight(node, NodeColor.START)
            self.help_text = (
                f"Start node set to Node {node.id}. Select another node to change or change mode."
            )
        elif mode is Mode.SELECT_END:
            if self.end_node is not None:
                self.graph.highlight(self.end_node, NodeColor.UNVISITED)
            self.end_node = node
            self.graph.highlight(node, NodeColor.END)
            self.help_text = (
                f"End node set to Node {node.id}. Select another node to change or change mode."
            )
        elif mode in (Mode.NONE, Mode.ADD_NODE):
            pass

    def toggle_view(self, option: str, on: Optional[bool] = None) -> bool:
        """Flip (or set) a display toggle.  Returns its new value."""
        if option not in self.view:
            raise ValueError(f"Unknown view option: {option}")
        self.view[option] = (not self.view[option]) if on is None else bool(on)
        return self.view[option]

    # ==================================================================
    # VIEW
    # ==================================================================
    def to_dict(self) -> dict:
        step = self.player.current_step
        return {
            "session":      self.id,
            "mode":         self.mode.value,
            "mode_label":   self.mode.label,
            "status":       self.status,
            "help":         self.help_text,
            "algorithm":    self.algorithm.value if self.algorithm else None,
            "start":        self.start_node.id if self.start_node else None,
            "end":          self.end_node.id if self.end_node else None,
            "current_step": self.player.current_idx,
            "total_steps":  self.player.total_steps,
            "code_lines":   list(self.code_cursor.lines),
            "current_code_line": self.code_cursor.index,
            "step":         step.to_dict() if step else None,
            "view":         dict(self.view),
            "graph":        self.graph.to_dict(),
        }

    def close(self) -> None:
        self.graph.clear()

    # ------------------------------------------------------------------
    def _node(self, node_id: int) -> Node:
        node = self.graph.get_node(node_id)
        if node is None:
            raise UnknownNodeError(f"No node with id {node_id}")
        return node


# ---------------------------------------------------------------------------
# SessionStore — in-process registry keyed by session id
# ---------------------------------------------------------------------------
class SessionStore:
    """
    Sessions are kept in least-recently-used order.  One that has been
    idle for `idle_timeout` seconds is dropped on the next create(); when
    `max_sessions` are live, create() drops the least recently used one.
    """

    def __init__(
        self,
        renderer_factory=NullRenderer,
        max_sessions: int = 256,
        idle_timeout: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._sessions: "OrderedDict[str, Session]" = OrderedDict()
        self._last_seen: Dict[str, float] = {}
        self._renderer_factory = renderer_factory
        self.max_sessions = max_sessions
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._lock = threading.Lock()

    def create(self) -> Session:
        self.prune()
        with self._lock:
            while len(self._sessions) >= self.max_sessions:
                oldest = next(iter(self._sessions))
                self._drop_locked(oldest)
            session = Session(renderer=self._renderer_factory())
            self._sessions[session.id] = session
            self._last_seen[session.id] = self._clock()
        logger.info("Session %s created", session.id)
        return session

    def get(self, session_id: Optional[str]) -> Optional[Session]:
        if session_id is None:
            return None
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if self._clock() - self._last_seen[session_id] > self.idle_timeout:
                self._drop_locked(session_id)
                return None
            self._sessions.move_to_end(session_id)
            self._last_seen[session_id] = self._clock()
            return session

    def prune(self) -> int:
        """Drop every session idle for longer than `idle_timeout`.  Returns how many went."""
        now = self._clock()
        with self._lock:
            expired = [sid for sid, seen in self._last_seen.items()
                       if now - seen > self.idle_timeout]
            for sid in expired:
                self._drop_locked(sid)
        return len(expired)

    def drop(self, session_id: str) -> None:
        with self._lock:
            self._drop_locked(session_id)

    def _drop_locked(self, session_id: str) -> None:
        session = self._sessions.pop(session_id, None)
        self._last_seen.pop(session_id, None)
        if session is not None:
            with session.lock:
                session.close()
            logger.info("Session %s closed", session_id)

    def __len__(self) -> int:
        return len(self._sessions)
