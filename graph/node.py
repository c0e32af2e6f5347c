from enum import IntEnum
from typing import List, Tuple, TYPE_CHECKING
import math

if TYPE_CHECKING:
    from graph.edge import Edge


# ---------------------------------------------------------------------------
# Node Colour palette — RGB ints handed straight to the renderer
# ---------------------------------------------------------------------------
class NodeColor(IntEnum):
    UNVISITED     = 0xFFFFFF   # white, untouched
    VISITED       = 0x00FF00   # green, BFS / Dijkstra / A* visited
    DEPTH_VISITED = 0x0000FF   # blue, DFS visited
    PATH          = 0xFF0000   # red, traced shortest path
    START         = 0x00FF00   # selection highlight for the start node
    END           = 0xFF0000   # selection highlight for the end node


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Stable identity, a 3-D position and the two fields the algorithms touch.

    Attributes:
        id       : Integer assigned by the Graph at creation, never reused.
        x, y, z  : Scene coordinates. Opaque to the algorithms except A*'s heuristic.
        visited  : Traversal flag.
        color    : RGB int currently shown for this node.
        edges    : Incident edges in insertion order (adjacency for undirected traversal).
    """

    __slots__ = ("id", "x", "y", "z", "visited", "color", "edges")

    def __init__(self, node_id: int, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.id: int            = node_id
        self.x: float           = x
        self.y: float           = y
        self.z: float           = z
        self.visited: bool      = False
        self.color: int         = NodeColor.UNVISITED
        self.edges: List["Edge"] = []

    # ------------------------------------------------------------------
    # Position
    # ------------------------------------------------------------------
    @property
    def position(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def distance_to(self, other: "Node") -> float:
        """Euclidean distance in 3-D — the A* heuristic."""
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":      self.id,
            "x":       self.x,
            "y":       self.y,
            "z":       self.z,
            "visited": self.visited,
            "color":   f"#{int(self.color):06x}",
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return (
            f"Node(id={self.id}, visited={self.visited}, color=#{int(self.color):06x}, "
            f"pos=({self.x:.1f},{self.y:.1f},{self.z:.1f}))"
        )

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
