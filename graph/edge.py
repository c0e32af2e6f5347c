"""
edge.py — Graph Edge
====================
Undirected weighted connection between two nodes.

Design decisions:
  - `node1` / `node2` are Node references.  Their order is whatever the
    caller passed to `Graph.add_edge` and carries no meaning; traversal
    always asks `other_end(current)`.
  - Weight defaults to 1.  Negative weights are accepted but Dijkstra and
    A* give undefined results on them.
"""

from typing import Optional

from graph.node import Node


class Edge:
    """
    Attributes:
        id     : "a-b" string built from the endpoint ids at creation.
        node1  : First endpoint.
        node2  : Second endpoint.
        weight : Numeric cost (default 1).
    """

    __slots__ = ("id", "node1", "node2", "weight")

    def __init__(self, node1: Node, node2: Node, weight: float = 1, edge_id: Optional[str] = None):
        self.id:     str   = edge_id or f"{node1.id}-{node2.id}"
        self.node1:  Node  = node1
        self.node2:  Node  = node2
        self.weight: float = weight

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def connects(self, a: Node, b: Node) -> bool:
        """True if this edge links a ↔ b in either order."""
        return (self.node1 is a and self.node2 is b) or (self.node1 is b and self.node2 is a)

    def other_end(self, node: Node) -> Node:
        """The endpoint that is not `node` (a self-loop returns `node`)."""
        return self.node2 if self.node1 is node else self.node1

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "node1":  self.node1.id,
            "node2":  self.node2.id,
            "weight": self.weight,
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.node1.id} ↔ {self.node2.id}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
