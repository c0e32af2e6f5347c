"""
graph.py — Graph Container & Generators
========================================
Single source of truth for the graph.  The algorithms, the playback
engine and the renderer all talk to this object.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / get)
  2. Adjacency queries                      (neighbours, edge_between, …)
  3. Colour changes routed to the renderer  (highlight)
  4. Graph-generation factory methods       (random cube, grid lattice)
  5. Reset helpers                          (wipe traversal state, keep structure)

Design decisions:
  - Nodes are stored in a dict keyed by integer id, in creation order.
    Ids come from a counter that only grows, so an id is never handed out
    twice even after removals.
  - Adjacency lives on the nodes themselves (`node.edges`) in insertion
    order; DFS visitation order depends on it.
  - The renderer is told about every structural change so the scene
    never drifts from the model.
"""

import random
from typing import Dict, List, Optional, Tuple

from graph.node import Node, NodeColor
from graph.edge import Edge
from graph.renderer import Renderer, NullRenderer


class Graph:
    """
    Attributes:
        nodes    : {node_id: Node}
        edges    : {edge_id: Edge}
        renderer : Rendering collaborator notified of every visual change.
    """

    def __init__(self, renderer: Optional[Renderer] = None):
        self.nodes:    Dict[int, Node] = {}
        self.edges:    Dict[str, Edge] = {}
        self.renderer: Renderer        = renderer or NullRenderer()
        self._next_id: int             = 0

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Node:
        node = Node(self._next_id, x, y, z)
        self._next_id += 1
        self.nodes[node.id] = node
        self.renderer.create_visual_representation(node)
        return node

    def remove_node(self, node: Node) -> None:
        if node.id not in self.nodes:
            return
        for edge in list(node.edges):
            self.remove_edge(edge)
        del self.nodes[node.id]
        self.renderer.remove_visual_representation(node)

    def get_node(self, node_id: int) -> Optional[Node]:
        return self.nodes.get(node_id)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, node1: Node, node2: Node, weight: float = 1) -> Edge:
        """Connect two nodes.  An existing edge between them (either order) is returned as-is."""
        existing = self.edge_between(node1, node2)
        if existing is not None:
            return existing
        edge = Edge(node1, node2, weight)
        self.edges[edge.id] = edge
        node1.edges.append(edge)
        if node2 is not node1:
            node2.edges.append(edge)
        self.renderer.create_visual_representation(edge)
        return edge

    def remove_edge(self, edge: Edge) -> None:
        if edge.id not in self.edges:
            return
        edge.node1.edges[:] = [e for e in edge.node1.edges if e is not edge]
        edge.node2.edges[:] = [e for e in edge.node2.edges if e is not edge]
        del self.edges[edge.id]
        self.renderer.remove_visual_representation(edge)

    def remove_edges_of(self, node: Node) -> int:
        """Remove every edge incident to `node`.  Returns how many went."""
        incident = list(node.edges)
        for edge in incident:
            self.remove_edge(edge)
        return len(incident)

    def edge_between(self, a: Node, b: Node) -> Optional[Edge]:
        for edge in a.edges:
            if edge.connects(a, b):
                return edge
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node: Node) -> List[Tuple[Node, Edge]]:
        """Return [(neighbour, edge)] in edge insertion order."""
        return [(edge.other_end(node), edge) for edge in node.edges]

    def degree(self, node: Node) -> int:
        return len(node.edges)

    # ==================================================================
    # COLOUR
    # ==================================================================
    def highlight(self, node: Node, color: int) -> None:
        node.color = color
        self.renderer.highlight(node, color)

    # ==================================================================
    # RESET (keep structure, wipe traversal state)
    # ==================================================================
    def reset_traversal_state(self) -> None:
        for node in self.nodes.values():
            node.visited = False
            self.highlight(node, NodeColor.UNVISITED)

    def clear(self) -> None:
        for edge in list(self.edges.values()):
            self.remove_edge(edge)
        for node in list(self.nodes.values()):
            self.remove_node(node)

    # ==================================================================
    # VIEW (JSON-ready, for the HTTP layer)
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges.values()],
        }

    # ==================================================================
    # GENERATORS — Factory class-methods
    # ==================================================================

    # ---------- Random Graph ----------
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 10,
        edge_probability: float = 0.3,
        weight_range: Tuple[int, int] = (1, 10),
        extent: float = 100.0,
        seed: Optional[int] = None,
        renderer: Optional[Renderer] = None,
    ) -> "Graph":
        """
        Erdős–Rényi style random graph scattered through a cube of
        half-width `extent` centred on the origin.
        Each possible edge is included with probability `edge_probability`.
        """
        rng = random.Random(seed)
        g = cls(renderer=renderer)

        nodes = [
            g.add_node(
                rng.uniform(-extent, extent),
                rng.uniform(-extent, extent),
                rng.uniform(-extent, extent),
            )
            for _ in range(num_nodes)
        ]

        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < edge_probability:
                    g.add_edge(nodes[i], nodes[j], rng.randint(*weight_range))

        return g

    # ---------- Grid Graph ----------
    @classmethod
    def generate_grid(
        cls,
        grid_size: int = 4,
        spacing: float = 30.0,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
        renderer: Optional[Renderer] = None,
    ) -> "Graph":
        """
        (grid_size + 1)² lattice lying in the y = 0 plane, centred on the
        origin.  Edges connect 4-neighbours with random integer weights.
        """
        rng = random.Random(seed)
        g = cls(renderer=renderer)

        half = grid_size * spacing / 2
        lattice: List[List[Node]] = []
        for ix in range(grid_size + 1):
            column = []
            for iz in range(grid_size + 1):
                column.append(g.add_node(-half + ix * spacing, 0.0, -half + iz * spacing))
            lattice.append(column)

        for ix in range(grid_size + 1):
            for iz in range(grid_size + 1):
                if ix < grid_size:
                    g.add_edge(lattice[ix][iz], lattice[ix + 1][iz], rng.randint(*weight_range))
                if iz < grid_size:
                    g.add_edge(lattice[ix][iz], lattice[ix][iz + 1], rng.randint(*weight_range))

        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[int]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
