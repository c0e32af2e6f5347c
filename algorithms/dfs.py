"""
dfs.py — Depth-First Search
=============================
Generator-based DFS.  Walks exactly like the textbook recursive version
but keeps its own stack of edge iterators, so deep graphs never hit
Python's recursion limit.

Yields a TraceEvent at:
  1. A node is marked VISITED
  2. An unvisited neighbour is about to be explored (before descending)

Neighbours are explored in the order edges were added to the node.
"""

from typing import Dict, Generator, Iterator, List, Optional, Tuple

from graph import Graph, Node, NodeColor, Edge
from algorithms.step import TraceEvent, SearchResult


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "function DFS(node):",                      # 0
    "  mark node as visited",                   # 1
    "  for each neighbor of node:",             # 2
    "    if neighbor is not visited:",          # 3
    "      DFS(neighbor)",                      # 4
]

LINE_VISIT   = 1
LINE_EXPLORE = 3


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(
    graph: Graph,
    start: Node,
    end: Optional[Node] = None,
) -> Generator[TraceEvent, None, SearchResult]:
    """Depth-first walk from `start`.  `end` is ignored."""

    order: List[int] = []
    parent: Dict[int, int] = {}

    def visit(node: Node):
        node.visited = True
        graph.highlight(node, NodeColor.DEPTH_VISITED)
        order.append(node.id)
        return TraceEvent(f"Visited Node {node.id}.", LINE_VISIT)

    # each frame: (node, iterator over a copy of its incident edges)
    stack: List[Tuple[Node, Iterator[Edge]]] = [(start, iter(list(start.edges)))]
    yield visit(start)

    while stack:
        node, edges = stack[-1]
        edge = next(edges, None)
        if edge is None:
            stack.pop()
            continue

        neighbour = edge.other_end(node)
        if neighbour.visited:
            continue

        yield TraceEvent(
            f"Exploring neighbor Node {neighbour.id} of Node {node.id}.", LINE_EXPLORE
        )
        parent[neighbour.id] = node.id
        stack.append((neighbour, iter(list(neighbour.edges))))
        yield visit(neighbour)

    return SearchResult(visit_order=order, previous=parent)
