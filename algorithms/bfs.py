"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS over the live graph.  Mutates `visited` / colour on
the nodes it reaches and yields a TraceEvent at every event:
  1. Start node marked and enqueued
  2. A node is dequeued
  3. An unvisited neighbour is discovered (marked, enqueued)

Pseudocode lines are 0-indexed and match the PSEUDOCODE constant
exported alongside the generator so the UI can highlight them live.
"""

from collections import deque
from typing import Deque, Dict, Generator, List, Optional

from graph import Graph, Node, NodeColor
from algorithms.step import TraceEvent, SearchResult


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = code_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "function BFS(start):",                     # 0
    "  create a queue Q",                       # 1
    "  mark start as visited",                  # 2
    "  enqueue start into Q",                   # 3
    "  while Q is not empty:",                  # 4
    "    node = dequeue Q",                     # 5
    "    for each neighbor of node:",           # 6
    "      if neighbor is not visited:",        # 7
    "        mark neighbor as visited",         # 8
    "        enqueue neighbor into Q",          # 9
]

LINE_START     = 1
LINE_VISIT     = 4
LINE_DISCOVER  = 7


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(
    graph: Graph,
    start: Node,
    end: Optional[Node] = None,
) -> Generator[TraceEvent, None, SearchResult]:
    """
    Breadth-first walk of everything reachable from `start`.  `end` is
    accepted for a uniform signature and ignored.

    Nodes already marked visited are treated as seen; the caller resets
    traversal state before a run.
    """

    queue: Deque[Node] = deque([start])
    parent: Dict[int, int] = {}
    order: List[int] = [start.id]

    start.visited = True
    graph.highlight(start, NodeColor.VISITED)
    yield TraceEvent(f"Starting BFS from Node {start.id}.", LINE_START)

    while queue:
        current = queue.popleft()
        yield TraceEvent(f"Visiting Node {current.id}.", LINE_VISIT)

        for neighbour, _edge in graph.neighbours(current):
            if neighbour.visited:
                continue
            neighbour.visited = True
            graph.highlight(neighbour, NodeColor.VISITED)
            parent[neighbour.id] = current.id
            order.append(neighbour.id)
            queue.append(neighbour)
            yield TraceEvent(
                f"Discovered Node {neighbour.id} from Node {current.id}.", LINE_DISCOVER
            )

    return SearchResult(visit_order=order, previous=parent)
