"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra on the decrease-key-free PriorityQueue.

Yields a TraceEvent at:
  1. Distances initialised, start enqueued
  2. Minimum-distance node dequeued and finalised  →  VISITED
  3. Successful relaxation  →  distance updated, neighbour enqueued
  4. One event per hop while tracing the path back from the end node

Stale queue entries (a node dequeued after it was already finalised)
are skipped without an event.

Correctness note: Dijkstra requires non-negative weights.  Negative
weights are not checked and give undefined results.
"""

from typing import Dict, Generator, List, Optional

from graph import Graph, Node, NodeColor
from algorithms.priority_queue import PriorityQueue
from algorithms.step import TraceEvent, SearchResult


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "function Dijkstra(start):",                                    # 0
    "  for each node:",                                             # 1
    "    set distance to infinity",                                 # 2
    "    set previous node to null",                                # 3
    "  distance[start] = 0",                                        # 4
    "  create a priority queue Q",                                  # 5
    "  enqueue start into Q with priority 0",                       # 6
    "  while Q is not empty:",                                      # 7
    "    node = dequeue Q",                                         # 8
    "    for each neighbor of node:",                               # 9
    "      alt = distance[node] + edge_weight(node, neighbor)",     # 10
    "      if alt < distance[neighbor]:",                           # 11
    "        distance[neighbor] = alt",                             # 12
    "        previous[neighbor] = node",                            # 13
    "        enqueue neighbor into Q with priority alt",            # 14
    "  return distances, previous",                                 # 15
]

LINE_INIT   = 1
LINE_VISIT  = 7
LINE_UPDATE = 11
LINE_TRACE  = 13


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(
    graph: Graph,
    start: Node,
    end: Optional[Node] = None,
) -> Generator[TraceEvent, None, SearchResult]:
    """
    Args:
        graph : The graph (every node gets a distance entry).
        start : Source node.
        end   : Node whose path is traced after the main loop.  None skips tracing.

    Returns (via StopIteration.value):
        SearchResult with final distances and the start → end path.
    """

    INF = float("inf")

    distance: Dict[int, float] = {}
    previous: Dict[int, Node]  = {}
    order:    List[int]        = []
    queue: PriorityQueue[Node] = PriorityQueue()

    for node in graph.nodes.values():
        distance[node.id] = INF
        node.visited = False
    distance[start.id] = 0
    queue.enqueue(start, 0)
    yield TraceEvent("Initialized distances and priority queue.", LINE_INIT)

    # --- main loop ---
    while not queue.is_empty():
        current = queue.dequeue()
        if current.visited:
            continue                          # stale entry
        current.visited = True
        graph.highlight(current, NodeColor.VISITED)
        order.append(current.id)
        yield TraceEvent(f"Visiting Node {current.id}.", LINE_VISIT)

        for neighbour, edge in graph.neighbours(current):
            alt = distance[current.id] + edge.weight
            if alt < distance.get(neighbour.id, INF):
                distance[neighbour.id] = alt
                previous[neighbour.id] = current
                queue.enqueue(neighbour, alt)
                yield TraceEvent(
                    f"Updated distance of Node {neighbour.id} to {alt} via Node {current.id}.",
                    LINE_UPDATE,
                )

    # --- trace the path back from the end node ---
    path: List[int] = []
    if end is not None:
        path_node = end
        # the membership guard only matters for negative weights, which can loop the chain
        while path_node.id in previous and path_node.id not in path:
            graph.highlight(path_node, NodeColor.PATH)
            yield TraceEvent(f"Tracing back path via Node {path_node.id}.", LINE_TRACE)
            path.append(path_node.id)
            path_node = previous[path_node.id]
        if path or end is start:
            path.append(path_node.id)
            path.reverse()

    return SearchResult(
        visit_order=order,
        distances=distance,
        previous={nid: n.id for nid, n in previous.items()},
        path=path,
        found=end is not None and end.visited,
    )
