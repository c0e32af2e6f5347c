"""
astar.py — A* Search
=====================
Generator-based A* guided by the straight-line (Euclidean) distance
between node positions.

The heuristic is admissible only when every edge weight is at least the
distance between its endpoints.  Weights below that are accepted, but
the path A* returns may then be suboptimal.

Yields the same event types as Dijkstra, plus:
  • "Goal reached."  the moment the goal is finalised (the run ends there)
  • "No path found to Node N."  when the open set runs dry first
"""

import math
from typing import Dict, Generator, List, Optional

from graph import Graph, Node, NodeColor
from algorithms.priority_queue import PriorityQueue
from algorithms.step import TraceEvent, SearchResult


def heuristic(a: Node, b: Node) -> float:
    return a.distance_to(b)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "function A*(start, goal):",                                                # 0
    "  openSet = {start}",                                                      # 1
    "  cameFrom = empty map",                                                   # 2
    "  gScore[start] = 0",                                                      # 3
    "  fScore[start] = heuristic(start, goal)",                                 # 4
    "  while openSet is not empty:",                                            # 5
    "    current = node in openSet with lowest fScore",                         # 6
    "    if current == goal:",                                                  # 7
    "      reconstruct path",                                                   # 8
    "      return",                                                             # 9
    "    remove current from openSet",                                          # 10
    "    for each neighbor of current:",                                        # 11
    "      tentative_gScore = gScore[current] + edge_weight(current, neighbor)",  # 12
    "      if tentative_gScore < gScore[neighbor]:",                            # 13
    "        cameFrom[neighbor] = current",                                     # 14
    "        gScore[neighbor] = tentative_gScore",                              # 15
    "        fScore[neighbor] = gScore[neighbor] + heuristic(neighbor, goal)",  # 16
    "        if neighbor not in openSet:",                                      # 17
    "          add neighbor to openSet",                                        # 18
    "  return failure",                                                         # 19
]

LINE_INIT    = 1
LINE_VISIT   = 7
LINE_GOAL    = 9
LINE_TRACE   = 10
LINE_UPDATE  = 13
LINE_FAILURE = 19


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def astar(
    graph: Graph,
    start: Node,
    end: Optional[Node] = None,
) -> Generator[TraceEvent, None, SearchResult]:
    """
    Args:
        graph : The graph.
        start : Start node.
        end   : Goal node (required — the caller validates).
    """

    goal = end
    INF  = math.inf

    came_from: Dict[int, Node]  = {}
    g_score:   Dict[int, float] = {}
    f_score:   Dict[int, float] = {}
    order:     List[int]        = []
    open_set: PriorityQueue[Node] = PriorityQueue()

    for node in graph.nodes.values():
        g_score[node.id] = INF
        f_score[node.id] = INF
        node.visited = False
    g_score[start.id] = 0
    f_score[start.id] = heuristic(start, goal)
    open_set.enqueue(start, f_score[start.id])
    yield TraceEvent("Initialized scores and open set.", LINE_INIT)

    # --- main loop ---
    while not open_set.is_empty():
        current = open_set.dequeue()
        if current.visited:
            continue                          # stale entry
        current.visited = True
        graph.highlight(current, NodeColor.VISITED)
        order.append(current.id)
        yield TraceEvent(f"Visiting Node {current.id}.", LINE_VISIT)

        if current is goal:
            yield TraceEvent("Goal reached.", LINE_GOAL)
            path: List[int] = []
            path_node = goal
            while path_node.id in came_from and path_node.id not in path:
                graph.highlight(path_node, NodeColor.PATH)
                yield TraceEvent(f"Tracing back path via Node {path_node.id}.", LINE_TRACE)
                path.append(path_node.id)
                path_node = came_from[path_node.id]
            path.append(path_node.id)
            path.reverse()
            return SearchResult(
                visit_order=order,
                distances=g_score,
                previous={nid: n.id for nid, n in came_from.items()},
                path=path,
                found=True,
            )

        for neighbour, edge in graph.neighbours(current):
            tentative_g = g_score[current.id] + edge.weight
            if tentative_g < g_score.get(neighbour.id, INF):
                came_from[neighbour.id] = current
                g_score[neighbour.id] = tentative_g
                f_score[neighbour.id] = tentative_g + heuristic(neighbour, goal)
                open_set.enqueue(neighbour, f_score[neighbour.id])
                yield TraceEvent(f"Updated scores for Node {neighbour.id}.", LINE_UPDATE)

    yield TraceEvent(f"No path found to Node {goal.id}.", LINE_FAILURE)
    return SearchResult(
        visit_order=order,
        distances=g_score,
        previous={nid: n.id for nid, n in came_from.items()},
        found=False,
    )
