"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the tool knows about.

    from algorithms import AlgorithmKind, REGISTRY, get_algorithm

REGISTRY maps each AlgorithmKind to an AlgoInfo card.  The engine and
the UI both consume it: the engine runs `info.fn`, the pseudo-code panel
shows `info.pseudocode`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from algorithms.bfs      import bfs      as _bfs,      PSEUDOCODE as _bfs_pc
from algorithms.dfs      import dfs      as _dfs,      PSEUDOCODE as _dfs_pc
from algorithms.dijkstra import dijkstra as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.astar    import astar    as _astar,    PSEUDOCODE as _ast_pc


class AlgorithmKind(str, Enum):
    BFS      = "bfs"
    DFS      = "dfs"
    DIJKSTRA = "dijkstra"
    ASTAR    = "astar"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    kind:        AlgorithmKind
    label:       str                 # human label, e.g. "Breadth-First Search"
    fn:          Callable            # the generator function
    pseudocode:  List[str]           # lines for the code panel
    needs_end:   bool = False        # refuse to run without an end node?
    done_message: str = ""           # status text once the run has been recorded


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[AlgorithmKind, AlgoInfo] = {
    AlgorithmKind.BFS: AlgoInfo(
        kind=AlgorithmKind.BFS, label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        done_message="BFS completed.",
    ),
    AlgorithmKind.DFS: AlgoInfo(
        kind=AlgorithmKind.DFS, label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        done_message="DFS completed.",
    ),
    AlgorithmKind.DIJKSTRA: AlgoInfo(
        kind=AlgorithmKind.DIJKSTRA, label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        needs_end=True, done_message="Dijkstra's Algorithm completed.",
    ),
    AlgorithmKind.ASTAR: AlgoInfo(
        kind=AlgorithmKind.ASTAR, label="A* Search", fn=_astar, pseudocode=_ast_pc,
        needs_end=True, done_message="A* Search completed.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def parse_kind(kind: Union[str, AlgorithmKind, None]) -> Optional[AlgorithmKind]:
    """AlgorithmKind for a kind or its wire string; None if unknown."""
    if isinstance(kind, AlgorithmKind):
        return kind
    try:
        return AlgorithmKind(kind)
    except ValueError:
        return None


def get_algorithm(kind: Union[str, AlgorithmKind, None]) -> Optional[AlgoInfo]:
    """Return AlgoInfo by kind, or None."""
    parsed = parse_kind(kind)
    return REGISTRY[parsed] if parsed is not None else None


def get_algorithm_code_lines(kind: Union[str, AlgorithmKind, None]) -> List[str]:
    """The static pseudo-code listing for `kind`; empty for an unknown kind."""
    info = get_algorithm(kind)
    return list(info.pseudocode) if info else []


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgorithmKind",
    "AlgoInfo",
    "REGISTRY",
    "parse_kind",
    "get_algorithm",
    "get_algorithm_code_lines",
    "list_algorithms",
]
