import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from graph import Graph
from engine import Session


class SpyRenderer:
    """Records every renderer call so tests can assert on them."""

    def __init__(self):
        self.calls = []
        self.colors = {}

    def highlight(self, node, color):
        self.calls.append(("highlight", node.id, int(color)))
        self.colors[node.id] = int(color)

    def create_visual_representation(self, item):
        self.calls.append(("create", item.id))

    def remove_visual_representation(self, item):
        self.calls.append(("remove", item.id))


@pytest.fixture
def spy():
    return SpyRenderer()


@pytest.fixture
def triangle():
    """A–B (1), B–C (2), A–C (4).  Shortest A→C is A, B, C with cost 3."""
    g = Graph()
    a = g.add_node(0, 0, 0)
    b = g.add_node(1, 0, 0)
    c = g.add_node(2, 0, 0)
    g.add_edge(a, b, 1)
    g.add_edge(b, c, 2)
    g.add_edge(a, c, 4)
    return g


@pytest.fixture
def path_graph():
    """0 – 1 – 2 – 3 in a line."""
    g = Graph()
    nodes = [g.add_node(i, 0, 0) for i in range(4)]
    for a, b in zip(nodes, nodes[1:]):
        g.add_edge(a, b, 1)
    return g


@pytest.fixture
def session(triangle):
    return Session(graph=triangle)
