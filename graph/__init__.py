"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge, NodeColor
    from graph import Renderer, NullRenderer
"""

from graph.node     import Node,  NodeColor
from graph.edge     import Edge
from graph.renderer import Renderer, NullRenderer
from graph.graph    import Graph

__all__ = [
    "Node",      "NodeColor",
    "Edge",
    "Renderer",  "NullRenderer",
    "Graph",
]
