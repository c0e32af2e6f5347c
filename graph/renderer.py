"""
renderer.py — Rendering collaborator contract
==============================================
The graph and the playback engine only ever talk to the scene through
these three calls.  Anything that implements them (an SVG scene, a test
spy, a 3-D front-end) can be plugged into a Graph.
"""

from typing import Protocol, Union

from graph.node import Node
from graph.edge import Edge


class Renderer(Protocol):
    def highlight(self, node: Node, color: int) -> None: ...

    def create_visual_representation(self, item: Union[Node, Edge]) -> None: ...

    def remove_visual_representation(self, item: Union[Node, Edge]) -> None: ...


class NullRenderer:
    """Headless renderer: accepts every call and draws nothing."""

    def highlight(self, node: Node, color: int) -> None:
        pass

    def create_visual_representation(self, item: Union[Node, Edge]) -> None:
        pass

    def remove_visual_representation(self, item: Union[Node, Edge]) -> None:
        pass
