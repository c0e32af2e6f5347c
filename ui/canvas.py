"""
canvas.py — SVG Scene Renderer
================================
Retained-mode renderer for the 3-D graph scene, drawn as SVG.

CanvasRenderer implements the graph's Renderer contract:
  • create_visual_representation(node | edge)  – add it to the scene
  • remove_visual_representation(node | edge)  – drop it
  • highlight(node, colour)                    – recolour a node

and `to_svg()` paints whatever the scene currently holds.  Colours come
from highlight() calls only, exactly like a material colour on a mesh;
the renderer never reads algorithm state off the nodes.

Projection: orthographic view from a camera raised above the +z side of
the scene and looking at the origin (pitch ≈ 26.6°).  Nodes are painted
far-to-near so closer spheres overlap farther ones.
"""

import math
from typing import Dict, List, Optional, Tuple, Union

from graph import Node, Edge, NodeColor


# ---------------------------------------------------------------------------
# Visual Config — dimensions, camera, colours, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 600
    bg:     str = "#f0f0f0"

    # camera
    scale:  float = 2.2                          # pixels per scene unit
    pitch:  float = math.atan2(200, 400)         # camera at (0, 200, 400)

    # node
    node_radius:        int = 11
    node_stroke:        str = "#555555"
    node_stroke_width:  int = 1
    node_label_color:   str = "#000000"
    node_label_size:    int = 12

    # edge
    edge_color:         str = "#000000"
    edge_width:         int = 1
    edge_weight_color:  str = "#333333"
    edge_weight_size:   int = 11
    show_weights:       bool = False

    # ground grid
    show_grid:          bool = True
    grid_extent:        int = 200
    grid_divisions:     int = 20
    grid_color:         str = "#d0d0d0"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Projection helpers
# ---------------------------------------------------------------------------
def project(x: float, y: float, z: float, config: CanvasConfig = CONFIG) -> Tuple[float, float]:
    """Scene → SVG pixel coordinates."""
    up = y * math.cos(config.pitch) - z * math.sin(config.pitch)
    return (
        config.width / 2 + x * config.scale,
        config.height / 2 - up * config.scale,
    )


def depth(x: float, y: float, z: float, config: CanvasConfig = CONFIG) -> float:
    """Larger = closer to the camera."""
    return z * math.cos(config.pitch) + y * math.sin(config.pitch)


def unproject_to_ground(sx: float, sy: float, config: CanvasConfig = CONFIG) -> Tuple[float, float, float]:
    """SVG pixel → point on the y = 0 plane under it (used for click-to-add)."""
    x = (sx - config.width / 2) / config.scale
    up = (config.height / 2 - sy) / config.scale
    z = -up / math.sin(config.pitch)
    return (x, 0.0, z)


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------
class CanvasRenderer:
    """
    Attributes:
        nodes  : {node_id: Node}   nodes currently in the scene
        edges  : {edge_id: Edge}   edges currently in the scene
        colors : {node_id: int}    last colour each node was highlighted with
    """

    def __init__(self, config: Optional[CanvasConfig] = None):
        self.config = config or CanvasConfig()
        self.nodes:  Dict[int, Node] = {}
        self.edges:  Dict[str, Edge] = {}
        self.colors: Dict[int, int]  = {}

    # -- Renderer contract --
    def create_visual_representation(self, item: Union[Node, Edge]) -> None:
        if isinstance(item, Node):
            self.nodes[item.id] = item
            self.colors[item.id] = int(item.color)
        else:
            self.edges[item.id] = item

    def remove_visual_representation(self, item: Union[Node, Edge]) -> None:
        if isinstance(item, Node):
            self.nodes.pop(item.id, None)
            self.colors.pop(item.id, None)
        else:
            self.edges.pop(item.id, None)

    def highlight(self, node: Node, color: int) -> None:
        if node.id in self.nodes:
            self.colors[node.id] = int(color)

    # -- painting --
    def color_of(self, node_id: int) -> Optional[int]:
        return self.colors.get(node_id)

    def to_svg(self, show_weights: Optional[bool] = None, show_grid: Optional[bool] = None) -> str:
        """Paint the scene.  The toggles override the config for this one paint."""
        return render_canvas(list(self.nodes.values()), list(self.edges.values()),
                             self.colors, self.config,
                             show_weights=show_weights, show_grid=show_grid)


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    nodes: List[Node],
    edges: List[Edge],
    colors: Dict[int, int],
    config: CanvasConfig = CONFIG,
    show_weights: Optional[bool] = None,
    show_grid: Optional[bool] = None,
) -> str:
    """Returns an SVG string for the given scene contents."""
    if show_weights is None:
        show_weights = config.show_weights
    if show_grid is None:
        show_grid = config.show_grid

    svg_parts = [
        f'<svg id="scene" width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if show_grid:
        svg_parts.append(_render_grid(config))

    # -- edges (draw first so nodes sit on top) --
    for edge in edges:
        svg_parts.append(_render_edge(edge, config, show_weights))

    # -- nodes, far to near --
    for node in sorted(nodes, key=lambda n: depth(n.x, n.y, n.z, config)):
        color = colors.get(node.id, int(NodeColor.UNVISITED))
        svg_parts.append(_render_node(node, color, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(node: Node, color: int, config: CanvasConfig) -> str:
    cx, cy = project(node.x, node.y, node.z, config)
    r = config.node_radius
    return "\n".join([
        f'<g class="node" data-id="{node.id}">',
        f'  <circle cx="{cx:.1f}" cy="{cy:.1f}" r="{r}" fill="#{color:06x}" '
        f'stroke="{config.node_stroke}" stroke-width="{config.node_stroke_width}"/>',
        f'  <text x="{cx:.1f}" y="{cy - r - 4:.1f}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-family="Arial, sans-serif" '
        f'font-weight="bold" fill="{config.node_label_color}">{node.id}</text>',
        '</g>',
    ])


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(edge: Edge, config: CanvasConfig, show_weights: bool = False) -> str:
    x1, y1 = project(edge.node1.x, edge.node1.y, edge.node1.z, config)
    x2, y2 = project(edge.node2.x, edge.node2.y, edge.node2.z, config)
    parts = [
        f'<g class="edge" data-id="{edge.id}" data-node1="{edge.node1.id}" data-node2="{edge.node2.id}">',
        f'  <line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
        f'stroke="{config.edge_color}" stroke-width="{config.edge_width}"/>',
    ]
    if show_weights:
        mx, my = (x1 + x2) / 2, (y1 + y2) / 2 - 5
        parts.append(
            f'  <text class="weight" x="{mx:.1f}" y="{my:.1f}" text-anchor="middle" '
            f'font-size="{config.edge_weight_size}" fill="{config.edge_weight_color}">{edge.weight:g}</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Ground grid
# ---------------------------------------------------------------------------
def _render_grid(config: CanvasConfig) -> str:
    half = config.grid_extent / 2
    step = config.grid_extent / config.grid_divisions
    lines = ['<g class="grid">']
    for i in range(config.grid_divisions + 1):
        t = -half + i * step
        for (ax, az), (bx, bz) in (((t, -half), (t, half)), ((-half, t), (half, t))):
            x1, y1 = project(ax, 0.0, az, config)
            x2, y2 = project(bx, 0.0, bz, config)
            lines.append(
                f'  <line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
                f'stroke="{config.grid_color}" stroke-width="1"/>'
            )
    lines.append('</g>')
    return "\n".join(lines)
