"""
Graph projection and presentation.

    - presentation: label, tooltip and color per node
    - transform: RawGraph -> RenderGraph
    - layout: hierarchical layout options for vis.js
    - detail: detail panel content for a selected node
    - visualize: HTML and DOT exports
"""

from .detail import DetailSection, DetailView, render_detail
from .layout import LayoutOptions
from .presentation import node_color, node_label, node_tooltip
from .transform import transform

__all__ = [
    "DetailSection",
    "DetailView",
    "LayoutOptions",
    "node_color",
    "node_label",
    "node_tooltip",
    "render_detail",
    "transform",
]
