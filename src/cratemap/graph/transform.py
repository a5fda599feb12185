"""
Graph Transformer.

Projects the analyzer's tree onto the flat node and edge lists the rendering
surface draws.

Ordering is part of the contract: nodes come out in the order the raw graph
lists them, and edges are emitted node by node in that same order, one per
``children`` entry in its original order. Children that name a node not in
the graph are skipped. Duplicate edges and self-loops are kept as given.
"""

import logging
from typing import List

from ..core.types import RawGraph, RawNode, RenderEdge, RenderGraph, RenderNode
from .presentation import node_color, node_label, node_tooltip

logger = logging.getLogger(__name__)


def to_render_node(node: RawNode) -> RenderNode:
    return RenderNode(
        id=node.id,
        label=node_label(node),
        tooltip=node_tooltip(node),
        color=node_color(node.kind),
        raw=node,
    )


def transform(graph: RawGraph) -> RenderGraph:
    """
    Convert a raw graph into a render graph.

    Pure and deterministic. Never fails on dangling references: an edge to a
    missing child is dropped, and a missing root is only reported.

    Args:
        graph (RawGraph): The fetched graph.

    Returns:
        RenderGraph: One render node per raw node, one edge per resolvable
        parent → child reference.
    """
    known_ids = graph.node_ids()

    if graph.root not in known_ids:
        logger.warning(f"Root node {graph.root} is not part of the graph")

    nodes = [to_render_node(node) for node in graph.nodes]

    edges: List[RenderEdge] = []
    dropped = 0
    for node in graph.nodes:
        for child_id in node.children:
            if child_id not in known_ids:
                logger.debug(f"Dropping edge {node.id} -> {child_id}: no such node")
                dropped += 1
                continue
            edges.append(RenderEdge(from_id=node.id, to_id=child_id))

    if dropped:
        logger.debug(f"Dropped {dropped} dangling edge(s)")

    return RenderGraph(nodes=tuple(nodes), edges=tuple(edges))
