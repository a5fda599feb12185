"""
Viewer session.

``GraphSession`` is the one context object the interaction handlers share.
It holds exactly two pieces of mutable state, the current graph and the
current selection, and keeps them consistent: loading a new graph replaces
the old one wholesale and resets the selection. The detail view is derived
from the selection: the session listens to its controller and re-renders the
panel content on every transition.
"""

import logging
from typing import Optional

from ..core.selection import Selected, Selection, SelectionController
from ..core.types import RawGraph, RenderGraph, RenderNode
from ..graph.detail import DetailView, render_detail
from ..graph.layout import LayoutOptions
from ..graph.transform import transform

logger = logging.getLogger(__name__)


class NodeNotFoundError(LookupError):
    """Raised when picking a node id that the current graph does not contain."""

    def __init__(self, node_id: int):
        super().__init__(f"Node {node_id} is not in the current graph")
        self.node_id = node_id


class GraphSession:
    """
    Current graph and current selection for one loaded view.

    Not thread-safe; all calls are expected from a single event-processing
    thread.
    """

    def __init__(
        self,
        layout: Optional[LayoutOptions] = None,
        selection: Optional[SelectionController] = None,
    ):
        self.layout = layout or LayoutOptions()
        self.selection = selection or SelectionController()
        self._graph: Optional[RenderGraph] = None
        self._detail: Optional[DetailView] = None
        self.last_error: Optional[str] = None
        self.selection.subscribe(self._on_selection)

    @property
    def graph(self) -> Optional[RenderGraph]:
        return self._graph

    @property
    def is_loaded(self) -> bool:
        return self._graph is not None

    def load(self, raw_graph: RawGraph) -> RenderGraph:
        """Replace the current graph and drop any selection."""
        self._graph = transform(raw_graph)
        self.last_error = None
        self.selection.reload()
        logger.info(
            f"Graph loaded with {self._graph.node_count} nodes and {self._graph.edge_count} edges"
        )
        return self._graph

    def record_error(self, message: str) -> None:
        """Remember a failed load. The current graph, if any, stays in place."""
        self.last_error = message

    def pick(self, node_id: int) -> DetailView:
        """
        Select a node and return what the detail panel should show.

        Raises:
            NodeNotFoundError: If no graph is loaded or it has no such node.
        """
        self._require_node(node_id)
        self.selection.pick(node_id)
        return self._detail

    def dismiss(self) -> None:
        self.selection.dismiss()

    def selected_node(self) -> Optional[RenderNode]:
        node_id = self.selection.selected_id
        if node_id is None or self._graph is None:
            return None
        return self._graph.get_node(node_id)

    def current_detail(self) -> Optional[DetailView]:
        """Detail view for the current selection, or None while idle."""
        return self._detail

    def _on_selection(self, state: Selection) -> None:
        node = None
        if isinstance(state, Selected) and self._graph is not None:
            node = self._graph.get_node(state.node_id)
        self._detail = render_detail(node) if node is not None else None

    def _require_node(self, node_id: int) -> RenderNode:
        node = self._graph.get_node(node_id) if self._graph is not None else None
        if node is None:
            raise NodeNotFoundError(node_id)
        return node
