"""
Core type definitions for cratemap.

Two graph shapes live here:

- ``RawGraph``/``RawNode``: the tree exactly as the analyzer sends it.
- ``RenderGraph``/``RenderNode``/``RenderEdge``: the node/edge projection
  handed to the rendering surface. It is rebuilt from scratch whenever the raw
  graph changes and is never mutated.
"""

from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .kinds import DecodedKind, NodeKindTag, UnknownKind


class RawNode(BaseModel):
    """A single code entity as emitted by the analyzer."""
    id: int
    name: str
    kind: DecodedKind = Field(default_factory=UnknownKind)
    children: Tuple[int, ...] = ()
    documentation: str = ""
    source_code: str = Field(default="", validation_alias=AliasChoices("sourceCode", "source_code"))

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @property
    def tag(self) -> NodeKindTag:
        return self.kind.tag


class RawGraph(BaseModel):
    """
    The as-fetched code-structure document.

    Child ids (and the root id) may point at nodes that are not present;
    consumers drop such references instead of failing.
    """
    root: int
    nodes: Tuple[RawNode, ...] = ()

    model_config = ConfigDict(frozen=True, extra="ignore")

    def node_ids(self) -> Set[int]:
        return {node.id for node in self.nodes}

    def get_node(self, node_id: int) -> Optional[RawNode]:
        """Return the first node with ``node_id``, if any."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    @property
    def has_root(self) -> bool:
        return self.get_node(self.root) is not None


class RenderNode(BaseModel):
    """
    Presentation-ready node.

    ``raw`` is a read-only link back to the source node, used only to render
    the detail panel. It is left out of every serialized form.
    """
    id: int
    label: str
    tooltip: str
    color: str
    raw: RawNode = Field(exclude=True, repr=False)

    model_config = ConfigDict(frozen=True)

    def to_vis(self) -> Dict[str, Any]:
        """Row for a vis.js ``DataSet``."""
        return {"id": self.id, "label": self.label, "title": self.tooltip, "color": self.color}


class RenderEdge(BaseModel):
    """Directed parent → child edge."""
    from_id: int = Field(serialization_alias="from")
    to_id: int = Field(serialization_alias="to")
    directed: bool = True

    model_config = ConfigDict(frozen=True)

    def to_vis(self) -> Dict[str, Any]:
        edge: Dict[str, Any] = {"from": self.from_id, "to": self.to_id}
        if self.directed:
            edge["arrows"] = "to"
        return edge


class RenderGraph(BaseModel):
    """Node and edge lists for the rendering surface, in deterministic order."""
    nodes: Tuple[RenderNode, ...] = ()
    edges: Tuple[RenderEdge, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def iter_nodes(self) -> Iterator[RenderNode]:
        return iter(self.nodes)

    def get_node(self, node_id: int) -> Optional[RenderNode]:
        """Return the first node with ``node_id``, if any."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def has_node(self, node_id: int) -> bool:
        return self.get_node(node_id) is not None

    def to_vis(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "nodes": [node.to_vis() for node in self.nodes],
            "edges": [edge.to_vis() for edge in self.edges],
        }
