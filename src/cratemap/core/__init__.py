"""
cratemap core.

Data model and state shared by every other layer:

    - kinds: the closed set of node kinds and the exhaustive KindVisitor
    - types: RawGraph as fetched, RenderGraph as drawn
    - selection: the single-node selection state machine
    - result: Ok/Err for boundary operations
"""

from .kinds import (
    KIND_CLASSES,
    ConstKind,
    ContainerKind,
    EnumKind,
    FieldDef,
    FunctionKind,
    KindVisitor,
    MacroKind,
    ModuleKind,
    NodeKind,
    NodeKindTag,
    PackageKind,
    StaticKind,
    StructKind,
    TraitAliasKind,
    TraitKind,
    TypeKind,
    UnknownKind,
    WorkspaceKind,
    decode_kind,
    is_container,
)
from .result import Err, Ok, Result
from .selection import Idle, Selected, Selection, SelectionController
from .types import RawGraph, RawNode, RenderEdge, RenderGraph, RenderNode

__all__ = [
    # Kinds
    "KIND_CLASSES",
    "ConstKind",
    "ContainerKind",
    "EnumKind",
    "FieldDef",
    "FunctionKind",
    "KindVisitor",
    "MacroKind",
    "ModuleKind",
    "NodeKind",
    "NodeKindTag",
    "PackageKind",
    "StaticKind",
    "StructKind",
    "TraitAliasKind",
    "TraitKind",
    "TypeKind",
    "UnknownKind",
    "WorkspaceKind",
    "decode_kind",
    "is_container",
    # Graphs
    "RawGraph",
    "RawNode",
    "RenderEdge",
    "RenderGraph",
    "RenderNode",
    # Selection
    "Idle",
    "Selected",
    "Selection",
    "SelectionController",
    # Result
    "Err",
    "Ok",
    "Result",
]
