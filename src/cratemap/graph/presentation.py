"""
Presentation Deriver.

Pure functions turning a raw node into what the graph shows: a label, a hover
tooltip and a color. All three are total over the node kinds; nothing here
reads or keeps state.
"""

from .. import config
from ..core.kinds import (
    ConstKind,
    EnumKind,
    FunctionKind,
    KindVisitor,
    MacroKind,
    ModuleKind,
    NodeKind,
    PackageKind,
    StaticKind,
    StructKind,
    TraitAliasKind,
    TraitKind,
    TypeKind,
    UnknownKind,
    WorkspaceKind,
    is_container,
)
from ..core.types import RawNode


def last_path_segment(name: str) -> str:
    """
    Return the last non-empty ``/``-separated segment of ``name``.

    ``"src/graph/mod.rs"`` gives ``"mod.rs"`` and ``"a/b/"`` gives ``"b"``.
    Names without a ``/``, or with nothing but separators, come back unchanged.
    """
    if "/" not in name:
        return name
    segments = [s for s in name.split("/") if s]
    return segments[-1] if segments else name


def node_label(node: RawNode) -> str:
    """Short label: the last path segment for containers, the name otherwise."""
    if is_container(node.kind):
        return last_path_segment(node.name)
    return node.name


class _TooltipVisitor(KindVisitor[str]):
    def visit_workspace(self, kind: WorkspaceKind) -> str:
        return kind.tag.display_name

    def visit_package(self, kind: PackageKind) -> str:
        return kind.tag.display_name

    def visit_module(self, kind: ModuleKind) -> str:
        return kind.tag.display_name

    def visit_struct(self, kind: StructKind) -> str:
        return f"Struct with {len(kind.fields)} fields"

    def visit_enum(self, kind: EnumKind) -> str:
        return f"Enum with {len(kind.variants)} variants"

    def visit_function(self, kind: FunctionKind) -> str:
        return f"Function with {len(kind.arguments)} arguments"

    def visit_const(self, kind: ConstKind) -> str:
        return kind.tag.display_name

    def visit_macro(self, kind: MacroKind) -> str:
        return kind.tag.display_name

    def visit_static(self, kind: StaticKind) -> str:
        return kind.tag.display_name

    def visit_trait(self, kind: TraitKind) -> str:
        return kind.tag.display_name

    def visit_trait_alias(self, kind: TraitAliasKind) -> str:
        return kind.tag.display_name

    def visit_type(self, kind: TypeKind) -> str:
        return kind.tag.display_name

    def visit_unknown(self, kind: UnknownKind) -> str:
        return kind.tag.display_name


_TOOLTIPS = _TooltipVisitor()


def node_tooltip(node: RawNode) -> str:
    """One-line summary shown on hover, e.g. ``Struct with 3 fields``."""
    return _TOOLTIPS.visit(node.kind)


class _ColorVisitor(KindVisitor[str]):
    def visit_workspace(self, kind: WorkspaceKind) -> str:
        return config.WORKSPACE_COLOR

    def visit_package(self, kind: PackageKind) -> str:
        return config.PACKAGE_COLOR

    def visit_module(self, kind: ModuleKind) -> str:
        return config.MODULE_COLOR

    def visit_struct(self, kind: StructKind) -> str:
        return config.STRUCT_COLOR

    def visit_enum(self, kind: EnumKind) -> str:
        return config.ENUM_COLOR

    def visit_function(self, kind: FunctionKind) -> str:
        return config.FUNCTION_COLOR

    def visit_const(self, kind: ConstKind) -> str:
        return config.CONST_COLOR

    def visit_macro(self, kind: MacroKind) -> str:
        return config.MACRO_COLOR

    def visit_static(self, kind: StaticKind) -> str:
        return config.STATIC_COLOR

    def visit_trait(self, kind: TraitKind) -> str:
        return config.TRAIT_COLOR

    def visit_trait_alias(self, kind: TraitAliasKind) -> str:
        return config.TRAIT_ALIAS_COLOR

    def visit_type(self, kind: TypeKind) -> str:
        return config.TYPE_COLOR

    def visit_unknown(self, kind: UnknownKind) -> str:
        return config.FALLBACK_COLOR


_COLORS = _ColorVisitor()


def node_color(kind: NodeKind) -> str:
    """Fill color for a kind. Depends on the kind's tag only, never the payload."""
    return _COLORS.visit(kind)
