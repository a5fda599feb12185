"""
Detail Renderer.

Builds the structured content of the detail panel for one node: a title, the
kind's wire tag as the type line, a block of kind-specific sections, then the
documentation and source code when the analyzer supplied any.

The result is plain data. The CLI prints it with rich, the HTML viewer draws
it in the side panel.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..core.kinds import (
    ConstKind,
    ContainerKind,
    EnumKind,
    FieldDef,
    FunctionKind,
    KindVisitor,
    MacroKind,
    ModuleKind,
    PackageKind,
    StaticKind,
    StructKind,
    TraitAliasKind,
    TraitKind,
    TypeKind,
    UnknownKind,
    WorkspaceKind,
)
from ..core.types import RenderNode


class DetailSection(BaseModel):
    """
    One labelled block of the panel.

    Scalar sections set ``value``; list sections set ``items`` (possibly
    empty, e.g. a struct without fields).
    """
    heading: str
    value: Optional[str] = None
    items: Optional[Tuple[str, ...]] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_list(self) -> bool:
        return self.items is not None


class DetailView(BaseModel):
    node_id: int
    title: str
    type_label: str
    sections: Tuple[DetailSection, ...] = ()
    documentation: Optional[str] = None
    source_code: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def section(self, heading: str) -> Optional[DetailSection]:
        for section in self.sections:
            if section.heading == heading:
                return section
        return None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _field_line(field: FieldDef) -> str:
    return f"{field.name}: {field.type_name}"


def _scalar(heading: str, value: str) -> DetailSection:
    return DetailSection(heading=heading, value=value)


def _listing(heading: str, items) -> DetailSection:
    return DetailSection(heading=heading, items=tuple(items))


class _SectionVisitor(KindVisitor[List[DetailSection]]):
    def _path(self, kind: ContainerKind) -> List[DetailSection]:
        return [_scalar("Path", kind.path)]

    def visit_workspace(self, kind: WorkspaceKind) -> List[DetailSection]:
        return self._path(kind)

    def visit_package(self, kind: PackageKind) -> List[DetailSection]:
        return self._path(kind)

    def visit_module(self, kind: ModuleKind) -> List[DetailSection]:
        return self._path(kind)

    def visit_struct(self, kind: StructKind) -> List[DetailSection]:
        return [_listing("Fields", map(_field_line, kind.fields))]

    def visit_enum(self, kind: EnumKind) -> List[DetailSection]:
        return [_listing("Variants", kind.variants)]

    def visit_function(self, kind: FunctionKind) -> List[DetailSection]:
        return [
            _listing("Arguments", map(_field_line, kind.arguments)),
            _scalar("Return Type", kind.return_type or "None"),
        ]

    def visit_const(self, kind: ConstKind) -> List[DetailSection]:
        return [_scalar("Type", kind.type_name), _scalar("Value", kind.value)]

    def visit_macro(self, kind: MacroKind) -> List[DetailSection]:
        return [_scalar("Macro Rules", _yes_no(kind.is_macro_rules))]

    def visit_static(self, kind: StaticKind) -> List[DetailSection]:
        return [_scalar("Type", kind.type_name), _scalar("Mutable", _yes_no(kind.is_mutable))]

    def visit_trait(self, kind: TraitKind) -> List[DetailSection]:
        return [_scalar("Auto", _yes_no(kind.is_auto)), _scalar("Unsafe", _yes_no(kind.is_unsafe))]

    def visit_trait_alias(self, kind: TraitAliasKind) -> List[DetailSection]:
        return [_scalar("Generics", kind.generics or "None")]

    def visit_type(self, kind: TypeKind) -> List[DetailSection]:
        return [_scalar("Generics", kind.generics or "None")]

    def visit_unknown(self, kind: UnknownKind) -> List[DetailSection]:
        return []


_SECTIONS = _SectionVisitor()


def render_detail(node: RenderNode) -> DetailView:
    """
    Render the detail panel content for a selected node.

    Args:
        node (RenderNode): The selected node; its ``raw`` link supplies the
            kind payload, documentation and source code.

    Returns:
        DetailView: Panel content. ``documentation`` and ``source_code`` are
        None when the analyzer left them empty.
    """
    raw = node.raw
    return DetailView(
        node_id=node.id,
        title=node.label,
        type_label=raw.kind.tag.value,
        sections=tuple(_SECTIONS.visit(raw.kind)),
        documentation=raw.documentation or None,
        source_code=raw.source_code or None,
    )
