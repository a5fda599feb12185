"""
Node kind model.

Every node the crate analyzer emits carries exactly one kind from a closed
set. Each kind is a small frozen pydantic model holding its own payload and
``NodeKind`` is the union of all of them.

On the wire a kind is externally tagged, the way serde writes Rust enums::

    {"struct": {"fields": [{"name": "id", "typeName": "u32"}]}}
    {"function": {"arguments": [], "returnType": "String"}}
    "unknown"

``decode_kind`` never fails: tags it does not recognize, and payloads that do
not validate, come back as ``UnknownKind`` so that a newer analyzer does not
break an older viewer.

Consumers that need per-kind behavior subclass ``KindVisitor``. It declares
one abstract method per kind, so a new kind cannot be added without every
consumer implementing it.
"""

import logging
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    Generic,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
    assert_never,
)

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NodeKindTag(StrEnum):
    """Wire tags of the node kinds, in the analyzer's spelling."""
    WORKSPACE = "workspace"
    PACKAGE = "package"
    MODULE = "module"
    STRUCT = "struct"
    ENUM = "enum"
    FUNCTION = "function"
    CONST = "const"
    MACRO = "macro"
    STATIC = "static"
    TRAIT = "trait"
    TRAIT_ALIAS = "traitAlias"
    TYPE = "type"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``Trait Alias``."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: Dict[NodeKindTag, str] = {
    NodeKindTag.WORKSPACE: "Workspace",
    NodeKindTag.PACKAGE: "Package",
    NodeKindTag.MODULE: "Module",
    NodeKindTag.STRUCT: "Struct",
    NodeKindTag.ENUM: "Enum",
    NodeKindTag.FUNCTION: "Function",
    NodeKindTag.CONST: "Const",
    NodeKindTag.MACRO: "Macro",
    NodeKindTag.STATIC: "Static",
    NodeKindTag.TRAIT: "Trait",
    NodeKindTag.TRAIT_ALIAS: "Trait Alias",
    NodeKindTag.TYPE: "Type",
    NodeKindTag.UNKNOWN: "Unknown",
}


class FieldDef(BaseModel):
    """A named, typed slot: a struct field or a function argument."""
    name: str
    type_name: str = Field(default="", validation_alias=AliasChoices("typeName", "type_name"))

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class _KindModel(BaseModel):
    tag: ClassVar[NodeKindTag]

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class ContainerKind(_KindModel):
    """Base for kinds that group other nodes and live at a filesystem path."""
    path: str = ""


class WorkspaceKind(ContainerKind):
    tag: ClassVar[NodeKindTag] = NodeKindTag.WORKSPACE


class PackageKind(ContainerKind):
    tag: ClassVar[NodeKindTag] = NodeKindTag.PACKAGE


class ModuleKind(ContainerKind):
    tag: ClassVar[NodeKindTag] = NodeKindTag.MODULE


class StructKind(_KindModel):
    tag: ClassVar[NodeKindTag] = NodeKindTag.STRUCT
    fields: Tuple[FieldDef, ...] = ()


class EnumKind(_KindModel):
    tag: ClassVar[NodeKindTag] = NodeKindTag.ENUM
    variants: Tuple[str, ...] = ()


class FunctionKind(_KindModel):
    tag: ClassVar[NodeKindTag] = NodeKindTag.FUNCTION
    arguments: Tuple[FieldDef, ...] = ()
    return_type: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("returnType", "return_type")
    )


class ConstKind(_KindModel):
    tag: ClassVar[NodeKindTag] = NodeKindTag.CONST
    type_name: str = Field(default="", validation_alias=AliasChoices("type", "typeName", "type_name"))
    value: str = ""


class MacroKind(_KindModel):
    tag: ClassVar[NodeKindTag] = NodeKindTag.MACRO
    is_macro_rules: bool = Field(
        default=False, validation_alias=AliasChoices("isMacroRules", "is_macro_rules")
    )


class StaticKind(_KindModel):
    tag: ClassVar[NodeKindTag] = NodeKindTag.STATIC
    type_name: str = Field(default="", validation_alias=AliasChoices("type", "typeName", "type_name"))
    is_mutable: bool = Field(default=False, validation_alias=AliasChoices("isMutable", "is_mutable"))


class TraitKind(_KindModel):
    tag: ClassVar[NodeKindTag] = NodeKindTag.TRAIT
    is_auto: bool = Field(default=False, validation_alias=AliasChoices("isAuto", "is_auto"))
    is_unsafe: bool = Field(default=False, validation_alias=AliasChoices("isUnsafe", "is_unsafe"))


class _GenericsKind(_KindModel):
    generics: str = ""


class TraitAliasKind(_GenericsKind):
    tag: ClassVar[NodeKindTag] = NodeKindTag.TRAIT_ALIAS


class TypeKind(_GenericsKind):
    tag: ClassVar[NodeKindTag] = NodeKindTag.TYPE


class UnknownKind(_KindModel):
    """A kind this client does not know about yet. Carries nothing."""
    tag: ClassVar[NodeKindTag] = NodeKindTag.UNKNOWN


NodeKind = Union[
    WorkspaceKind,
    PackageKind,
    ModuleKind,
    StructKind,
    EnumKind,
    FunctionKind,
    ConstKind,
    MacroKind,
    StaticKind,
    TraitKind,
    TraitAliasKind,
    TypeKind,
    UnknownKind,
]

KIND_CLASSES: Tuple[Type[_KindModel], ...] = (
    WorkspaceKind,
    PackageKind,
    ModuleKind,
    StructKind,
    EnumKind,
    FunctionKind,
    ConstKind,
    MacroKind,
    StaticKind,
    TraitKind,
    TraitAliasKind,
    TypeKind,
    UnknownKind,
)

_KIND_BY_TAG: Dict[str, Type[_KindModel]] = {cls.tag.value: cls for cls in KIND_CLASSES}


def _split_tagged(data: Any) -> Tuple[Optional[str], Any]:
    """Split externally tagged data into (tag, payload)."""
    if isinstance(data, str):
        return data, None
    if isinstance(data, dict) and len(data) == 1:
        tag, payload = next(iter(data.items()))
        if isinstance(tag, str):
            return tag, payload
    return None, None


def decode_kind(data: Any) -> NodeKind:
    """
    Decode wire data into exactly one node kind.

    Args:
        data (Any): A bare tag string, a single-key ``{tag: payload}`` mapping,
            or an already decoded kind (returned as is).

    Returns:
        NodeKind: The decoded kind, or ``UnknownKind`` when the tag is not
        recognized or its payload does not fit.
    """
    if isinstance(data, _KindModel):
        return data  # type: ignore[return-value]

    tag, payload = _split_tagged(data)
    if tag is None:
        logger.warning(f"Malformed node kind {data!r}; treating as unknown")
        return UnknownKind()

    kind_cls = _KIND_BY_TAG.get(tag)
    if kind_cls is None:
        logger.debug(f"Unrecognized node kind tag '{tag}'; treating as unknown")
        return UnknownKind()

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        logger.warning(f"Payload of '{tag}' is not a mapping; treating as unknown")
        return UnknownKind()

    try:
        return kind_cls.model_validate(payload)  # type: ignore[return-value]
    except ValidationError as e:
        logger.warning(f"Invalid payload for '{tag}' ({e.error_count()} errors); treating as unknown")
        return UnknownKind()


# Field type for models that embed a kind straight from wire data
DecodedKind = Annotated[NodeKind, BeforeValidator(decode_kind)]


def is_container(kind: NodeKind) -> bool:
    """True for workspace, package and module kinds."""
    return isinstance(kind, ContainerKind)


class KindVisitor(ABC, Generic[T]):
    """
    Exhaustive per-kind dispatch.

    Subclasses implement one method per kind; ``visit`` routes a kind to it.
    """

    def visit(self, kind: NodeKind) -> T:
        match kind:
            case WorkspaceKind():
                return self.visit_workspace(kind)
            case PackageKind():
                return self.visit_package(kind)
            case ModuleKind():
                return self.visit_module(kind)
            case StructKind():
                return self.visit_struct(kind)
            case EnumKind():
                return self.visit_enum(kind)
            case FunctionKind():
                return self.visit_function(kind)
            case ConstKind():
                return self.visit_const(kind)
            case MacroKind():
                return self.visit_macro(kind)
            case StaticKind():
                return self.visit_static(kind)
            case TraitKind():
                return self.visit_trait(kind)
            case TraitAliasKind():
                return self.visit_trait_alias(kind)
            case TypeKind():
                return self.visit_type(kind)
            case UnknownKind():
                return self.visit_unknown(kind)
            case _:
                assert_never(kind)

    @abstractmethod
    def visit_workspace(self, kind: WorkspaceKind) -> T: ...

    @abstractmethod
    def visit_package(self, kind: PackageKind) -> T: ...

    @abstractmethod
    def visit_module(self, kind: ModuleKind) -> T: ...

    @abstractmethod
    def visit_struct(self, kind: StructKind) -> T: ...

    @abstractmethod
    def visit_enum(self, kind: EnumKind) -> T: ...

    @abstractmethod
    def visit_function(self, kind: FunctionKind) -> T: ...

    @abstractmethod
    def visit_const(self, kind: ConstKind) -> T: ...

    @abstractmethod
    def visit_macro(self, kind: MacroKind) -> T: ...

    @abstractmethod
    def visit_static(self, kind: StaticKind) -> T: ...

    @abstractmethod
    def visit_trait(self, kind: TraitKind) -> T: ...

    @abstractmethod
    def visit_trait_alias(self, kind: TraitAliasKind) -> T: ...

    @abstractmethod
    def visit_type(self, kind: TypeKind) -> T: ...

    @abstractmethod
    def visit_unknown(self, kind: UnknownKind) -> T: ...
