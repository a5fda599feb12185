"""Unit tests for label, tooltip and color derivation."""

import pytest

from cratemap.config import FALLBACK_COLOR, FUNCTION_COLOR, MODULE_COLOR, STRUCT_COLOR
from cratemap.core.kinds import KIND_CLASSES, NodeKindTag, decode_kind
from cratemap.core.types import RawNode
from cratemap.graph.presentation import last_path_segment, node_color, node_label, node_tooltip


def make_node(kind, name="item", node_id=1):
    return RawNode(id=node_id, name=name, kind=decode_kind(kind))


class TestLabel:
    @pytest.mark.parametrize("tag", ["workspace", "package", "module"])
    def test_container_uses_last_segment(self, tag):
        assert node_label(make_node({tag: {"path": "p"}}, name="a/b/c")) == "c"

    def test_container_without_slash_unchanged(self):
        assert node_label(make_node({"module": {"path": "p"}}, name="lib.rs")) == "lib.rs"

    def test_trailing_slash_skipped(self):
        assert node_label(make_node({"module": {}}, name="src/graph/")) == "graph"

    def test_non_container_name_verbatim(self):
        assert node_label(make_node({"struct": {"fields": []}}, name="a/b")) == "a/b"
        assert node_label(make_node("unknown", name="x/y")) == "x/y"

    def test_last_path_segment_only_separators(self):
        assert last_path_segment("/") == "/"
        assert last_path_segment("") == ""


class TestTooltip:
    def test_counts(self):
        struct = make_node({"struct": {"fields": [{"name": "a", "typeName": "u8"}] * 3}})
        enum = make_node({"enum": {"variants": ["A", "B"]}})
        function = make_node({"function": {"arguments": []}})

        assert node_tooltip(struct) == "Struct with 3 fields"
        assert node_tooltip(enum) == "Enum with 2 variants"
        assert node_tooltip(function) == "Function with 0 arguments"

    @pytest.mark.parametrize(
        "kind, expected",
        [
            ({"workspace": {}}, "Workspace"),
            ({"package": {}}, "Package"),
            ({"module": {}}, "Module"),
            ({"const": {"type": "u8", "value": "1"}}, "Const"),
            ({"macro": {"isMacroRules": True}}, "Macro"),
            ({"static": {"type": "u8"}}, "Static"),
            ({"trait": {}}, "Trait"),
            ({"traitAlias": {}}, "Trait Alias"),
            ({"type": {}}, "Type"),
            ("somethingNew", "Unknown"),
        ],
    )
    def test_kind_names(self, kind, expected):
        assert node_tooltip(make_node(kind)) == expected


class TestColor:
    def test_every_kind_has_a_distinct_color(self):
        colors = {cls.tag: node_color(cls()) for cls in KIND_CLASSES}
        assert len(set(colors.values())) == len(colors)

    def test_unknown_uses_fallback(self):
        assert node_color(decode_kind("unknown")) == FALLBACK_COLOR
        assert node_color(decode_kind({"notAKind": {}})) == FALLBACK_COLOR

    def test_depends_on_tag_only(self):
        a = decode_kind({"struct": {"fields": []}})
        b = decode_kind({"struct": {"fields": [{"name": "x", "typeName": "u8"}]}})
        assert node_color(a) == node_color(b) == STRUCT_COLOR

    def test_fallback_not_used_by_known_kinds(self):
        for cls in KIND_CLASSES:
            if cls.tag is not NodeKindTag.UNKNOWN:
                assert node_color(cls()) != FALLBACK_COLOR

    def test_client_palette(self):
        assert node_color(decode_kind("module")) == MODULE_COLOR == "#97C2FC"
        assert node_color(decode_kind("function")) == FUNCTION_COLOR == "#FFD700"
