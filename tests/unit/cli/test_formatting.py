"""Unit tests for the rich renderables."""

from rich.console import Console

from cratemap.cli.formatting import format_detail, format_nodes_table
from cratemap.core.kinds import NodeKindTag
from cratemap.graph.detail import render_detail
from cratemap.graph.transform import transform


def render_text(renderable) -> str:
    console = Console(record=True, width=120)
    console.print(renderable)
    return console.export_text()


class TestFormatting:
    def test_detail_panel(self, raw_graph):
        detail = render_detail(transform(raw_graph).get_node(3))
        text = render_text(format_detail(detail))

        assert "Node" in text
        assert "Type: struct" in text
        assert "id: usize" in text
        assert "Documentation:" in text
        assert "A node." in text

    def test_empty_list_section(self):
        from cratemap.core.types import RawGraph

        raw = RawGraph.model_validate({
            "root": 1,
            "nodes": [{"id": 1, "name": "Unit", "kind": {"struct": {"fields": []}}}],
        })
        text = render_text(format_detail(render_detail(transform(raw).get_node(1))))
        assert "(none)" in text

    def test_nodes_table(self, raw_graph):
        text = render_text(format_nodes_table(transform(raw_graph)))
        assert "mod.rs" in text
        assert "Enum with 3 variants" in text

    def test_nodes_table_filtered(self, raw_graph):
        text = render_text(format_nodes_table(transform(raw_graph), NodeKindTag.FUNCTION))
        assert "analyze" in text
        assert "mod.rs" not in text
