"""
Rich renderables for terminal output.
"""

from typing import Optional

from rich.console import Group
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from ..core.kinds import NodeKindTag
from ..core.types import RenderGraph
from ..graph.detail import DetailView


def format_detail(detail: DetailView) -> Panel:
    """Detail view as a titled panel, in the same order as the web panel."""
    parts = []

    header = Text()
    header.append("Type: ", style="bold")
    header.append(detail.type_label)
    parts.append(header)

    for section in detail.sections:
        if section.is_list:
            parts.append(Text(f"{section.heading}:", style="bold"))
            if section.items:
                for item in section.items:
                    parts.append(Text(f"  • {item}"))
            else:
                parts.append(Text("  (none)", style="dim"))
        else:
            line = Text()
            line.append(f"{section.heading}: ", style="bold")
            line.append(section.value or "")
            parts.append(line)

    if detail.documentation:
        parts.append(Text("Documentation:", style="bold"))
        parts.append(Text(detail.documentation))

    if detail.source_code:
        parts.append(Text("Source:", style="bold"))
        parts.append(Syntax(detail.source_code, "rust", word_wrap=True))

    return Panel(Group(*parts), title=f"[bold]{detail.title}[/bold]", subtitle=f"#{detail.node_id}")


def format_nodes_table(graph: RenderGraph, kind: Optional[NodeKindTag] = None) -> Table:
    """One row per node, optionally restricted to one kind."""
    table = Table(title="Nodes")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Label", style="bold")
    table.add_column("Kind")
    table.add_column("Summary", style="dim")
    table.add_column("Children", justify="right")

    for node in graph.iter_nodes():
        if kind is not None and node.raw.tag != kind:
            continue
        table.add_row(
            str(node.id),
            node.label,
            Text(node.raw.tag.value, style=node.color),
            node.tooltip,
            str(len(node.raw.children)),
        )
    return table
