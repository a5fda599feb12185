"""
Graph Command - Export the graph for viewing.

Writes a self-contained vis.js page (.html) or a Graphviz file (.dot), or
prints the render graph as JSON for editor integrations.
"""

from pathlib import Path

import click

from ...graph.layout import LayoutOptions
from ...graph.transform import transform
from ...graph.visualize import generate_html, open_visualization, to_dot
from ..utils import echo_error, echo_info, echo_success, get_settings, json_envelope, load_raw_graph


@click.command()
@click.argument("source", required=False)
@click.option("-o", "--output", default="crate_graph.html", help="Output file (.html or .dot)")
@click.option(
    "--direction",
    type=click.Choice(["LR", "RL", "UD", "DU"]),
    default=None,
    help="Layout direction (overrides settings)",
)
@click.option("--json", "json_mode", is_flag=True, help="Print nodes, edges and layout options as JSON")
@click.option("--open", "open_browser", is_flag=True, help="Open the HTML page after writing it")
@click.pass_context
def graph(ctx: click.Context, source: str | None, output: str, direction: str | None, json_mode: bool, open_browser: bool):
    """
    Export the crate graph as HTML, DOT or JSON.

    SOURCE is the analyzer's JSON document: a file, a directory holding
    crate_graph.json, or an http(s) URL. Defaults to the configured source.
    """
    settings = get_settings(ctx)
    source = source or settings.source

    layout = LayoutOptions.from_settings(settings.layout)
    if direction:
        layout = layout.model_copy(update={"direction": direction})

    raw_graph = load_raw_graph(source, settings.request_timeout, json_mode=json_mode)
    if raw_graph is None:
        ctx.exit(1)

    render_graph = transform(raw_graph)

    if json_mode:
        click.echo(json_envelope({**render_graph.to_vis(), "options": layout.to_vis_options()}))
        return

    output_path = Path(output)

    if output_path.suffix == ".html":
        if open_browser:
            open_visualization(render_graph, str(output_path), layout)
        else:
            output_path.write_text(generate_html(render_graph, layout), encoding="utf-8")
        echo_success(f"Generated: {output_path}")
        echo_info(f"{render_graph.node_count} nodes, {render_graph.edge_count} edges")
        echo_info(f"Open: file://{output_path.absolute()}")

    elif output_path.suffix == ".dot":
        output_path.write_text(to_dot(render_graph, layout), encoding="utf-8")
        echo_success(f"Generated: {output_path}")
        echo_info(f"Render with: dot -Tsvg {output_path} -o crate.svg")

    else:
        echo_error(f"Unsupported format: {output_path.suffix}")
        click.echo("Supported: .html, .dot")
        ctx.exit(1)
