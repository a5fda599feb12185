"""
cratemap CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

from pathlib import Path

import click

from ..config import load_settings
from .commands import graph, inspect, nodes, serve
from .utils import setup_logging


@click.group()
@click.version_option(package_name="cratemap")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: .cratemap/config.yaml)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Path | None):
    """cratemap: explore a crate's structure as a graph.

    Reads the JSON document written by the crate analyzer (default
    crate_graph.json) and shows it as a hierarchical graph.

    \b
    Quick Start:
      cratemap nodes crate_graph.json
      cratemap inspect crate_graph.json 3
      cratemap graph -o crate.html
      cratemap serve http://127.0.0.1:8000/api/graph
    """
    setup_logging(verbose)
    ctx.obj = load_settings(config_path)


# Register commands
main.add_command(graph.graph)
main.add_command(inspect.inspect)
main.add_command(nodes.nodes)
main.add_command(serve.serve)

if __name__ == "__main__":
    main()
