"""
Host shell: everything between the core and the outside world.

    - loader: read or fetch the analyzer's graph document
    - session: current graph + current selection
    - server: HTTP viewer around a session
"""

from .loader import GraphLoadError, fetch_graph, parse_graph
from .session import GraphSession, NodeNotFoundError

__all__ = [
    "GraphLoadError",
    "GraphSession",
    "NodeNotFoundError",
    "fetch_graph",
    "parse_graph",
]
