"""
cratemap: explorable graph view of a crate's code structure.

Turns the workspace → package → module → item tree emitted by the crate
analyzer into a hierarchical vis.js graph, and keeps a single-node
selection in sync with a detail panel.
"""

__version__ = "0.1.0"
