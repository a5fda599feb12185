"""
Rendering-surface export.

Produces the page that hands a RenderGraph to vis.js, plus a Graphviz DOT
rendition for offline use.

The page works in two modes:

- static (``cratemap graph -o crate.html``): nodes, edges, layout options and
  every node's detail view are embedded; the page keeps its own selection.
- served (``cratemap serve``): the page fetches ``/api/graph`` and reports
  every pick and dismiss to the server, which owns the selection and answers
  with the detail view to show.
"""

import json
import webbrowser
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.types import RenderGraph
from .detail import render_detail
from .layout import LayoutOptions

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>cratemap</title>
    <script src="https://unpkg.com/vis-network/standalone/umd/vis-network.min.js"></script>
    <style>
        :root {
            --bg-base: #ffffff;
            --bg-panel: #fafafa;
            --border: #e5e7eb;
            --text-primary: #111827;
            --text-secondary: #6b7280;
            --error: #b91c1c;
            --font-sans: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
            --font-mono: "SF Mono", "Fira Code", monospace;
        }

        * { box-sizing: border-box; }

        body {
            margin: 0;
            height: 100vh;
            display: flex;
            overflow: hidden;
            font-family: var(--font-sans);
            color: var(--text-primary);
            background: var(--bg-base);
        }

        #graph { flex-grow: 1; height: 100vh; }

        #status {
            position: absolute;
            top: 12px;
            left: 12px;
            color: var(--error);
            font-size: 13px;
        }

        #detail {
            width: 25%;
            min-width: 280px;
            height: 100vh;
            overflow: auto;
            padding: 16px;
            border-left: 1px solid var(--border);
            background: var(--bg-panel);
        }

        #detail[hidden] { display: none; }

        #detail h2 { margin: 0 0 8px 0; font-size: 20px; }
        #detail .close {
            float: right;
            border: none;
            background: transparent;
            font-size: 18px;
            cursor: pointer;
            color: var(--text-secondary);
        }
        #detail ul { margin: 4px 0 12px 0; padding-left: 20px; }
        #detail pre {
            font-family: var(--font-mono);
            font-size: 12px;
            white-space: pre-wrap;
            background: #f3f4f6;
            padding: 8px;
            border-radius: 4px;
        }
    </style>
</head>
<body>
    <div id="graph"></div>
    <div id="status"></div>
    <aside id="detail" hidden></aside>

    <script>
        const API_MODE = __API_MODE__;
        const EMBEDDED = __GRAPH_DATA__;
        const OPTIONS = __OPTIONS__;
        const DETAILS = __DETAILS__;

        const container = document.getElementById('graph');
        const panel = document.getElementById('detail');
        const statusLine = document.getElementById('status');
        let network = null;

        // ============================================================
        // DETAIL PANEL
        // ============================================================
        function el(tag, text) {
            const node = document.createElement(tag);
            if (text !== undefined && text !== null) node.textContent = text;
            return node;
        }

        function labelled(heading, value) {
            const p = el('p');
            p.appendChild(el('strong', heading + ': '));
            p.appendChild(document.createTextNode(value));
            return p;
        }

        function renderDetail(detail) {
            panel.replaceChildren();

            const close = el('button', '\\u00d7');
            close.className = 'close';
            close.title = 'Close';
            close.addEventListener('click', dismiss);
            panel.appendChild(close);

            panel.appendChild(el('h2', detail.title));
            panel.appendChild(labelled('Type', detail.type_label));

            for (const section of detail.sections) {
                if (section.items === null) {
                    panel.appendChild(labelled(section.heading, section.value));
                    continue;
                }
                const heading = el('p');
                heading.appendChild(el('strong', section.heading + ':'));
                panel.appendChild(heading);
                const list = el('ul');
                for (const item of section.items) list.appendChild(el('li', item));
                panel.appendChild(list);
            }

            if (detail.documentation) {
                const heading = el('p');
                heading.appendChild(el('strong', 'Documentation:'));
                panel.appendChild(heading);
                panel.appendChild(el('p', detail.documentation));
            }
            if (detail.source_code) {
                const heading = el('p');
                heading.appendChild(el('strong', 'Source:'));
                panel.appendChild(heading);
                panel.appendChild(el('pre', detail.source_code));
            }
        }

        function applySelection(selection) {
            if (selection.visible && selection.detail) {
                renderDetail(selection.detail);
                panel.hidden = false;
            } else {
                panel.hidden = true;
                panel.replaceChildren();
                if (network) network.unselectAll();
            }
        }

        // ============================================================
        // INTERACTION
        // ============================================================
        async function pick(nodeId) {
            if (!API_MODE) {
                const detail = DETAILS[String(nodeId)] || null;
                applySelection({selected: nodeId, visible: detail !== null, detail: detail});
                return;
            }
            const response = await fetch('/api/selection', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify({node_id: nodeId}),
            });
            if (!response.ok) {
                statusLine.textContent = 'Selection failed: ' + response.status;
                return;
            }
            applySelection(await response.json());
        }

        async function dismiss() {
            if (!API_MODE) {
                applySelection({selected: null, visible: false, detail: null});
                return;
            }
            const response = await fetch('/api/selection', {method: 'DELETE'});
            if (response.ok) applySelection(await response.json());
        }

        function draw(graph, options) {
            const data = {
                nodes: new vis.DataSet(graph.nodes),
                edges: new vis.DataSet(graph.edges),
            };
            network = new vis.Network(container, data, options);
            network.on('select', (params) => {
                if (params.nodes.length > 0) {
                    pick(params.nodes[0]);
                } else {
                    dismiss();
                }
            });
        }

        function resize() {
            const height = window.innerHeight + 'px';
            container.style.height = height;
            if (network) network.setSize('100%', height);
        }

        window.addEventListener('resize', resize);
        resize();

        if (API_MODE) {
            fetch('/api/graph')
                .then(async (response) => {
                    const body = await response.json();
                    if (!response.ok) throw new Error(body.detail || response.statusText);
                    draw(body, body.options);
                    applySelection({selected: null, visible: false, detail: null});
                })
                .catch((error) => {
                    statusLine.textContent = 'Error fetching graph data: ' + error.message;
                });
        } else {
            draw(EMBEDDED, OPTIONS);
        }
    </script>
</body>
</html>
"""


def _embed(value: Any) -> str:
    """JSON for inlining inside a <script> block."""
    return json.dumps(value).replace("</", "<\\/")


def generate_html(
    graph: Optional[RenderGraph] = None,
    layout: Optional[LayoutOptions] = None,
    api_mode: bool = False,
) -> str:
    """
    Generate the HTML viewer page.

    Args:
        graph (RenderGraph | None): Graph to embed. Ignored in API mode, where
            the page fetches it from the server instead.
        layout (LayoutOptions | None): Layout options. Defaults apply when None.
        api_mode (bool): Build the served variant of the page.

    Returns:
        str: A complete HTML document.
    """
    layout = layout or LayoutOptions()

    if api_mode or graph is None:
        graph_data: Dict[str, List[Dict[str, Any]]] = {"nodes": [], "edges": []}
        details: Dict[str, Any] = {}
    else:
        graph_data = graph.to_vis()
        details = {}
        for node in graph.nodes:
            # First occurrence wins, as in RenderGraph.get_node
            details.setdefault(str(node.id), render_detail(node).to_dict())

    return (
        HTML_TEMPLATE.replace("__API_MODE__", "true" if api_mode else "false")
        .replace("__GRAPH_DATA__", _embed(graph_data))
        .replace("__OPTIONS__", _embed(layout.to_vis_options()))
        .replace("__DETAILS__", _embed(details))
    )


def _dot_quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def to_dot(graph: RenderGraph, layout: Optional[LayoutOptions] = None) -> str:
    """Render the graph as a Graphviz digraph."""
    layout = layout or LayoutOptions()
    lines = [
        "digraph crate {",
        f"    rankdir={layout.dot_rankdir};",
        f"    ranksep={layout.level_separation / 72:.2f};",
        f"    nodesep={layout.node_spacing / 72:.2f};",
        '    node [shape=box, style="rounded,filled", fontname="Helvetica"];',
        f"    edge [color={_dot_quote(layout.edge_color)}];",
    ]
    for node in graph.nodes:
        lines.append(
            f"    \"{node.id}\" [label={_dot_quote(node.label)}, "
            f"tooltip={_dot_quote(node.tooltip)}, fillcolor={_dot_quote(node.color)}];"
        )
    for edge in graph.edges:
        lines.append(f'    "{edge.from_id}" -> "{edge.to_id}";')
    lines.append("}")
    return "\n".join(lines) + "\n"


def open_visualization(
    graph: RenderGraph,
    output_path: str = "crate_graph.html",
    layout: Optional[LayoutOptions] = None,
) -> str:
    """Write the static page and open it in the browser."""
    out_file = Path(output_path)
    out_file.write_text(generate_html(graph, layout), encoding="utf-8")
    webbrowser.open(out_file.resolve().as_uri())
    return str(out_file)
