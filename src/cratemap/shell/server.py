"""
Viewer HTTP server.

Serves the vis.js page and a small JSON API around one ``GraphSession``.
Every endpoint is ``async`` so that session state is only ever touched from
the event loop thread; re-fetching the graph document is the one blocking
step and runs in the threadpool.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from .. import __version__
from ..config import DEFAULT_REQUEST_TIMEOUT
from ..graph.detail import DetailView
from ..graph.visualize import generate_html
from .loader import fetch_graph
from .session import GraphSession, NodeNotFoundError

logger = logging.getLogger(__name__)


# --- API Models ---
class PickRequest(BaseModel):
    node_id: int


class SelectionResponse(BaseModel):
    """Selection state as the page needs it to show or hide the panel."""
    selected: Optional[int]
    visible: bool
    detail: Optional[DetailView] = None


class GraphResponse(BaseModel):
    nodes: List[Dict[str, Any]]
    edges: List[Dict[str, Any]]
    options: Dict[str, Any]


class ReloadResponse(BaseModel):
    node_count: int
    edge_count: int


def _selection_response(session: GraphSession) -> SelectionResponse:
    return SelectionResponse(
        selected=session.selection.selected_id,
        visible=session.selection.is_detail_visible,
        detail=session.current_detail(),
    )


def create_app(
    session: GraphSession,
    source: Optional[str] = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> FastAPI:
    """
    Build the viewer application.

    Args:
        session (GraphSession): Session the API reads and drives. It may be
            empty when the initial load failed.
        source (str | None): Where ``POST /api/reload`` fetches from. Reload
            is unavailable when None.
        timeout (float): Fetch timeout for reloads.

    Returns:
        FastAPI: The application.
    """
    app = FastAPI(title="cratemap", version=__version__)
    app.state.session = session
    app.state.source = source
    app.state.timeout = timeout

    @app.exception_handler(NodeNotFoundError)
    async def node_not_found_handler(request: Request, exc: NodeNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        return generate_html(layout=session.layout, api_mode=True)

    @app.get("/api/graph", response_model=GraphResponse)
    async def get_graph():
        if session.graph is None:
            message = session.last_error or "No graph loaded"
            return JSONResponse(status_code=503, content={"detail": message})
        return GraphResponse(**session.graph.to_vis(), options=session.layout.to_vis_options())

    @app.get("/api/selection", response_model=SelectionResponse)
    async def get_selection() -> SelectionResponse:
        return _selection_response(session)

    @app.post("/api/selection", response_model=SelectionResponse)
    async def pick(body: PickRequest) -> SelectionResponse:
        session.pick(body.node_id)
        return _selection_response(session)

    @app.delete("/api/selection", response_model=SelectionResponse)
    async def dismiss() -> SelectionResponse:
        session.dismiss()
        return _selection_response(session)

    @app.post("/api/reload", response_model=ReloadResponse)
    async def reload():
        if app.state.source is None:
            return JSONResponse(status_code=409, content={"detail": "No graph source configured"})

        logger.info(f"Reloading graph from {app.state.source}")
        result = await run_in_threadpool(fetch_graph, app.state.source, app.state.timeout)
        if result.is_err():
            error = result.unwrap_err()
            session.record_error(str(error))
            return JSONResponse(status_code=502, content={"detail": str(error)})

        graph = session.load(result.unwrap())
        return ReloadResponse(node_count=graph.node_count, edge_count=graph.edge_count)

    return app
