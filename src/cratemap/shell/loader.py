"""
Graph document loader.

Reads the analyzer's JSON document from a local file or fetches it over
HTTP(S), then validates it into a RawGraph. One attempt, no retries. Every
failure comes back as an ``Err(GraphLoadError)`` for the caller to report.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import requests
from pydantic import ValidationError

from ..config import DEFAULT_GRAPH_FILE, DEFAULT_REQUEST_TIMEOUT
from ..core.result import Err, Ok, Result
from ..core.types import RawGraph

logger = logging.getLogger(__name__)


@dataclass
class GraphLoadError:
    """Why a graph document could not be loaded."""

    source: str
    message: str
    cause: Optional[Exception] = None

    def __str__(self) -> str:
        return f"{self.source}: {self.message}"


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _read_document(source: str, timeout: float) -> Any:
    if is_remote(source):
        logger.info(f"Fetching graph from {source}")
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        return response.json()

    path = Path(source)
    # Accept a directory holding the analyzer's default output file
    if path.is_dir():
        path = path / DEFAULT_GRAPH_FILE
    logger.info(f"Reading graph from {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def parse_graph(data: Any, source: str = "<memory>") -> Result[RawGraph, GraphLoadError]:
    """Validate an already parsed JSON document."""
    try:
        graph = RawGraph.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Graph document from {source} is invalid: {e}")
        return Err(GraphLoadError(source, f"invalid graph document ({e.error_count()} errors)", e))

    logger.info(f"Loaded {len(graph.nodes)} nodes from {source}")
    return Ok(graph)


def fetch_graph(source: str, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> Result[RawGraph, GraphLoadError]:
    """
    Load a RawGraph from a path or URL.

    Args:
        source (str): File path, directory containing ``crate_graph.json``,
            or ``http(s)://`` URL.
        timeout (float): Seconds to wait for a remote response.

    Returns:
        Result[RawGraph, GraphLoadError]: The graph, or the reason it could
        not be loaded.
    """
    try:
        data = _read_document(source, timeout)
    except requests.exceptions.JSONDecodeError as e:
        logger.warning(f"{source} did not return JSON: {e}")
        return Err(GraphLoadError(source, f"not valid JSON: {e}", e))
    except requests.RequestException as e:
        logger.warning(f"Fetching {source} failed: {e}")
        return Err(GraphLoadError(source, f"request failed: {e}", e))
    except OSError as e:
        logger.warning(f"Reading {source} failed: {e}")
        return Err(GraphLoadError(source, f"cannot read file: {e}", e))
    except ValueError as e:
        # json.JSONDecodeError from a local file
        logger.warning(f"{source} is not valid JSON: {e}")
        return Err(GraphLoadError(source, f"not valid JSON: {e}", e))

    return parse_graph(data, source)
