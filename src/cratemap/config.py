"""
Global Configuration and Viewer Defaults.

This module centralizes the defaults used by the viewer: where the graph
document comes from, how the hierarchical layout is spaced, which color each
node kind gets, and where the HTTP viewer listens. Values can be overridden
per project in ``.cratemap/config.yaml``.
"""

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

# --- Graph Source ---
# File written by the crate analyzer backend
DEFAULT_GRAPH_FILE = "crate_graph.json"

# Seconds before a remote graph fetch is abandoned
DEFAULT_REQUEST_TIMEOUT = 30.0

# --- Layout ---
LAYOUT_DIRECTION = "LR"
LAYOUT_SORT_METHOD = "directed"
LEVEL_SEPARATION = 150
NODE_SPACING = 150
EDGE_COLOR = "#000000"

# --- Node Colors ---
# module/struct/enum/function keep the palette the browser client has always
# used; every other kind gets its own.
WORKSPACE_COLOR = "#6C8EBF"
PACKAGE_COLOR = "#7EB6FF"
MODULE_COLOR = "#97C2FC"
STRUCT_COLOR = "#FFCCCB"
ENUM_COLOR = "#90EE90"
FUNCTION_COLOR = "#FFD700"
CONST_COLOR = "#FFB347"
MACRO_COLOR = "#C3A6FF"
STATIC_COLOR = "#F4A6C6"
TRAIT_COLOR = "#7FDBDA"
TRAIT_ALIAS_COLOR = "#B0E0E6"
TYPE_COLOR = "#E6C79C"
FALLBACK_COLOR = "#D3D3D3"

# --- Server ---
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

CONFIG_PATH = Path(".cratemap/config.yaml")


class LayoutSettings(BaseModel):
    """Tunable part of the hierarchical layout."""
    direction: Literal["LR", "RL", "UD", "DU"] = LAYOUT_DIRECTION
    level_separation: int = Field(default=LEVEL_SEPARATION, gt=0)
    node_spacing: int = Field(default=NODE_SPACING, gt=0)

    model_config = ConfigDict(extra="ignore")


class ServerSettings(BaseModel):
    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)

    model_config = ConfigDict(extra="ignore")


class ViewerSettings(BaseModel):
    """
    Project-level viewer settings.

    Mirrors the layout of ``.cratemap/config.yaml``::

        source: target/crate_graph.json
        request_timeout: 10
        layout:
          direction: UD
          level_separation: 200
        server:
          port: 9000
    """
    source: str = DEFAULT_GRAPH_FILE
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    model_config = ConfigDict(extra="ignore")


def load_settings(config_path: Path | None = None) -> ViewerSettings:
    """
    Load viewer settings from YAML, falling back to defaults.

    A missing file is normal and silently yields defaults. A file that cannot
    be read or does not validate is reported as a warning and also yields
    defaults, so a broken config never prevents the viewer from starting.

    Args:
        config_path (Path | None): Explicit config file. Defaults to
            ``.cratemap/config.yaml`` in the working directory.

    Returns:
        ViewerSettings: The effective settings.
    """
    path = config_path or CONFIG_PATH
    if not path.exists():
        return ViewerSettings()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not read {path}: {e}. Using defaults.")
        return ViewerSettings()

    if not isinstance(data, dict):
        logger.warning(f"Ignoring {path}: expected a mapping at the top level.")
        return ViewerSettings()

    try:
        return ViewerSettings.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Invalid settings in {path}: {e}. Using defaults.")
        return ViewerSettings()
