"""
Layout configuration for the rendering surface.

The graph is laid out by hierarchy alone: a fixed direction, fixed spacing
between levels and between siblings, arrows on every edge, and the physics
simulation switched off so the same graph always lands in the same place.
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..config import (
    EDGE_COLOR,
    LAYOUT_DIRECTION,
    LAYOUT_SORT_METHOD,
    LEVEL_SEPARATION,
    NODE_SPACING,
    LayoutSettings,
)


class LayoutOptions(BaseModel):
    direction: Literal["LR", "RL", "UD", "DU"] = LAYOUT_DIRECTION
    sort_method: Literal["directed", "hubsize"] = LAYOUT_SORT_METHOD
    level_separation: int = Field(default=LEVEL_SEPARATION, gt=0)
    node_spacing: int = Field(default=NODE_SPACING, gt=0)
    edge_color: str = EDGE_COLOR
    navigation_buttons: bool = True
    keyboard: bool = True

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, settings: LayoutSettings) -> "LayoutOptions":
        return cls(
            direction=settings.direction,
            level_separation=settings.level_separation,
            node_spacing=settings.node_spacing,
        )

    def to_vis_options(self) -> Dict[str, Any]:
        """Options object for ``new vis.Network(container, data, options)``."""
        return {
            "layout": {
                "hierarchical": {
                    "enabled": True,
                    "direction": self.direction,
                    "sortMethod": self.sort_method,
                    "levelSeparation": self.level_separation,
                    "nodeSpacing": self.node_spacing,
                },
            },
            "edges": {
                "color": self.edge_color,
                "arrows": {"to": {"enabled": True}},
            },
            "height": "100%",
            "width": "100%",
            # Positions come from the hierarchy only
            "physics": {"enabled": False},
            "interaction": {
                "navigationButtons": self.navigation_buttons,
                "keyboard": self.keyboard,
            },
        }

    @property
    def dot_rankdir(self) -> str:
        """Graphviz ``rankdir`` matching ``direction``."""
        return {"LR": "LR", "RL": "RL", "UD": "TB", "DU": "BT"}[self.direction]
