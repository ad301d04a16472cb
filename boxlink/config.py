"""Configuration defaults for diagrams and their rendering."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class DiagramConfig:
    """Configuration knobs shared by :class:`~boxlink.diagram.Diagram` and the SVG renderer."""

    default_box_width: float = 120.0
    default_box_height: float = 100.0
    canvas_width: float = 900.0
    canvas_height: float = 600.0
    resolve_collisions: bool = True
    # nested collision responses deeper than this are left unresolved
    max_cascade_depth: int = 32
    round_endpoints: bool = True


_DIAGRAM_CONFIG = DiagramConfig()


def get_diagram_config() -> DiagramConfig:
    return copy.deepcopy(_DIAGRAM_CONFIG)


def set_diagram_config(config: DiagramConfig) -> None:
    global _DIAGRAM_CONFIG
    _DIAGRAM_CONFIG = copy.deepcopy(config)


__all__ = ["DiagramConfig", "get_diagram_config", "set_diagram_config"]
