"""Render a diagram as a standalone SVG document."""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .config import DiagramConfig
from .diagram import Diagram
from .vector import Vector2D

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _format_float(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def _canvas_size(diagram: Diagram, config: DiagramConfig) -> Tuple[float, float]:
    canvas = np.array([config.canvas_width, config.canvas_height], dtype=float)
    bounds = diagram.bounds()
    if bounds is not None:
        _, upper = bounds
        canvas = np.maximum(canvas, np.ceil(np.array(upper.as_tuple(), dtype=float)))
    return float(canvas[0]), float(canvas[1])


def _endpoints(start: Vector2D, end: Vector2D, config: DiagramConfig) -> Tuple[Vector2D, Vector2D]:
    if config.round_endpoints:
        return start.round(), end.round()
    return start, end


def render_svg(diagram: Diagram, *, config: Optional[DiagramConfig] = None) -> str:
    """Boxes become ``<rect>`` elements and connectors ``<line>`` elements."""

    config = config if config is not None else diagram.config
    width, height = _canvas_size(diagram, config)

    lines: List[str] = [
        f'<svg xmlns="{SVG_NAMESPACE}" width="{_format_float(width)}" height="{_format_float(height)}">'
    ]
    for box in diagram.boxes:
        lines.append(
            f'  <rect width="{_format_float(box.width)}" height="{_format_float(box.height)}" '
            f'transform="translate({_format_float(box.left)}, {_format_float(box.top)})" '
            'stroke="black" fill="white"/>'
        )
    for connector in diagram.connectors:
        start, end = _endpoints(connector.start_point, connector.end_point, config)
        lines.append(
            f'  <line x1="{_format_float(start.x)}" y1="{_format_float(start.y)}" '
            f'x2="{_format_float(end.x)}" y2="{_format_float(end.y)}" stroke="black"/>'
        )
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


__all__ = ["render_svg", "SVG_NAMESPACE"]
