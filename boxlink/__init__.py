from .vector import Vector2D, ZERO, vector
from .fraction import Fraction, FractionError, as_fraction
from .edge import Edge
from .line import (
    Line,
    ObliqueLine,
    HorizontalLine,
    VerticalLine,
    LineError,
    DegenerateLineError,
    UndefinedCoordinateError,
    ParallelLinesError,
    intersect,
)
from .segment import LineSegment
from .events import ListenerList
from .anchor import (
    Anchor,
    NearestAnchor,
    EdgeFractionAnchor,
    NearestOfSetAnchor,
    point_from_to,
    reference_point_for,
)
from .connector import StraightConnector
from .box import Box
from .config import DiagramConfig, get_diagram_config, set_diagram_config
from .diagram import Diagram
from .svg import render_svg
from .demo import build_demo_diagram

__all__ = [
    'Vector2D',
    'ZERO',
    'vector',
    'Fraction',
    'FractionError',
    'as_fraction',
    'Edge',
    'Line',
    'ObliqueLine',
    'HorizontalLine',
    'VerticalLine',
    'LineError',
    'DegenerateLineError',
    'UndefinedCoordinateError',
    'ParallelLinesError',
    'intersect',
    'LineSegment',
    'ListenerList',
    'Anchor',
    'NearestAnchor',
    'EdgeFractionAnchor',
    'NearestOfSetAnchor',
    'point_from_to',
    'reference_point_for',
    'StraightConnector',
    'Box',
    'DiagramConfig',
    'get_diagram_config',
    'set_diagram_config',
    'Diagram',
    'render_svg',
    'build_demo_diagram',
]
