from enum import Enum


class Edge(str, Enum):
    """The four sides of an axis-aligned box."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


__all__ = ["Edge"]
