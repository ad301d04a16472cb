from typing import Optional

from .config import DiagramConfig
from .diagram import Diagram
from .svg import render_svg
from .vector import vector

DEMO_BOX_POSITIONS = (vector(10, 10), vector(150, 50), vector(300, 50))


def build_demo_diagram(config: Optional[DiagramConfig] = None) -> Diagram:
    """Three default-sized boxes, the first two joined by a connector."""
    diagram = Diagram(config)
    first, second, _ = [diagram.add_box(position) for position in DEMO_BOX_POSITIONS]
    diagram.connect(first, second)
    return diagram


def run():
    diagram = build_demo_diagram()
    print(f"Initial:\n{render_svg(diagram)}")

    diagram.drag(diagram.boxes[2], vector(-140, 0))
    print(f"After dragging the third box onto the second:\n{render_svg(diagram)}")


if __name__ == "__main__":
    run()
