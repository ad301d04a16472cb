import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from boxlink import Vector2D, build_demo_diagram, get_diagram_config, render_svg

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_drag(values: Sequence[str]) -> Tuple[int, Vector2D]:
    index_text, dx_text, dy_text = values
    try:
        return int(index_text), Vector2D(float(dx_text), float(dy_text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid drag {' '.join(values)!r}: {exc}") from exc


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out the demo box diagram")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--drag",
        nargs=3,
        action="append",
        default=[],
        metavar=("INDEX", "DX", "DY"),
        help="Drag box INDEX by (DX, DY); may be repeated and is applied in order",
    )
    parser.add_argument(
        "--no-collisions",
        action="store_true",
        help="Let boxes overlap instead of pushing them apart",
    )
    parser.add_argument(
        "--svg-output-path",
        help="Write the resulting diagram as an SVG document to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    drags: List[Tuple[int, Vector2D]] = []
    for values in args.drag:
        try:
            drags.append(_parse_drag(values))
        except argparse.ArgumentTypeError as exc:
            parser.error(str(exc))

    config = get_diagram_config()
    if args.no_collisions:
        config.resolve_collisions = False

    diagram = build_demo_diagram(config)
    logger.info("Built diagram with %d box(es), %d connector(s)", len(diagram.boxes), len(diagram.connectors))

    for index, delta in drags:
        if not 0 <= index < len(diagram.boxes):
            parser.error(f"no box with index {index}")
        logger.info("Dragging box %d by (%g, %g)", index, delta.x, delta.y)
        diagram.drag(diagram.boxes[index], delta)

    print("Boxes:")
    for index, box in enumerate(diagram.boxes):
        print(f"  [{index}] position=({box.left:.3f}, {box.top:.3f}) size=({box.width:g}x{box.height:g})")

    print("Connectors:")
    for index, connector in enumerate(diagram.connectors):
        start, end = connector.start_point, connector.end_point
        print(f"  [{index}] ({start.x:.3f}, {start.y:.3f}) -> ({end.x:.3f}, {end.y:.3f})")

    if args.svg_output_path:
        output_path = Path(args.svg_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG document to %s", output_path)
        output_path.write_text(render_svg(diagram), encoding="utf-8")
        print(f"SVG document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
