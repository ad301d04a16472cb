import logging

import pytest

from boxlink.anchor import Anchor
from boxlink.config import DiagramConfig
from boxlink.diagram import Diagram
from boxlink.vector import vector


def _row_of_boxes(config=None):
    diagram = Diagram(config)
    boxes = [diagram.add_box(vector(x, 0), 2, 2) for x in (0, 2, 4)]
    return diagram, boxes


def test_add_box_uses_default_size_from_config():
    diagram = Diagram(DiagramConfig(default_box_width=30, default_box_height=20))

    box = diagram.add_box(vector(5, 5))

    assert box.size == vector(30, 20)
    assert diagram.boxes == (box,)


def test_dragging_a_box_pushes_overlapping_neighbours_in_cascade():
    diagram, (a, b, c) = _row_of_boxes()

    diagram.drag(a, vector(1, 0))

    assert [box.position for box in diagram.boxes] == [vector(1, 0), vector(3, 0), vector(5, 0)]
    assert not any(
        first.overlaps(second)
        for first in diagram.boxes
        for second in diagram.boxes
        if first is not second
    )


def test_cascade_stops_at_configured_depth(caplog):
    diagram, (a, b, c) = _row_of_boxes(DiagramConfig(max_cascade_depth=1))

    with caplog.at_level(logging.WARNING, logger='boxlink.diagram'):
        diagram.drag(a, vector(1, 0))

    assert b.position == vector(3, 0)
    assert c.position == vector(4, 0)
    assert b.overlaps(c)
    assert 'collision cascade reached depth 1' in caplog.text


def test_collision_resolution_can_be_disabled():
    diagram, (a, b, c) = _row_of_boxes(DiagramConfig(resolve_collisions=False))

    diagram.drag(a, vector(1, 0))

    assert b.position == vector(2, 0)
    assert a.overlaps(b)


def test_pushed_boxes_keep_their_connectors_updated():
    diagram, (a, b, c) = _row_of_boxes()
    connector = diagram.connect(b, c, Anchor.nearest(), Anchor.nearest())
    changes = []
    connector.add_change_listener(changes.append)

    diagram.drag(a, vector(1, 0))

    assert changes == [connector, connector]
    assert connector.start_point == b.right_center == vector(5, 1)
    assert connector.end_point == c.left_center == vector(5, 1)


def test_connect_defaults_to_nearest_fixed_anchors():
    diagram = Diagram()
    first = diagram.add_box(vector(10, 10))
    second = diagram.add_box(vector(150, 50))

    connector = diagram.connect(first, second)

    assert diagram.connectors == (connector,)
    assert connector.start_anchor == first.nearest_fixed_anchor()
    assert connector.start_point.as_tuple() == pytest.approx((130, 90))
    assert connector.end_point.as_tuple() == pytest.approx((150, 70))


def test_remove_box_drops_its_connectors_and_stops_pushing():
    diagram, (a, b, c) = _row_of_boxes()
    connector = diagram.connect(a, b)
    diagram.connect(b, c)

    diagram.remove_box(a)
    a.move_by(vector(1, 0))

    assert diagram.boxes == (b, c)
    assert len(diagram.connectors) == 1
    assert not connector.connected
    assert b.position == vector(2, 0)


def test_remove_unknown_box_is_an_error():
    diagram, _ = _row_of_boxes()
    other = Diagram().add_box(vector(0, 0))

    with pytest.raises(ValueError):
        diagram.remove_box(other)


def test_remove_connector_disconnects_it():
    diagram, (a, b, _) = _row_of_boxes()
    connector = diagram.connect(a, b)

    diagram.remove_connector(connector)

    assert diagram.connectors == ()
    assert not connector.connected


def test_bounds():
    assert Diagram().bounds() is None

    diagram = Diagram()
    diagram.add_box(vector(-5, 10), 10, 10)
    diagram.add_box(vector(20, 0), 5, 5)

    assert diagram.bounds() == (vector(-5, 0), vector(25, 20))


def test_debug_logging_traces_diagram_calls(caplog):
    diagram = Diagram()

    with caplog.at_level(logging.DEBUG, logger='boxlink.diagram'):
        diagram.add_box(vector(1, 2), 3, 4)

    assert 'Entering Diagram.add_box' in caplog.text
    assert 'Exiting Diagram.add_box' in caplog.text
