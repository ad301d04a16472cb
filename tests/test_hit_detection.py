import pytest

from boxlink.box import Box
from boxlink.vector import vector


@pytest.mark.parametrize('other_position', [vector(3, 0), vector(0, 3), vector(3, 3)])
def test_separated_boxes_have_no_hit(other_position):
    box1 = Box(2, 2, vector(0, 0))
    box2 = Box(2, 2, other_position)

    assert box1.hit_delta(box2) is None
    assert not box1.overlaps(box2)


def test_touching_boxes_have_no_hit():
    box = Box(2, 2, vector(2, 2))

    for position in (vector(4, 2), vector(2, 4), vector(0, 2), vector(2, 0)):
        assert box.hit_delta(Box(2, 2, position)) is None


@pytest.mark.parametrize(
    'box1, box2, expected',
    [
        (Box(2, 2, vector(0, 0)), Box(2, 2, vector(1, 0)), vector(-1, 0)),
        (Box(4, 4, vector(0, 0)), Box(4, 4, vector(3, 1)), vector(-1, 0)),
        (Box(2, 2, vector(1, 0)), Box(2, 2, vector(0, 0)), vector(1, 0)),
        (Box(4, 4, vector(3, 1)), Box(4, 4, vector(0, 0)), vector(1, 0)),
    ],
)
def test_horizontal_separation(box1, box2, expected):
    assert box1.hit_delta(box2) == expected


@pytest.mark.parametrize(
    'box1, box2, expected',
    [
        (Box(2, 2, vector(0, 0)), Box(2, 2, vector(0, 1)), vector(0, -1)),
        (Box(4, 4, vector(0, 0)), Box(4, 4, vector(1, 3)), vector(0, -1)),
        (Box(2, 2, vector(0, 1)), Box(2, 2, vector(0, 0)), vector(0, 1)),
        (Box(4, 4, vector(1, 3)), Box(4, 4, vector(0, 0)), vector(0, 1)),
    ],
)
def test_vertical_separation(box1, box2, expected):
    assert box1.hit_delta(box2) == expected


def test_equal_boxes_with_same_center_move_vertically():
    assert Box(2, 2, vector(0, 0)).hit_delta(Box(2, 2, vector(0, 0))) == vector(0, 2)


def test_similar_boxes_with_same_center_move_vertically():
    assert Box(6, 6, vector(0, 0)).hit_delta(Box(2, 2, vector(2, 2))) == vector(0, 4)


def test_same_center_prefers_the_axis_needing_less_movement():
    assert Box(4, 6, vector(0, 0)).hit_delta(Box(2, 2, vector(1, 2))) == vector(3, 0)


def test_asymmetric_overlap():
    assert Box(5, 2, vector(0, 0)).hit_delta(Box(2, 5, vector(4, -1))) == vector(-1, 0)


def test_hit_delta_is_anti_commutative():
    box1 = Box(4, 5, vector(0, 0))
    box2 = Box(3, 4, vector(2, 1))

    delta1 = box1.hit_delta(box2)
    delta2 = box2.hit_delta(box1)

    assert delta1 == vector(-2, 0)
    assert delta1 + delta2 == vector(0, 0)


def test_coinciding_centers_push_both_boxes_the_same_way():
    box1 = Box(2, 2, vector(0, 0))
    box2 = Box(2, 2, vector(0, 0))

    assert box1.hit_delta(box2) == box2.hit_delta(box1) == vector(0, 2)


def test_moving_by_the_delta_separates_the_boxes():
    box1 = Box(4, 5, vector(0, 0))
    box2 = Box(3, 4, vector(2, 1))

    box1.move_by(box1.hit_delta(box2))

    assert box1.hit_delta(box2) is None
    assert box2.hit_delta(box1) is None
