import sys

import pytest

from ndraster.box import BorderedBox, Box, clamp, clamp_to_shape, erase, extend, insert
from ndraster.exceptions import SizeError


@pytest.fixture
def box3():
    return Box((1, -2, 0), (3, 1, 2))


def test_from_shape_round_trip():
    shape = (3, 4, 2)
    box = Box.from_shape(shape)
    assert box.shape() == shape
    assert box.front == (0, 0, 0)
    assert box.dimension() == len(shape)


def test_from_shape_with_front():
    front = (2, -1)
    shape = (3, 4)
    box = Box.from_shape(shape, front)
    assert box.front == front
    assert box.shape() == shape


def test_size_matches_iteration(box3):
    positions = list(box3)
    assert box3.size() == len(positions)
    assert len(set(positions)) == len(positions)


def test_iteration_order_is_row_major(box3):
    positions = list(box3)
    assert positions == sorted(positions, key=lambda p: p[::-1])
    assert positions[0] == box3.front
    assert positions[-1] == box3.back


def test_empty_box_iterates_nothing():
    region = Box((2, 2), (0, 0))
    assert region.size() == 0
    assert list(region) == []


def test_length_matches_shape(box3):
    assert [box3.length(axis) for axis in range(box3.dimension())] == list(box3.shape())


def test_contains(box3):
    assert all(box3.contains(p) for p in box3)
    assert not box3.contains(tuple(b + 1 for b in box3.back))
    assert not box3.contains(tuple(f - 1 for f in box3.front))


def test_from_center():
    center = (1, 1, 1)
    box = Box.from_center(2, center)
    assert box.contains(center)
    assert box.shape() == (5, 5, 5)
    assert all(max(abs(p - c) for p, c in zip(position, center)) <= 2 for position in box)


def test_from_center_default_is_symmetric():
    box = Box.from_center()
    assert box.dimension() == 2
    assert -box == box
    assert box.contains((0, 0))


def test_whole():
    box = Box.whole(3)
    assert box.dimension() == 3
    assert all(f == 0 for f in box.front)
    assert all(b == sys.maxsize for b in box.back)
    assert box.contains((10**9, 0, 12345))
    assert not box.contains((-1, 0, 0))


def test_project(box3):
    flat = box3.project(1)
    assert flat.length(1) == 1
    assert flat.front == box3.front
    assert flat.back[0] == box3.back[0]
    assert flat.back[2] == box3.back[2]
    assert flat <= box3


def test_intersection_and_hull():
    a = Box((0, 0), (4, 3))
    b = Box((2, -1), (6, 2))
    inter = a & b
    hull = a | b
    assert inter <= a and inter <= b
    assert a <= hull and b <= hull
    assert hull >= a
    assert set(inter) == set(a) & set(b)


def test_strict_containment():
    outer = Box((0, 0), (5, 5))
    inner = outer - Box((-1, -1), (1, 1))
    assert inner < outer
    assert outer > inner
    assert not outer < outer
    assert outer <= outer
    assert outer >= outer
    assert not outer <= inner


def test_grow_shrink_round_trip(box3):
    margin = Box((-1, -2, 0), (2, 1, 3))
    assert box3.grow(margin).shrink(margin) == box3
    assert box3 + margin == box3.grow(margin)
    assert box3 - margin == box3.shrink(margin)
    assert box3 <= box3.grow(margin)


def test_grow_with_lower_dimension_margin(box3):
    margin = Box((-1,), (1,))
    grown = box3.grow(margin)
    assert grown == box3.grow(extend(margin, 3))
    assert grown.length(0) == box3.length(0) + 2
    assert grown.length(1) == box3.length(1)


def test_translate(box3):
    vector = (1, 2, -3)
    moved = box3 + vector
    assert moved == box3.translate(vector)
    assert moved - vector == box3
    assert moved.shape() == box3.shape()
    assert box3.translate((4,)) == box3.translate((4, 0, 0))


def test_scalar_arithmetic(box3):
    assert box3 + 3 - 3 == box3
    assert 3 + box3 == box3 + 3
    assert box3 + 1 == box3.translate((1, 1, 1))


def test_negation(box3):
    negated = -box3
    assert -negated == box3
    assert all(negated.contains(tuple(-c for c in p)) for p in box3)
    assert +box3 == box3


def test_dimension_mismatch_raises():
    with pytest.raises(SizeError):
        Box((0, 0), (1, 1, 1))
    with pytest.raises(SizeError):
        Box((0, 0), (1, 1)) & Box((0,), (1,))


def test_non_integer_coordinates_raise():
    with pytest.raises(TypeError):
        Box((0.5, 0), (1, 1))


def test_clamp():
    region = Box((0, 0), (3, 3))
    assert clamp((-5, 10), region) == (0, 3)
    assert clamp((1, 2), region) == (1, 2)
    assert all(region.contains(clamp(p, region)) for p in [(-9, -9), (9, 9), (2, -1)])


def test_clamp_to_shape_matches_box_clamp():
    shape = (4, 5)
    for position in [(-1, 7), (2, 3), (10, -10)]:
        assert clamp_to_shape(position, shape) == clamp(position, Box.from_shape(shape))


def test_extend(box3):
    padding = (9, 9, 7, 8)
    extended = extend(box3, 4, padding)
    assert extended.dimension() == 4
    assert extended.front == box3.front + (7,)
    assert extended.back == box3.back + (7,)
    wider = extend(box3, 5, padding + (6,))
    assert erase(erase(wider, 4), 3) == box3
    with pytest.raises(ValueError):
        extend(box3, 2)


def test_erase_insert_round_trip(box3):
    erased = erase(box3, 1)
    assert erased.dimension() == 2
    assert insert(erased, 1, box3.front[1], box3.back[1]) == box3


def test_insert_at_end(box3):
    grown = insert(box3, 3, 5, 6)
    assert grown.front[:3] == box3.front
    assert grown.front[3] == 5
    assert grown.back[3] == 6


def test_invalid_axis_raises(box3):
    with pytest.raises(IndexError):
        erase(box3, 3)
    with pytest.raises(IndexError):
        insert(box3, 5, 0, 0)


def test_bordered_box_covers_box_without_overlap():
    box = Box((0, 0), (5, 4))
    margin = Box((-1, -2), (2, 1))
    bordered = BorderedBox(box, margin)
    regions = [bordered.inner, *bordered.fronts, *bordered.backs]
    positions = [p for region in regions for p in region]
    assert len(positions) == box.size()
    assert set(positions) == set(box)


def test_bordered_box_inner_is_shrunk_box():
    box = Box((0, 0, 0), (6, 5, 4))
    margin = Box((-1, -1, 0), (1, 1, 0))
    bordered = BorderedBox(box, margin)
    assert bordered.inner == box - margin
    assert bordered.inner < box.grow(Box((0, 0, -1), (0, 0, 1)))


def test_bordered_box_call_order():
    box = Box((0, 0), (5, 5))
    bordered = BorderedBox(box, Box((-1, -1), (1, 1)))
    calls = []
    bordered.apply_inner_border(lambda b: calls.append(("inner", b)), lambda b: calls.append(("border", b)))
    kinds = [kind for kind, _ in calls]
    assert kinds.count("inner") == 1
    inner_index = kinds.index("inner")
    assert [b for _, b in calls[:inner_index]] == list(bordered.fronts)
    assert [b for _, b in calls[inner_index + 1:]] == list(bordered.backs)
    assert calls[inner_index][1] == bordered.inner


def test_bordered_box_zero_margin():
    box = Box((1, 1), (4, 3))
    bordered = BorderedBox(box, Box((0, 0), (0, 0)))
    assert bordered.inner == box
    assert bordered.fronts == ()
    assert bordered.backs == ()