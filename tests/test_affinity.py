import numpy as np
import pytest

from ndraster.affinity import (
    Affinity,
    center,
    downsample,
    inverse,
    rotate_deg,
    scale,
    translate,
    upsample,
)
from ndraster.box import Box, clamp_to_shape
from ndraster.exceptions import LinxError
from ndraster.interpolation import Cubic, Linear, Nearest, interpolation
from ndraster.raster import Raster


class _Patch:
    """A box-shaped window on a raster, writable by position."""

    def __init__(self, raster, box):
        self._raster = raster
        self._box = box

    def domain(self):
        return self._box

    def __setitem__(self, position, value):
        self._raster[position] = value


def test_translation():
    vector = (0, 1, 2)
    translation = Affinity.translation(vector)
    assert translation((3, 4, 5)) == (3.0, 5.0, 7.0)


def test_scaling_origin():
    scaling = Affinity.scaling((0, 1, 2))
    assert scaling((3, 4, 5)) == (0.0, 4.0, 10.0)


@pytest.mark.parametrize(
    "from_axis, to_axis, expected",
    [
        (1, 2, (3, -5, 4)),
        (2, 0, (5, 4, -3)),
        (0, 1, (-4, 3, 5)),
        (1, 0, (4, -3, 5)),
    ],
)
def test_rotation_origin_90(from_axis, to_axis, expected):
    rotation = Affinity.rotation_deg(90, from_axis, to_axis, (0, 0, 0))
    assert rotation((3, 4, 5)) == pytest.approx(expected, abs=1e-6)


def test_rotation_int_90z():
    rotation = Affinity.rotation_deg(90, 0, 1, (0, 1, 2))
    assert rotation((3, 4, 5)) == pytest.approx((-3, 4, 5), abs=1e-6)


def test_rotation_float_90z():
    rotation = Affinity.rotation_deg(90, 0, 1, (1.5, 1.5, 0))
    assert rotation((3, 4, 5)) == pytest.approx((-1, 3, 5), abs=1e-6)


def test_raster_scaling_center_2():
    source = Raster((3, 3, 3, 3), dtype=np.int64).range()
    scaling = Affinity.scaling(2, (1, 1, 1, 1))
    out = scaling.warp(source, Cubic)
    out2 = scale(source, 2, Cubic)
    out_nn = interpolation(out, Nearest)
    out2_nn = interpolation(out2, Nearest)
    checked = 0
    for p in source.domain():
        q = scaling(p)
        if source.contains(q):
            assert out_nn(q) == source[p]
            assert out2_nn(q) == source[p]
            checked += 1
    assert checked == 1


def test_raster_rotation_center_90z():
    source = Raster((4, 4), dtype=np.int64).range()
    rotation = Affinity.rotation_deg(90, 0, 1, (1.5, 1.5))
    out = rotation.warp(source, Nearest)
    out2 = rotate_deg(source, 90, Nearest)
    out_nn = interpolation(out, Nearest)
    out2_nn = interpolation(out2, Nearest)
    checked = 0
    for p in source.domain():
        q = rotation(p)
        if source.contains(q):
            assert out_nn(q) == source[p]
            assert out2_nn(q) == source[p]
            checked += 1
    assert checked == 16


def test_patch_rotation_center_30z():
    source = Raster((5, 5), dtype=np.int64).range()
    interpolator = interpolation(source, Linear)
    rotation = Affinity.rotation_deg(30, 0, 1, (2, 2))
    inv = inverse(rotation)
    out = Raster((5, 5), dtype=float)
    region = Box((1, 1), (3, 3))
    rotation.transform(interpolator, _Patch(out, region))
    for p in out.domain():
        if region.contains(p):
            assert out[p] == interpolator(inv(p))
        else:
            assert out[p] == 0


@pytest.mark.parametrize(
    "factor, offset, expected_shape",
    [(1.5, 0.75, (4, 3)), (2, 1, (6, 4)), (3, 1.5, (9, 6))],
)
def test_raster_upsampling(factor, offset, expected_shape):
    source = Raster((3, 2), dtype=float).range()
    out = upsample(source, factor, Nearest)
    assert out.shape() == expected_shape
    for p in out.domain():
        q = tuple((c + offset) / factor for c in p)
        r = clamp_to_shape(tuple(int(v) for v in q), source.shape())
        assert out[p] == source[r]


def test_raster_upsampling_partial():
    source = Raster((3, 2, 4), dtype=float).range()
    out = upsample(source, 3, Nearest)
    assert out.shape() == (9, 6, 4)
    for p in out.domain():
        q = [int((c + 1.5) / 3) for c in p]
        q[2] = p[2]
        r = clamp_to_shape(tuple(q), source.shape())
        assert out[p] == source[r]


def test_raster_upsampling_full():
    source = Raster((3, 2, 4), dtype=float).range()
    out = upsample(source, 3, Nearest, 3)
    assert out.shape() == (9, 6, 12)
    for p in out.domain():
        q = tuple(int((c + 1.5) / 3) for c in p)
        r = clamp_to_shape(q, source.shape())
        assert out[p] == source[r]


def test_inverse_round_trip_and_original_unchanged():
    affinity = Affinity.rotation_deg(30, 0, 1, (1, 2))
    affinity *= (2, 3)
    affinity += (1, -1)
    before = affinity.linear_map
    backward = inverse(affinity)
    x = (0.5, 7.25)
    assert backward(affinity(x)) == pytest.approx(x)
    assert np.array_equal(affinity.linear_map, before)


def test_scalar_and_vector_operators():
    affinity = Affinity(dimension=2)
    affinity += 1
    affinity -= (0, 2)
    affinity *= 4
    affinity /= (2, 1)
    assert affinity.translation_vector == (1.0, -1.0)
    assert affinity((1, 1)) == (3.0, 3.0)


def test_division_by_zero_raises():
    affinity = Affinity(dimension=2)
    with pytest.raises(ZeroDivisionError):
        affinity /= 0
    assert affinity.linear_map.tolist() == [[1.0, 0.0], [0.0, 1.0]]
    assert affinity((2, 3)) == (2.0, 3.0)


def test_singular_inversion_raises():
    affinity = Affinity.scaling(0)
    with pytest.raises(LinxError):
        affinity.invert()


def test_dimension_mismatch_raises():
    affinity = Affinity.translation((1, 2))
    with pytest.raises(ValueError):
        affinity((1, 2, 3))


def test_center_of_raster():
    assert center(Raster((4, 3))) == (1.5, 1.0)


def test_translate_by_integer_vector():
    source = Raster((3, 3), dtype=np.int64).range()
    out = translate(source, (1, 0), Nearest)
    for x, y in out.domain():
        assert out[x, y] == source[max(x - 1, 0), y]


def test_downsample_shape():
    source = Raster((4, 6), dtype=float).range()
    out = downsample(source, 2, Nearest)
    assert out.shape() == (2, 3)
    assert out[0, 0] == source[0, 0]