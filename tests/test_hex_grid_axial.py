import itertools

import pytest

from hextile.hex_grid import UNIT_Q, UNIT_R, UNIT_S, AxialPos, FractionalAxialPos
from hextile.tiles import TilemapSize, TilePos

SAMPLE = [AxialPos(q, r) for q, r in itertools.product(range(-3, 4), repeat=2)]


def test_add_sub_and_scale():
    a = AxialPos(2, -1)
    b = AxialPos(-3, 4)
    assert a + b == AxialPos(-1, 3)
    assert a - b == AxialPos(5, -5)
    assert 3 * a == AxialPos(6, -3)
    assert a * -2 == AxialPos(-4, 2)
    assert -a == AxialPos(-2, 1)


def test_arithmetic_rejects_foreign_operands():
    with pytest.raises(TypeError):
        AxialPos(1, 1) + (1, 1)
    with pytest.raises(TypeError):
        AxialPos(1, 1) * 1.5


def test_unit_vectors():
    assert UNIT_Q + UNIT_R == UNIT_S
    assert UNIT_Q.magnitude() == UNIT_R.magnitude() == UNIT_S.magnitude() == 1


def test_magnitude_and_distance():
    assert AxialPos(0, 0).magnitude() == 0
    assert AxialPos(2, -1).magnitude() == 2
    assert AxialPos(0, 0).distance_from(AxialPos(2, -1)) == 2
    assert AxialPos(-2, 3).distance_from(AxialPos(1, -1)) == 4


@pytest.mark.parametrize("a", SAMPLE)
def test_distance_identity_and_symmetry(a: AxialPos):
    assert a.distance_from(a) == 0
    for b in SAMPLE:
        assert a.distance_from(b) == b.distance_from(a)
        assert (a.distance_from(b) == 0) == (a == b)


def test_triangle_inequality():
    points = SAMPLE[::3]
    for a, b, c in itertools.product(points, repeat=3):
        assert a.distance_from(c) <= a.distance_from(b) + b.distance_from(c)


@pytest.mark.parametrize("a", SAMPLE)
def test_fractional_round_is_stable_on_integers(a: AxialPos):
    assert FractionalAxialPos.from_axial(a).round() == a


def test_fractional_from_vec2_rounds_to_nearest_cell():
    assert FractionalAxialPos.from_vec2((0.9, 0.1)).round() == AxialPos(1, 0)
    assert FractionalAxialPos.from_vec2((-0.2, -0.9)).round() == AxialPos(0, -1)


def test_ordering_and_hashing():
    assert sorted([AxialPos(1, 0), AxialPos(0, 5), AxialPos(0, -1)]) == [
        AxialPos(0, -1),
        AxialPos(0, 5),
        AxialPos(1, 0),
    ]
    lookup = {AxialPos(1, 2): "a"}
    assert lookup[AxialPos(1, 2)] == "a"


def test_tile_pos_roundtrip_and_bounds():
    map_size = TilemapSize(4, 3)
    a = AxialPos.from_tile_pos(TilePos(3, 2))
    assert a == AxialPos(3, 2)
    assert a.as_tile_pos(map_size) == TilePos(3, 2)
    assert AxialPos(-1, 0).as_tile_pos(map_size) is None
    assert AxialPos(0, -1).as_tile_pos(map_size) is None
    assert AxialPos(4, 0).as_tile_pos(map_size) is None
    assert AxialPos(0, 3).as_tile_pos(map_size) is None


def test_negative_q_is_out_of_bounds_for_any_map():
    for size in (TilemapSize(0, 0), TilemapSize(1, 1), TilemapSize(100, 100)):
        assert AxialPos(-1, 0).as_tile_pos(size) is None
