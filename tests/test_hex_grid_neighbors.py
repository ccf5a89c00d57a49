import pytest

from hextile.hex_grid import (
    AxialPos,
    ColEvenPos,
    ColOddPos,
    CubePos,
    HexCoordSystem,
    HexDirection,
    RowEvenPos,
    RowOddPos,
    neighbor,
    neighbor_tiles,
    neighbors_axial,
    neighbors_of,
)
from hextile.tiles import TilemapGridSize, TilemapSize, TilePos


def test_neighbors_axial_six():
    n = list(neighbors_axial(AxialPos(0, 0)))
    assert len(n) == 6
    assert AxialPos(1, 0) in n
    assert AxialPos(0, 1) in n
    assert all(a.distance_from(AxialPos(0, 0)) == 1 for a in n)


def test_directions_are_counter_clockwise_in_row_orientation():
    grid_size = TilemapGridSize(1.0, 1.0)
    centres = [d.offset.center_in_world_row(grid_size) for d in HexDirection]
    assert centres[0][1] == pytest.approx(0.0) and centres[0][0] > 0
    assert centres[1][0] > 0 and centres[1][1] > 0
    assert centres[2][0] < 0 and centres[2][1] > 0
    assert centres[4][1] < 0


def test_opposite_direction():
    for d in HexDirection:
        assert d.offset + d.opposite().offset == AxialPos(0, 0)


@pytest.mark.parametrize(
    "pos",
    [AxialPos(2, -1), CubePos(2, -1, -1), RowOddPos(3, 3), RowEvenPos(-2, 5), ColOddPos(4, 1), ColEvenPos(-3, -3)],
)
def test_neighbors_keep_type_and_are_adjacent(pos):
    origin = pos if isinstance(pos, AxialPos) else pos.to_axial()
    n = list(neighbors_of(pos))
    assert len(set(n)) == 6
    for cell in n:
        assert type(cell) is type(pos)
        axial = cell if isinstance(cell, AxialPos) else cell.to_axial()
        assert axial.distance_from(origin) == 1


def test_neighbor_accepts_plain_index():
    assert neighbor(AxialPos(0, 0), 3) == AxialPos(-1, 0)


def test_row_odd_neighbors_match_offset_layout():
    # Odd rows are shoved right, so an odd row's diagonal neighbours are at q and q + 1.
    n = {(o.q, o.r) for o in neighbors_of(RowOddPos(4, 5))}
    assert n == {(3, 5), (5, 5), (4, 4), (5, 4), (4, 6), (5, 6)}
    n = {(o.q, o.r) for o in neighbors_of(RowOddPos(4, 4))}
    assert n == {(3, 4), (5, 4), (3, 3), (4, 3), (3, 5), (4, 5)}


def test_neighbor_tiles_at_corner_are_bounded():
    map_size = TilemapSize(4, 4)
    tiles = set(neighbor_tiles(TilePos(0, 0), map_size, HexCoordSystem.ROW))
    assert tiles == {TilePos(1, 0), TilePos(0, 1)}


def test_neighbor_tiles_interior_has_six():
    map_size = TilemapSize(8, 8)
    for system in HexCoordSystem:
        assert len(list(neighbor_tiles(TilePos(4, 4), map_size, system))) == 6
