from __future__ import annotations

from enum import IntEnum
from typing import Iterator, TypeVar

from ..tiles import TilemapSize, TilePos
from .axial import UNIT_Q, UNIT_R, UNIT_S, AxialPos
from .coord_system import HexCoordSystem, from_axial, to_axial
from .cube import CubePos
from .offset import ColEvenPos, ColOddPos, RowEvenPos, RowOddPos

_P = TypeVar("_P", AxialPos, CubePos, RowOddPos, RowEvenPos, ColOddPos, ColEvenPos)


class HexDirection(IntEnum):
    """The six neighbour directions, counter-clockwise starting at ``+q``."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5

    @property
    def offset(self) -> AxialPos:
        return _AXIAL_DIRS[self]

    def opposite(self) -> HexDirection:
        return HexDirection((self + 3) % 6)


# +r is "up", so -UNIT_R and -UNIT_S lie counter-clockwise of UNIT_Q.
_AXIAL_DIRS = (
    UNIT_Q,
    -UNIT_R,
    -UNIT_S,
    -UNIT_Q,
    UNIT_R,
    UNIT_S,
)


def neighbors_axial(a: AxialPos) -> Iterator[AxialPos]:
    for d in _AXIAL_DIRS:
        yield a + d


def neighbor(pos: _P, direction: HexDirection | int) -> _P:
    """Neighbour of ``pos`` one step in ``direction``, in the same coordinate type."""

    step = _AXIAL_DIRS[HexDirection(direction)]
    if isinstance(pos, AxialPos):
        return pos + step
    if isinstance(pos, CubePos):
        return CubePos.from_axial(pos.to_axial() + step)
    return type(pos).from_axial(pos.to_axial() + step)


def neighbors_of(pos: _P) -> Iterator[_P]:
    """All six neighbours of ``pos``, in :class:`HexDirection` order."""

    for direction in HexDirection:
        yield neighbor(pos, direction)


def neighbor_tiles(
    tile_pos: TilePos, map_size: TilemapSize, coord_system: HexCoordSystem | str
) -> Iterator[TilePos]:
    """In-bounds neighbours of a storage index; cells off the map edge are skipped."""

    axial_pos = to_axial(tile_pos, coord_system)
    for n in neighbors_axial(axial_pos):
        tile = from_axial(n, map_size, coord_system)
        if tile is not None:
            yield tile


__all__ = [
    "HexDirection",
    "neighbor",
    "neighbor_tiles",
    "neighbors_axial",
    "neighbors_of",
]
