from __future__ import annotations

from typing import TypeVar

from ..tiles import TilemapSize, TilePos
from .axial import AxialPos
from .cube import CubePos
from .offset import OFFSET_TYPES, ColEvenPos, ColOddPos, RowEvenPos, RowOddPos

OffsetPos = RowOddPos | RowEvenPos | ColOddPos | ColEvenPos
_O = TypeVar("_O", RowOddPos, RowEvenPos, ColOddPos, ColEvenPos)


def cube_from_axial(a: AxialPos) -> CubePos:
    return CubePos.from_axial(a)


def axial_from_cube(c: CubePos) -> AxialPos:
    return AxialPos.from_cube(c)


def offset_from_axial(a: AxialPos, offset_type: type[_O]) -> _O:
    if offset_type not in OFFSET_TYPES:
        raise ValueError(f"Unknown offset type: {offset_type!r}")
    return offset_type.from_axial(a)


def axial_from_offset(o: OffsetPos) -> AxialPos:
    return o.to_axial()


def as_storage_index(
    pos: AxialPos | OffsetPos, map_size: TilemapSize
) -> TilePos | None:
    """Storage index of ``pos``, or ``None`` when it falls outside ``map_size``."""

    return pos.as_tile_pos(map_size)


__all__ = [
    "OffsetPos",
    "as_storage_index",
    "axial_from_cube",
    "axial_from_offset",
    "cube_from_axial",
    "offset_from_axial",
]
