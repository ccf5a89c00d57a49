"""Dispatch between tile storage indices and the six hex labelings."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from ..tiles import TilemapGridSize, TilemapSize, TilePos
from .axial import AxialPos, Vec2
from .offset import ColEvenPos, ColOddPos, RowEvenPos, RowOddPos


class HexCoordSystem(str, Enum):
    """How a tilemap labels its hexagonal cells.

    ``ROW`` and ``COLUMN`` store axial coordinates directly; the other four
    store one of the offset labelings.
    """

    ROW = "row"
    ROW_EVEN = "row_even"
    ROW_ODD = "row_odd"
    COLUMN = "column"
    COLUMN_EVEN = "column_even"
    COLUMN_ODD = "column_odd"

    @property
    def is_row(self) -> bool:
        return self in (HexCoordSystem.ROW, HexCoordSystem.ROW_EVEN, HexCoordSystem.ROW_ODD)

    @property
    def is_column(self) -> bool:
        return not self.is_row


_OFFSET_TYPES = {
    HexCoordSystem.ROW_EVEN: RowEvenPos,
    HexCoordSystem.ROW_ODD: RowOddPos,
    HexCoordSystem.COLUMN_EVEN: ColEvenPos,
    HexCoordSystem.COLUMN_ODD: ColOddPos,
}


def _coerce(coord_system: HexCoordSystem | str) -> HexCoordSystem:
    try:
        return HexCoordSystem(coord_system)
    except ValueError:
        raise ValueError(f"Unknown hex coordinate system: {coord_system!r}") from None


def to_axial(tile_pos: TilePos, coord_system: HexCoordSystem | str) -> AxialPos:
    """Interpret a storage index under ``coord_system`` and return its axial position."""

    system = _coerce(coord_system)
    offset_type = _OFFSET_TYPES.get(system)
    if offset_type is None:
        return AxialPos.from_tile_pos(tile_pos)
    return offset_type.from_tile_pos(tile_pos).to_axial()


def from_axial(
    axial_pos: AxialPos, map_size: TilemapSize, coord_system: HexCoordSystem | str
) -> TilePos | None:
    """Storage index of ``axial_pos`` under ``coord_system``, if inside the map."""

    system = _coerce(coord_system)
    offset_type = _OFFSET_TYPES.get(system)
    if offset_type is None:
        return axial_pos.as_tile_pos(map_size)
    return offset_type.from_axial(axial_pos).as_tile_pos(map_size)


def center_in_world(
    tile_pos: TilePos, grid_size: TilemapGridSize, coord_system: HexCoordSystem | str
) -> Vec2:
    """World-space centre of ``tile_pos``; the centre of tile ``(0, 0)`` is the origin."""

    system = _coerce(coord_system)
    axial_pos = to_axial(tile_pos, system)
    if system.is_row:
        return axial_pos.center_in_world_row(grid_size)
    return axial_pos.center_in_world_col(grid_size)


def tile_from_world_pos(
    world_pos: Sequence[float],
    grid_size: TilemapGridSize,
    map_size: TilemapSize,
    coord_system: HexCoordSystem | str,
) -> TilePos | None:
    """Tile containing ``world_pos``, or ``None`` when that cell lies outside the map."""

    system = _coerce(coord_system)
    if system.is_row:
        axial_pos = AxialPos.from_world_pos_row(world_pos, grid_size)
    else:
        axial_pos = AxialPos.from_world_pos_col(world_pos, grid_size)
    return from_axial(axial_pos, map_size, system)


__all__ = [
    "HexCoordSystem",
    "center_in_world",
    "from_axial",
    "tile_from_world_pos",
    "to_axial",
]
