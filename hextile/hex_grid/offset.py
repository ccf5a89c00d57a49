"""Offset hex coordinates.

Offset labelings line up with rectangular storage: every other row (or
column) is shoved by half a cell.  Each variant converts to and from
:class:`~hextile.hex_grid.axial.AxialPos` by shearing one axis by half of the
other:

* ``RowOddPos``:  ``q = axial.q + floor(r / 2)``
* ``RowEvenPos``: ``q = axial.q + ceil(r / 2)``
* ``ColOddPos``:  ``r = axial.r + floor(q / 2)``
* ``ColEvenPos``: ``r = axial.r + ceil(q / 2)``

Row variants map to world space with the row ("pointy top") basis, column
variants with the column ("flat top") basis.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from ..tiles import TilemapGridSize, TilemapSize, TilePos
from .axial import AxialPos, Vec2

_O = TypeVar("_O", bound="_OffsetMixin")


def floored_division_by_2(x: int) -> int:
    return x // 2


def ceiled_division_by_2(x: int) -> int:
    """Halve ``x``, rounding odd values away from zero (``-1 -> -1``, ``1 -> 1``)."""

    if x < 0:
        return -((1 - x) // 2)
    return (x + 1) // 2


class _OffsetMixin:
    """World-space and storage helpers shared by the four offset types.

    Subclasses are frozen dataclasses with ``q``/``r`` fields, a
    ``_row_oriented`` flag, a ``from_axial`` classmethod and a ``to_axial``
    method.
    """

    __slots__ = ()

    q: int
    r: int
    _row_oriented: bool

    @classmethod
    def from_tile_pos(cls: type[_O], tile_pos: TilePos) -> _O:
        return cls(tile_pos.x, tile_pos.y)  # type: ignore[call-arg]

    def center_in_world(self, grid_size: TilemapGridSize) -> Vec2:
        """Returns the position of this tile's center, in world space."""

        axial_pos = self.to_axial()
        if self._row_oriented:
            return axial_pos.center_in_world_row(grid_size)
        return axial_pos.center_in_world_col(grid_size)

    @classmethod
    def from_world_pos(
        cls: type[_O], world_pos: Sequence[float], grid_size: TilemapGridSize
    ) -> _O:
        """Returns the tile containing the given world position."""

        if cls._row_oriented:
            axial_pos = AxialPos.from_world_pos_row(world_pos, grid_size)
        else:
            axial_pos = AxialPos.from_world_pos_col(world_pos, grid_size)
        return cls.from_axial(axial_pos)

    def as_tile_pos(self, map_size: TilemapSize) -> TilePos | None:
        """Try converting into a :class:`TilePos`.

        Returns ``None`` if ``q`` or ``r`` is negative or outside ``map_size``.
        """

        return TilePos.from_i32_pair(self.q, self.r, map_size)


@dataclass(frozen=True, slots=True, order=True)
class RowOddPos(_OffsetMixin):
    q: int
    r: int

    _row_oriented = True

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> RowOddPos:
        return cls(axial_pos.q + floored_division_by_2(axial_pos.r), axial_pos.r)

    def to_axial(self) -> AxialPos:
        return AxialPos(self.q - floored_division_by_2(self.r), self.r)


@dataclass(frozen=True, slots=True, order=True)
class RowEvenPos(_OffsetMixin):
    q: int
    r: int

    _row_oriented = True

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> RowEvenPos:
        return cls(axial_pos.q + ceiled_division_by_2(axial_pos.r), axial_pos.r)

    def to_axial(self) -> AxialPos:
        return AxialPos(self.q - ceiled_division_by_2(self.r), self.r)


@dataclass(frozen=True, slots=True, order=True)
class ColOddPos(_OffsetMixin):
    q: int
    r: int

    _row_oriented = False

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> ColOddPos:
        return cls(axial_pos.q, axial_pos.r + floored_division_by_2(axial_pos.q))

    def to_axial(self) -> AxialPos:
        return AxialPos(self.q, self.r - floored_division_by_2(self.q))


@dataclass(frozen=True, slots=True, order=True)
class ColEvenPos(_OffsetMixin):
    q: int
    r: int

    _row_oriented = False

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> ColEvenPos:
        return cls(axial_pos.q, axial_pos.r + ceiled_division_by_2(axial_pos.q))

    def to_axial(self) -> AxialPos:
        return AxialPos(self.q, self.r - ceiled_division_by_2(self.q))


OFFSET_TYPES: tuple[type[_OffsetMixin], ...] = (RowOddPos, RowEvenPos, ColOddPos, ColEvenPos)

__all__ = [
    "ColEvenPos",
    "ColOddPos",
    "OFFSET_TYPES",
    "RowEvenPos",
    "RowOddPos",
    "ceiled_division_by_2",
    "floored_division_by_2",
]
