"""Axial hex coordinates and their mapping to world space.

An :class:`AxialPos` is a pair of integers ``(q, r)`` covering both the
row-oriented ("pointy top") and column-oriented ("flat top") layouts, so the
world-space helpers come in ``*_row`` and ``*_col`` flavours.  When built from
a :class:`~hextile.tiles.TilePos`, ``x`` becomes ``q`` and ``y`` becomes ``r``.

The conventions follow Red Blob Games' hexagon guide, except that positive
``r`` points *up* in world space rather than down.  Every basis constant
below assumes that sign.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ..tiles import TilemapGridSize, TilemapSize, TilePos
from .consts import DOUBLE_INV_SQRT_3, HALF_SQRT_3, INV_SQRT_3
from .cube import CubePos, FractionalCubePos

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .offset import ColEvenPos, ColOddPos, RowEvenPos, RowOddPos

    OffsetPos = RowOddPos | RowEvenPos | ColOddPos | ColEvenPos

Vec2 = tuple[float, float]


def _frozen_matrix(col_x: Sequence[float], col_y: Sequence[float]) -> np.ndarray:
    matrix = np.column_stack((col_x, col_y)).astype(np.float64)
    matrix.setflags(write=False)
    return matrix


@dataclass(frozen=True, eq=False)
class OrientationBasis:
    """Linear map from unit axial space to unit world space.

    ``matrix`` columns are the world images of unit ``q`` and unit ``r``.
    ``inverse`` is written out analytically rather than inverted numerically.
    ``scale_x``/``scale_y`` are the extra per-axis factors applied on top of
    the grid size so cells keep their spacing on non-square grids.
    """

    name: str
    matrix: np.ndarray
    inverse: np.ndarray
    scale_x: float
    scale_y: float

    def to_world(self, q: float, r: float, grid_size: TilemapGridSize) -> Vec2:
        unscaled = self.matrix @ np.array((q, r), dtype=np.float64)
        return (
            float(self.scale_x * grid_size.x * unscaled[0]),
            float(self.scale_y * grid_size.y * unscaled[1]),
        )

    def to_fractional_axial(
        self, world_pos: Sequence[float], grid_size: TilemapGridSize
    ) -> FractionalAxialPos:
        x, y = world_pos
        normalized = np.array(
            (x / (self.scale_x * grid_size.x), y / (self.scale_y * grid_size.y)),
            dtype=np.float64,
        )
        q, r = self.inverse @ normalized
        return FractionalAxialPos(float(q), float(r))


# Row format ("pointy top").  Basis vectors have magnitude 1 so grid size
# alone sets the scale.
ROW_BASIS = _frozen_matrix((1.0, 0.0), (0.5, HALF_SQRT_3))
INV_ROW_BASIS = _frozen_matrix((1.0, 0.0), (-INV_SQRT_3, DOUBLE_INV_SQRT_3))

# Column format ("flat top").
COL_BASIS = _frozen_matrix((HALF_SQRT_3, 0.5), (0.0, 1.0))
INV_COL_BASIS = _frozen_matrix((DOUBLE_INV_SQRT_3, -INV_SQRT_3), (0.0, 1.0))

ROW_ORIENTATION = OrientationBasis(
    name="row",
    matrix=ROW_BASIS,
    inverse=INV_ROW_BASIS,
    scale_x=1.0,
    scale_y=float(ROW_BASIS[1, 1]),
)
COL_ORIENTATION = OrientationBasis(
    name="column",
    matrix=COL_BASIS,
    inverse=INV_COL_BASIS,
    scale_x=float(COL_BASIS[0, 0]),
    scale_y=1.0,
)


@dataclass(frozen=True, slots=True, order=True)
class AxialPos:
    """Axial hex coordinate.

    Vector-like: positions can be added and subtracted, negated, and
    multiplied by an integer scalar.
    """

    q: int
    r: int

    @classmethod
    def from_tile_pos(cls, tile_pos: TilePos) -> AxialPos:
        return cls(tile_pos.x, tile_pos.y)

    @classmethod
    def from_cube(cls, cube_pos: CubePos) -> AxialPos:
        return cls(cube_pos.q, cube_pos.r)

    @classmethod
    def from_offset(cls, offset_pos: OffsetPos) -> AxialPos:
        return offset_pos.to_axial()

    def to_cube(self) -> CubePos:
        return CubePos.from_axial(self)

    def __add__(self, other: object) -> AxialPos:
        if not isinstance(other, AxialPos):
            return NotImplemented
        return AxialPos(self.q + other.q, self.r + other.r)

    def __sub__(self, other: object) -> AxialPos:
        if not isinstance(other, AxialPos):
            return NotImplemented
        return AxialPos(self.q - other.q, self.r - other.r)

    def __mul__(self, scalar: object) -> AxialPos:
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        return AxialPos(scalar * self.q, scalar * self.r)

    __rmul__ = __mul__

    def __neg__(self) -> AxialPos:
        return AxialPos(-self.q, -self.r)

    def magnitude(self) -> int:
        """Distance from the ``(0, 0)`` cell, measured in cells."""

        return self.to_cube().magnitude()

    def distance_from(self, other: AxialPos) -> int:
        return (self - other).magnitude()

    def center_in_world_row(self, grid_size: TilemapGridSize) -> Vec2:
        """Centre of this cell in world space for row-oriented tiles.

        The centre of ``(0, 0)`` sits at the world origin.
        """

        return ROW_ORIENTATION.to_world(self.q, self.r, grid_size)

    def center_in_world_col(self, grid_size: TilemapGridSize) -> Vec2:
        """Centre of this cell in world space for column-oriented tiles."""

        return COL_ORIENTATION.to_world(self.q, self.r, grid_size)

    @classmethod
    def from_world_pos_row(
        cls, world_pos: Sequence[float], grid_size: TilemapGridSize
    ) -> AxialPos:
        """Cell containing ``world_pos`` for row-oriented tiles."""

        return ROW_ORIENTATION.to_fractional_axial(world_pos, grid_size).round()

    @classmethod
    def from_world_pos_col(
        cls, world_pos: Sequence[float], grid_size: TilemapGridSize
    ) -> AxialPos:
        """Cell containing ``world_pos`` for column-oriented tiles."""

        return COL_ORIENTATION.to_fractional_axial(world_pos, grid_size).round()

    def as_tile_pos(self, map_size: TilemapSize) -> TilePos | None:
        """Try converting into a :class:`TilePos`.

        Returns ``None`` if ``q`` or ``r`` is negative or outside ``map_size``.
        """

        return TilePos.from_i32_pair(self.q, self.r, map_size)


UNIT_Q = AxialPos(1, 0)
UNIT_R = AxialPos(0, -1)
UNIT_S = AxialPos(1, -1)


@dataclass(frozen=True, slots=True, order=True)
class FractionalAxialPos:
    """A point inside a hexagon, usually a world position mapped into hex space."""

    q: float
    r: float

    @classmethod
    def from_vec2(cls, vec: Sequence[float]) -> FractionalAxialPos:
        q, r = vec
        return cls(float(q), float(r))

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> FractionalAxialPos:
        return cls(float(axial_pos.q), float(axial_pos.r))

    def to_fractional_cube(self) -> FractionalCubePos:
        return FractionalCubePos.from_fractional_axial(self)

    def round(self) -> AxialPos:
        return AxialPos.from_cube(self.to_fractional_cube().round())


__all__ = [
    "AxialPos",
    "COL_BASIS",
    "COL_ORIENTATION",
    "FractionalAxialPos",
    "INV_COL_BASIS",
    "INV_ROW_BASIS",
    "OrientationBasis",
    "ROW_BASIS",
    "ROW_ORIENTATION",
    "UNIT_Q",
    "UNIT_R",
    "UNIT_S",
    "Vec2",
]
