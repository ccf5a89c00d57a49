"""Storage-side collaborators of the hex grid helpers.

``TilePos`` and ``TilemapSize`` describe the bounded, rectangular array a
tilemap keeps its cells in.  ``TilemapGridSize`` describes the world-space
dimensions of a single cell and is validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True, slots=True, order=True)
class TilemapSize:
    """Number of columns (``x``) and rows (``y``) of a tilemap."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("TilemapSize dimensions must be non-negative")

    def count(self) -> int:
        return self.x * self.y

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.x and 0 <= y < self.y


@dataclass(frozen=True, slots=True, order=True)
class TilePos:
    """Index of a tile inside a tilemap's storage."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("TilePos components must be non-negative")

    @classmethod
    def from_i32_pair(cls, x: int, y: int, map_size: TilemapSize) -> TilePos | None:
        """Return a tile position if ``(x, y)`` lies inside ``map_size``."""

        if map_size.contains(x, y):
            return cls(x, y)
        return None

    def within_map_bounds(self, map_size: TilemapSize) -> bool:
        return map_size.contains(self.x, self.y)


class TilemapGridSize(BaseModel):
    """World-space width (``x``) and height (``y``) of one grid cell."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(default=1.0, gt=0.0, allow_inf_nan=False)
    y: float = Field(default=1.0, gt=0.0, allow_inf_nan=False)

    def __init__(self, x: float = 1.0, y: float = 1.0, **data: object) -> None:
        super().__init__(x=x, y=y, **data)

    @field_validator("x", "y")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)


__all__ = ["TilePos", "TilemapGridSize", "TilemapSize"]
