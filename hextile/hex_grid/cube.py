from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .axial import AxialPos, FractionalAxialPos


def _round_half_away(value: float) -> int:
    nearest = round(value)
    if abs(value - nearest) == 0.5:
        return math.trunc(value) + int(math.copysign(1, value))
    return int(nearest)


@dataclass(frozen=True, slots=True, order=True)
class CubePos:
    """Cube coordinate ``(q, r, s)`` with ``q + r + s == 0``.

    Build one with :meth:`from_axial` or by rounding a
    :class:`FractionalCubePos`; both keep the invariant by construction.
    """

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise ValueError("For cube coords, q + r + s must be 0")

    @classmethod
    def from_axial(cls, axial_pos: AxialPos) -> CubePos:
        q, r = axial_pos.q, axial_pos.r
        return cls(q, r, -q - r)

    def to_axial(self) -> AxialPos:
        from .axial import AxialPos

        return AxialPos(self.q, self.r)

    def magnitude(self) -> int:
        """Distance from the origin cell, in cells."""

        return (abs(self.q) + abs(self.r) + abs(self.s)) // 2

    def distance_from(self, other: CubePos) -> int:
        return CubePos(self.q - other.q, self.r - other.r, self.s - other.s).magnitude()


@dataclass(frozen=True, slots=True, order=True)
class FractionalCubePos:
    """A point inside hex space, in cube form.

    The three components only approximately sum to zero.
    """

    q: float
    r: float
    s: float

    @classmethod
    def from_fractional_axial(cls, frac_pos: FractionalAxialPos) -> FractionalCubePos:
        q, r = frac_pos.q, frac_pos.r
        return cls(q, r, -q - r)

    def round(self) -> CubePos:
        """Return the cube position of the cell containing this point.

        Each axis is rounded independently (halves away from zero), then the
        axis that moved furthest is recomputed from the other two.  Ties keep
        the later axis: ``q`` is recomputed only when its residual is strictly
        the largest, and ``s`` wins a tie against ``r``.
        """

        qi, ri, si = (
            _round_half_away(self.q),
            _round_half_away(self.r),
            _round_half_away(self.s),
        )
        dq, dr, ds = abs(qi - self.q), abs(ri - self.r), abs(si - self.s)
        if dq > dr and dq > ds:
            qi = -ri - si
        elif dr > ds:
            ri = -qi - si
        else:
            si = -qi - ri
        return CubePos(qi, ri, si)


__all__ = ["CubePos", "FractionalCubePos"]
