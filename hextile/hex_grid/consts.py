from __future__ import annotations

from math import sqrt

SQRT_3 = sqrt(3.0)
HALF_SQRT_3 = SQRT_3 / 2.0
INV_SQRT_3 = 1.0 / SQRT_3
DOUBLE_INV_SQRT_3 = 2.0 / SQRT_3
