"""Addressing modes, easing curves and a small 2-D vector type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def float_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: division by zero yields inf or NaN."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _floor(t: float) -> float:
    return float(math.floor(t)) if math.isfinite(t) else t


def _as_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if value <= _I32_MIN:
        return _I32_MIN
    if value >= _I32_MAX:
        return _I32_MAX
    return int(value)


class Addressing(Enum):
    """How a parameter outside [0, 1] is brought back into range."""

    CLAMP = "clamp"
    WRAP = "wrap"
    MIRROR = "mirror"

    def apply(self, t: float) -> float:
        if self is Addressing.CLAMP:
            if math.isnan(t):
                return 0.0
            return min(max(t, 0.0), 1.0)
        if self is Addressing.WRAP:
            result = t - _floor(t)
            return 1.0 if result == 0.0 and t > 0.0 else result
        wrapped = abs(t - _floor(t))
        return wrapped if _as_i32(_floor(t)) % 2 == 0 else 1.0 - wrapped


class Easing(Enum):
    """Easing curves applied to a parameter in [0, 1]."""

    LINEAR = "linear"
    SMOOTHSTEP = "smoothstep"
    SMOOTHERSTEP = "smootherstep"

    def apply(self, t: float) -> float:
        if self is Easing.LINEAR:
            return t
        if self is Easing.SMOOTHSTEP:
            return 3.0 * t * t - 2.0 * t * t * t
        return 6.0 * t**5 - 15.0 * t**4 + 10.0 * t**3


def normalize_range(
    t: float,
    current_range: tuple[float, float],
    desired_range: tuple[float, float],
) -> float:
    """Map ``t`` linearly from ``current_range`` onto ``desired_range``."""
    lo, hi = current_range
    new_lo, new_hi = desired_range
    return float_div(t - lo, hi - lo) * (new_hi - new_lo) + new_lo


@dataclass(frozen=True)
class Vec2D:
    """A two-dimensional vector."""

    x: float
    y: float

    @classmethod
    def between(
        cls,
        coordinate_a: tuple[float, float],
        coordinate_b: tuple[float, float],
    ) -> Vec2D:
        """The vector pointing from ``coordinate_a`` to ``coordinate_b``."""
        return cls(
            coordinate_b[0] - coordinate_a[0],
            coordinate_b[1] - coordinate_a[1],
        )

    def __add__(self, other: Vec2D) -> Vec2D:
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2D) -> Vec2D:
        return Vec2D(self.x - other.x, self.y - other.y)

    def dot(self, other: Vec2D) -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def angle(self) -> float:
        """Angle from the positive x axis, in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)