"""Function-based gradient parameterisations."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from gradientgen.utils import Addressing, Vec2D, float_div, normalize_range

Point = tuple[float, float]

_TAU = 2.0 * math.pi


def _signum(value: float) -> float:
    if math.isnan(value):
        return math.nan
    return math.copysign(1.0, value)


def _powf(base: float, exponent: float) -> float:
    """Raise a non-negative base to a power with IEEE results instead of errors."""
    if base == 0.0 and exponent < 0.0:
        return math.inf
    try:
        return base**exponent
    except OverflowError:
        return math.inf


def _sin(value: float) -> float:
    return math.sin(value) if math.isfinite(value) else math.nan


def _distance(origin: Point, direction: Vec2D | None, coordinate: Point) -> float:
    """Distance from ``origin``, or signed distance along ``direction`` if set."""
    v = Vec2D.between(origin, coordinate)
    if direction is None:
        return v.magnitude()
    return float_div(v.dot(direction), direction.magnitude())


@dataclass(frozen=True)
class Polynomial:
    """A power of the (possibly directional) distance from an origin."""

    origin: Point = (400.0, 400.0)
    direction: Vec2D | None = None
    exponent: float = 2.0
    max_distance: float = 400.0
    addressing: Addressing = Addressing.CLAMP

    def direct_between(self, coordinate_a: Point, coordinate_b: Point) -> Polynomial:
        """Return a copy directed from ``coordinate_a`` towards ``coordinate_b``."""
        return replace(self, direction=Vec2D.between(coordinate_a, coordinate_b))

    def t(self, coordinate: Point) -> float:
        position = float_div(
            _distance(self.origin, self.direction, coordinate), self.max_distance
        )
        value = _powf(abs(position), self.exponent) * _signum(position)
        return self.addressing.apply(value)


@dataclass(frozen=True)
class Sinusoidal:
    """A sine wave of the (possibly directional) distance, in degrees."""

    origin: Point = (400.0, 400.0)
    direction: Vec2D | None = None
    frequency: float = 1.0

    def direct_between(self, coordinate_a: Point, coordinate_b: Point) -> Sinusoidal:
        """Return a copy directed from ``coordinate_a`` towards ``coordinate_b``."""
        return replace(self, direction=Vec2D.between(coordinate_a, coordinate_b))

    def t(self, coordinate: Point) -> float:
        distance = _distance(self.origin, self.direction, coordinate)
        wave = _sin(distance * self.frequency * math.pi / 180.0)
        return normalize_range(wave, (-1.0, 1.0), (0.0, 1.0))


@dataclass(frozen=True)
class Spiral:
    """Angle around a centre, twisted by the distance from it."""

    center: Point = (400.0, 400.0)
    spiral_factor: float = 0.02
    addressing: Addressing = Addressing.WRAP

    def t(self, coordinate: Point) -> float:
        v = Vec2D.between(self.center, coordinate)
        value = (v.angle() + v.magnitude() * self.spiral_factor) / _TAU
        return self.addressing.apply(value)