"""Shape-based gradient parameterisations."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from gradientgen.utils import Addressing, Vec2D, float_div

Point = tuple[float, float]

_TAU = 2.0 * math.pi


@dataclass(frozen=True)
class Conical:
    """Sweeps through the colours by angle around a centre."""

    center: Point = (0.0, 0.0)
    theta_0: float = 0.0

    def t(self, coordinate: Point) -> float:
        angle = Vec2D.between(self.center, coordinate).angle() - self.theta_0
        angle = math.fmod(math.fmod(angle, _TAU) + _TAU, _TAU)
        return angle / _TAU


@dataclass(frozen=True)
class Diamond:
    """Taxicab distance from a centre."""

    center: Point = (400.0, 400.0)
    max_distance: float = 400.0
    addressing: Addressing = Addressing.CLAMP

    def t(self, coordinate: Point) -> float:
        distance = abs(coordinate[0] - self.center[0]) + abs(
            coordinate[1] - self.center[1]
        )
        return self.addressing.apply(float_div(distance, self.max_distance))


@dataclass(frozen=True)
class Linear:
    """Projection onto the line from ``start`` to ``end``."""

    start: Point = (0.0, 0.0)
    end: Point = (800.0, 800.0)
    addressing: Addressing = Addressing.CLAMP

    def t(self, coordinate: Point) -> float:
        d = Vec2D.between(self.start, self.end)
        v = Vec2D.between(self.start, coordinate)
        return self.addressing.apply(float_div(d.dot(v), d.dot(d)))


@dataclass(frozen=True)
class Radial:
    """Euclidean distance from a centre relative to a radius."""

    center: Point = (400.0, 400.0)
    radius: float = math.sqrt(400.0**2 + 400.0**2)
    addressing: Addressing = Addressing.CLAMP

    def with_radius_to(self, coordinate: Point) -> Radial:
        """Return a copy whose radius reaches from the centre to ``coordinate``."""
        dx = coordinate[0] - self.center[0]
        dy = coordinate[1] - self.center[1]
        return replace(self, radius=math.sqrt(dx * dx + dy * dy))

    def t(self, coordinate: Point) -> float:
        distance = Vec2D.between(coordinate, self.center).magnitude()
        return self.addressing.apply(float_div(distance, self.radius))


@dataclass(frozen=True)
class Square:
    """Chebyshev distance from a centre."""

    center: Point = (400.0, 400.0)
    max_distance: float = 400.0
    addressing: Addressing = Addressing.CLAMP

    def t(self, coordinate: Point) -> float:
        distance = max(
            abs(coordinate[0] - self.center[0]),
            abs(coordinate[1] - self.center[1]),
        )
        return self.addressing.apply(float_div(distance, self.max_distance))