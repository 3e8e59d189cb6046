"""Colours and multi-stop colour lines."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from gradientgen.utils import float_div


class Color(NamedTuple):
    """An 8-bit RGB colour."""

    r: int
    g: int
    b: int


def _to_byte(value: float) -> int:
    """Convert a float to a byte, truncating and saturating; NaN becomes 0."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return int(value)


def _even_spread(count: int) -> tuple[float, ...]:
    return tuple(i / (count - 1) for i in range(count))


@dataclass(frozen=True)
class ColorLine:
    """A sequence of colour stops placed at positions in [0, 1].

    Without an explicit spread the stops are placed evenly.
    """

    colors: tuple[Color, ...]
    spread: tuple[float, ...] | None = None

    def __init__(
        self,
        colors: Iterable[Color | Sequence[int]],
        spread: Iterable[float] | None = None,
    ) -> None:
        stops = tuple(Color(*c) for c in colors)
        if len(stops) < 2:
            raise ValueError("a colour line needs at least two colours")
        positions = (
            _even_spread(len(stops))
            if spread is None
            else tuple(float(s) for s in spread)
        )
        if len(positions) != len(stops):
            raise ValueError(
                f"spread has {len(positions)} positions for {len(stops)} colours"
            )
        object.__setattr__(self, "colors", stops)
        object.__setattr__(self, "spread", positions)

    def with_spread(self, spread: Iterable[float]) -> ColorLine:
        """Return a copy whose stops sit at the given positions."""
        return ColorLine(self.colors, spread)

    def _segment(self, t: float) -> int:
        pairs = zip(self.spread, self.spread[1:])
        inner = list(pairs)[: len(self.colors) - 2]
        return next(
            (i for i, (lo, hi) in enumerate(inner) if lo <= t < hi),
            len(self.colors) - 2,
        )

    def interpolate(self, t: float) -> Color:
        """Return the colour at position ``t`` along the line."""
        if t == 1.0:
            return self.colors[-1]

        index = self._segment(t)
        lo, hi = self.spread[index], self.spread[index + 1]
        local = float_div(t - lo, hi - lo)
        start, stop = self.colors[index], self.colors[index + 1]

        return Color(
            *(
                _to_byte(a * (1.0 - local) + b * local)
                for a, b in zip(start, stop)
            )
        )