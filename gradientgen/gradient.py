"""Rendering of a gradient parameterisation through a colour line."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable

from PIL import Image

from gradientgen.color import Color, ColorLine
from gradientgen.utils import Easing

_log = logging.getLogger(__name__)

Point = tuple[float, float]


@runtime_checkable
class GradientParam(Protocol):
    """Anything that maps a pixel coordinate to a parameter ``t``."""

    def t(self, coordinate: Point) -> float:
        """Return the gradient parameter at ``coordinate``."""
        ...


@dataclass(frozen=True)
class GradientConfig:
    """Settings applied to every parameter before colouring."""

    easing: Easing = Easing.LINEAR


@dataclass(frozen=True)
class Gradient:
    """A gradient image of a given size, coloured along a colour line."""

    method: GradientParam
    colors: ColorLine
    height: int = 800
    width: int = 800
    config: GradientConfig = field(default_factory=GradientConfig)

    def resized(self, height: int, width: int) -> Gradient:
        """Return a copy with a different size."""
        return replace(self, height=height, width=width)

    def configured(self, config: GradientConfig) -> Gradient:
        """Return a copy with a different configuration."""
        return replace(self, config=config)

    def _param(self, x: int, y: int) -> float:
        return self.config.easing.apply(self.method.t((float(x), float(y))))

    def _row(self, y: int, width: int) -> Iterator[tuple[float, Color]]:
        for x in range(width):
            t = self._param(x, y)
            yield t, self.colors.interpolate(t)

    def to_image(self) -> Image.Image:
        """Render the full gradient as an RGB image."""
        low, high = math.inf, -math.inf
        pixels: list[Color] = []
        for y in range(self.height):
            for t, color in self._row(y, self.width):
                low = min(low, t)
                high = max(high, t)
                pixels.append(color)

        image = Image.new("RGB", (self.width, self.height))
        image.putdata([tuple(c) for c in pixels])
        _log.info("Min%s", low)
        _log.info("Max%s", high)
        return image

    def to_matrix(self) -> list[list[Color]]:
        """Return rows of colours, leaving out the last row and column."""
        if self.height < 1 or self.width < 1:
            raise ValueError("a gradient matrix needs a non-zero size")
        return [
            [color for _, color in self._row(y, self.width - 1)]
            for y in range(self.height - 1)
        ]