"""Noise-based gradient parameterisations."""

from __future__ import annotations

import math
import random
import struct
from dataclasses import dataclass, field

from gradientgen.utils import Easing, Vec2D, float_div, normalize_range

Point = tuple[float, float]

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1
_MASK64 = _U64_MAX


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def _sip_round(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK64
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK64
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK64
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK64
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def _siphash13(data: bytes, k0: int = 0, k1: int = 0) -> int:
    """SipHash-1-3 of ``data``; with zero keys this is the default stable hash."""
    v0 = k0 ^ 0x736F6D6570736575
    v1 = k1 ^ 0x646F72616E646F6D
    v2 = k0 ^ 0x6C7967656E657261
    v3 = k1 ^ 0x7465646279746573

    full = len(data) - len(data) % 8
    for offset in range(0, full, 8):
        (m,) = struct.unpack_from("<Q", data, offset)
        v3 ^= m
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        v0 ^= m

    tail = data[full:].ljust(8, b"\0")
    b = ((len(data) & 0xFF) << 56) | int.from_bytes(tail, "little")
    v3 ^= b
    v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    v0 ^= b
    v2 ^= 0xFF
    for _ in range(3):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    return v0 ^ v1 ^ v2 ^ v3


def _unit_hash(data: bytes) -> float:
    """Hash ``data`` to a float in [0, 1]."""
    return float(_siphash13(data)) / float(_U64_MAX)


def _saturate(value: float, maximum: int) -> int:
    """Truncate a float to an unsigned integer, saturating; NaN becomes 0."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= maximum:
        return maximum
    return int(value)


def _floor(value: float) -> float:
    return float(math.floor(value)) if math.isfinite(value) else value


def _random_seed() -> int:
    return random.getrandbits(64)


@dataclass(frozen=True)
class PerlinNoise:
    """Layered gradient noise on a square grid, deterministic for a seed."""

    grid_size: tuple[int, int] = (400, 400)
    n_octaves: int = 1
    random_octave_layering: bool = True
    seed: int = field(default_factory=_random_seed)

    def __post_init__(self) -> None:
        if self.n_octaves < 0:
            raise ValueError("n_octaves must not be negative")
        scale = 2**self.n_octaves
        if any(size // scale < 1 for size in self.grid_size):
            raise ValueError(
                f"grid size {self.grid_size} is too small for {self.n_octaves} octaves"
            )

    def _gradient_vector(self, corner: tuple[int, int], octave: int) -> Vec2D:
        data = struct.pack(
            "<QII",
            self.seed & _MASK64,
            corner[0] & _U32_MAX,
            corner[1] & _U32_MAX,
        )
        if self.random_octave_layering:
            data += struct.pack("<I", octave & _U32_MAX)
        theta = _unit_hash(data) * math.tau
        return Vec2D(math.cos(theta), math.sin(theta))

    def _octave(self, coordinate: Point, octave: int) -> float:
        scale = 2**octave
        gx = int(self.grid_size[0] / scale)
        gy = int(self.grid_size[1] / scale)
        x, y = coordinate

        cell_x = _saturate(_floor(x / gx), _U32_MAX)
        cell_y = _saturate(_floor(y / gy), _U32_MAX)
        x0 = (cell_x * gx) & _U32_MAX
        y0 = (cell_y * gy) & _U32_MAX
        x1 = (x0 + gx) & _U32_MAX
        y1 = (y0 + gy) & _U32_MAX

        # corners: left-top, right-top, right-bottom, left-bottom
        corners = ((x0, y0), (x1, y0), (x1, y1), (x0, y1))
        influences = [
            self._gradient_vector(corner, octave).dot(
                Vec2D((x - corner[0]) / gx, (y - corner[1]) / gy)
            )
            for corner in corners
        ]
        i0, i1, i2, i3 = influences

        d_x = Easing.SMOOTHSTEP.apply((x - x0) / gx)
        d_y = Easing.SMOOTHSTEP.apply((y - y0) / gy)
        top = i0 + d_x * (i1 - i0)
        bottom = i3 + d_x * (i2 - i3)
        raw = top + d_y * (bottom - top)
        return normalize_range(raw, (-1.0, 1.0), (0.0, 1.0)) / scale

    def t(self, coordinate: Point) -> float:
        return sum(
            self._octave(coordinate, octave) for octave in range(self.n_octaves + 1)
        )


@dataclass(frozen=True)
class RandomNoise:
    """Independent pseudo-random values per cell, deterministic for a seed."""

    seed: int = field(default_factory=_random_seed)
    frequency: float = 1.0

    def t(self, coordinate: Point) -> float:
        scaled_x = _saturate(_floor(coordinate[0] * self.frequency), _U64_MAX)
        scaled_y = _saturate(_floor(coordinate[1] * self.frequency), _U64_MAX)
        data = struct.pack("<QQQ", self.seed & _MASK64, scaled_x, scaled_y)
        return float_div(float(_siphash13(data)), float(_U64_MAX))