"""An animal's eye: turns nearby food into per-cell signal strengths.

Vision is computed in single precision, so the cell a pellet falls into
at a boundary is decided the same way as for 32-bit positions and angles.
"""

from __future__ import annotations

import math
import struct
from typing import Callable, Iterable, Sequence

from evosim.food import Food

_SINGLE = struct.Struct("<f")


def _f32(value: float) -> float:
    return _SINGLE.unpack(_SINGLE.pack(value))[0]


_PI = _f32(math.pi)

FOV_RANGE = 0.25
FOV_ANGLE = _f32(_PI + _f32(math.pi / 4))
CELLS = 9


def _wrap(
    value: float, low: float, high: float, rounding: Callable[[float], float]
) -> float:
    if high <= low:
        raise ValueError("Upper bound must be greater than lower bound")
    if math.isinf(value):
        raise ValueError("Cannot wrap an infinite value")
    width = rounding(high - low)
    if value < low:
        while value < low:
            value = rounding(value + width)
    elif value > high:
        while value > high:
            value = rounding(value - width)
    return value


def wrap(value: float, low: float, high: float) -> float:
    """Shift ``value`` by whole multiples of ``high - low`` into ``[low, high]``."""
    return _wrap(value, low, high, float)


def _angle_of(angle: float) -> float:
    """Angle of a rotation by ``angle``, normalised to ``[-pi, pi]``."""
    return _f32(math.atan2(_f32(math.sin(angle)), _f32(math.cos(angle))))


def _bearing(dx: float, dy: float) -> float:
    """Angle of the rotation taking the +y axis onto the vector ``(dx, dy)``."""
    squared = _f32(_f32(dx * dx) + _f32(dy * dy))
    if squared <= 0.0:
        return 0.0
    norm = _f32(math.sqrt(squared))
    ux = _f32(dx / norm)
    uy = _f32(dy / norm)
    return _angle_of(_f32(math.atan2(0.0 * uy - ux, 0.0 * ux + uy)))


class Eye:
    """A fan-shaped field of view split into equal angular cells."""

    def __init__(
        self, fov_range: float = FOV_RANGE, fov_angle: float = FOV_ANGLE, cells: int = CELLS
    ) -> None:
        if not fov_range > 0.0:
            raise ValueError("Field-of-view range must be positive")
        if not fov_angle > 0.0:
            raise ValueError("Field-of-view angle must be positive")
        if cells <= 0:
            raise ValueError("An eye needs at least one cell")
        self.fov_range = _f32(fov_range)
        self.fov_angle = _f32(fov_angle)
        self.cells = cells

    def __repr__(self) -> str:
        return (
            f"Eye(fov_range={self.fov_range!r}, fov_angle={self.fov_angle!r}, "
            f"cells={self.cells!r})"
        )

    def process_vision(
        self,
        position: Sequence[float],
        rotation: float,
        foods: Iterable[Food],
    ) -> list[float]:
        """Signal per cell: closer pellets contribute more, up to 1 each."""
        cells = [0.0] * self.cells
        px, py = (_f32(coord) for coord in position)
        facing = _angle_of(_f32(rotation))
        half = _f32(self.fov_angle / 2.0)

        for food in foods:
            dx = _f32(_f32(food.position[0]) - px)
            dy = _f32(_f32(food.position[1]) - py)
            dist = _f32(math.sqrt(_f32(_f32(dx * dx) + _f32(dy * dy))))
            if dist >= self.fov_range:
                continue

            angle = _f32(_bearing(dx, dy) - facing)
            angle = _wrap(angle, -_PI, _PI, _f32)
            if angle < -half or angle > half:
                continue

            shifted = _f32(angle + half)
            position_in_fov = _f32(_f32(shifted / self.fov_angle) * self.cells)
            index = min(max(int(position_in_fov), 0), self.cells - 1)

            strength = _f32(_f32(self.fov_range - dist) / self.fov_range)
            cells[index] = _f32(cells[index] + strength)
        return cells