"""Shapes, coordinate mappings and the arrow grid used to draw a vector field."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable

Vector = tuple[float, float]
Triangle = tuple[Vector, Vector, Vector]

_GRID_SKIP_DIST_SQUARED = 0.01
_ARROW_BASE_SCALE = 0.05
_ARROW_LOG_SCALE = 0.025


@dataclass(frozen=True)
class FieldArrow:
    """An arrow of the field grid: its anchor and its scaled direction."""

    x: float
    y: float
    dx: float
    dy: float

    @property
    def angle(self) -> float:
        return math.atan2(self.dy, self.dx)

    @property
    def length(self) -> float:
        return math.hypot(self.dx, self.dy)


def arrow_vertices() -> tuple[Triangle, ...]:
    """Triangles of the unit grid arrow: a bar and a tip pointing along +x."""
    return (
        ((-0.4, -0.05), (0.4, -0.05), (0.4, 0.05)),
        ((-0.4, -0.05), (0.4, 0.05), (-0.4, 0.05)),
        ((0.4, -0.10), (0.5, 0.0), (0.4, 0.10)),
    )


def circle_vertices(segments: int = 32) -> tuple[Triangle, ...]:
    """Triangle fan of a unit circle centred at the origin."""
    if segments < 1:
        raise ValueError(f"segments must be positive, got {segments}")
    rim = [
        (math.cos(2.0 * math.pi * i / segments), math.sin(2.0 * math.pi * i / segments))
        for i in range(segments)
    ]
    return tuple(
        ((0.0, 0.0), point, rim[(i + 1) % segments]) for i, point in enumerate(rim)
    )


def _aspect(width: float, height: float) -> float:
    if width <= 0 or height <= 0:
        raise ValueError(f"window size must be positive, got {width}x{height}")
    return width / height


def world_bounds(width: float, height: float) -> tuple[float, float, float, float]:
    """Visible world rectangle (xmin, xmax, ymin, ymax) keeping proportions."""
    aspect = _aspect(width, height)
    if aspect >= 1.0:
        return (-aspect, aspect, -1.0, 1.0)
    return (-1.0, 1.0, -1.0 / aspect, 1.0 / aspect)


def screen_to_world(xpos: float, ypos: float, width: float, height: float) -> Vector:
    """Map a cursor position (top-left origin) to world coordinates."""
    aspect = _aspect(width, height)
    world_x = (2.0 * xpos / width - 1.0) * (aspect if aspect >= 1.0 else 1.0)
    world_y = -(2.0 * ypos / height - 1.0) * (1.0 / aspect if aspect < 1.0 else 1.0)
    return (world_x, world_y)


def world_to_screen(x: float, y: float, width: float, height: float) -> Vector:
    """Map world coordinates to pixels with a bottom-left origin."""
    aspect = _aspect(width, height)
    if aspect >= 1.0:
        return ((x / aspect + 1.0) * 0.5 * width, (y + 1.0) * 0.5 * height)
    return ((x + 1.0) * 0.5 * width, (y * aspect + 1.0) * 0.5 * height)


def rotational_field(x: float, y: float) -> Vector:
    return (-y, x)


def cosine_field(x: float, y: float) -> Vector:
    """Direction field of dy/dx = cos(y)."""
    return (1.0, math.cos(y))


def _float_range(start: float, stop: float, step: float) -> Iterable[float]:
    value = start
    while value <= stop:
        yield value
        value += step


def field_grid(
    vector_field: Callable[[float, float], Vector],
    charges: Iterable,
    width: float,
    height: float,
    density: int = 25,
) -> list[FieldArrow]:
    """Arrows over the window, scaled logarithmically; points next to charges are skipped."""
    if density <= 0:
        raise ValueError(f"density must be positive, got {density}")
    aspect = _aspect(width, height)
    spacing = 2.0 / density
    x_min, x_max = -aspect, aspect
    y_min, y_max = (-1.0, 1.0) if aspect >= 1.0 else (-1.0 / aspect, 1.0 / aspect)
    charge_points = [(c.x, c.y) for c in charges]

    arrows = []
    for x in _float_range(x_min, x_max, spacing):
        for y in _float_range(y_min, y_max, spacing):
            if any(
                (x - cx) ** 2 + (y - cy) ** 2 < _GRID_SKIP_DIST_SQUARED
                for cx, cy in charge_points
            ):
                continue
            fx, fy = vector_field(x, y)
            magnitude = math.hypot(fx, fy)
            if magnitude > 0.0:
                scale = _ARROW_BASE_SCALE + _ARROW_LOG_SCALE * math.log(1.0 + magnitude)
                arrows.append(FieldArrow(x, y, fx / magnitude * scale, fy / magnitude * scale))
            else:
                arrows.append(FieldArrow(x, y, 0.0, 0.0))
    return arrows