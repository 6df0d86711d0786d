"""A movable probe that measures the electric field at its position."""

from __future__ import annotations

import math
from dataclasses import dataclass

from chargefield.field import ElectricField
from chargefield.geometry import Triangle, Vector

SENSOR_RADIUS = 0.05
SENSOR_SEGMENTS = 32
MAX_ARROW_LENGTH = 10.0

_SIGNIFICANT = 0.001
_SMALL = 0.01
_LARGE = 100.0


def sensor_arrow_vertices() -> tuple[Triangle, ...]:
    """Triangles of the sensor arrow, starting at the origin and pointing along +x."""
    return (
        ((0.0, -0.02), (0.4, -0.02), (0.4, 0.02)),
        ((0.0, -0.02), (0.4, 0.02), (0.0, 0.02)),
        ((0.4, -0.06), (0.5, 0.0), (0.4, 0.06)),
    )


def sensor_circle_vertices() -> tuple[Triangle, ...]:
    """Triangle fan of the sensor disc, centred at the origin."""

    def rim(i: int) -> Vector:
        angle = 2.0 * math.pi * i / SENSOR_SEGMENTS
        return (SENSOR_RADIUS * math.cos(angle), SENSOR_RADIUS * math.sin(angle))

    return tuple(((0.0, 0.0), rim(i), rim(i + 1)) for i in range(SENSOR_SEGMENTS))


@dataclass
class Sensor:
    """A probe in world coordinates holding the last field vector measured there."""

    x: float = 0.0
    y: float = 0.0
    field_vector: Vector = (0.0, 0.0)
    active: bool = False

    @property
    def position(self) -> Vector:
        return (self.x, self.y)

    @position.setter
    def position(self, value: Vector) -> None:
        self.x, self.y = value

    def update_field_vector(self, field: ElectricField) -> None:
        """Measure the field at the sensor's current position."""
        self.field_vector = field.field_at(self.x, self.y)

    def is_point_on_sensor(self, x: float, y: float, radius: float = 0.1) -> bool:
        dx = self.x - x
        dy = self.y - y
        return dx * dx + dy * dy < radius * radius

    @property
    def magnitude(self) -> float:
        return math.hypot(*self.field_vector)

    @property
    def significant(self) -> bool:
        """Whether the measured field is strong enough to show a direction."""
        return self.magnitude > _SIGNIFICANT

    @property
    def direction_degrees(self) -> float:
        """Field direction in [0, 360); 0 when the field is negligible."""
        if not self.significant:
            return 0.0
        degrees = math.degrees(self.arrow_angle)
        return degrees + 360.0 if degrees < 0 else degrees

    @property
    def arrow_length(self) -> float:
        """Logarithmic length of the field arrow, capped; 0 when the field is negligible."""
        if not self.significant:
            return 0.0
        return min(0.1 * (1.0 + math.log(1.0 + self.magnitude)), MAX_ARROW_LENGTH)

    @property
    def arrow_angle(self) -> float:
        """Field direction in radians."""
        fx, fy = self.field_vector
        return math.atan2(fy, fx)

    def readout(self) -> tuple[str, str, str]:
        """Position, magnitude and direction lines shown next to the sensor."""
        position = f"Pos: ({self.x:.2f}, {self.y:.2f})"
        magnitude = self.magnitude
        if magnitude < _SIGNIFICANT:
            strength = "E: ~0 N/C"
        elif magnitude < _SMALL:
            strength = f"E: {magnitude:.5f} N/C"
        elif magnitude < _LARGE:
            strength = f"E: {magnitude:.3f} N/C"
        else:
            strength = f"E: {magnitude:.2e} N/C"
        if magnitude < _SIGNIFICANT:
            direction = "Dir: N/A"
        else:
            direction = f"Dir: {self.direction_degrees:.1f}°"
        return (position, strength, direction)