"""Point charges and the electrostatic field they produce."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Optional

Vector = tuple[float, float]

_COULOMB_K = 1.0
_MIN_DIST_SQUARED = 0.01
_CHARGE_STEP = 0.25
_CHARGE_LIMIT = 5.0


@dataclass
class ElectricCharge:
    """A point charge at a position in world coordinates."""

    x: float
    y: float
    charge: float

    @property
    def position(self) -> Vector:
        return (self.x, self.y)


@dataclass
class ElectricField:
    """A collection of point charges and the field they create."""

    _charges: list[ElectricCharge] = field(default_factory=list)

    def find_charge_at(self, x: float, y: float, radius: float = 0.1) -> Optional[int]:
        """Return the index of the first charge within ``radius`` of (x, y), or None."""
        limit = radius * radius
        for index, charge in enumerate(self._charges):
            dx = charge.x - x
            dy = charge.y - y
            if dx * dx + dy * dy < limit:
                return index
        return None

    def _valid(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self._charges)

    def move_charge(self, index: Optional[int], x: float, y: float) -> None:
        """Move the charge at ``index``; an unknown index is ignored."""
        if self._valid(index):
            charge = self._charges[index]
            charge.x = x
            charge.y = y

    def change_charge_size(self, index: Optional[int], delta: float) -> None:
        """Adjust a charge by a scroll step, clamped to the allowed range."""
        if self._valid(index):
            charge = self._charges[index]
            value = charge.charge + delta * _CHARGE_STEP
            charge.charge = max(-_CHARGE_LIMIT, min(_CHARGE_LIMIT, value))

    def add_charge(self, x: float, y: float, charge: float) -> None:
        self._charges.append(ElectricCharge(x, y, charge))

    def clear_charges(self) -> None:
        self._charges.clear()

    @property
    def charges(self) -> tuple[ElectricCharge, ...]:
        return tuple(self._charges)

    def field_at(self, x: float, y: float) -> Vector:
        """Field vector at (x, y); charges closer than a small cutoff are ignored."""
        fx = fy = 0.0
        for charge in self._charges:
            rx = x - charge.x
            ry = y - charge.y
            dist_squared = rx * rx + ry * ry
            if dist_squared < _MIN_DIST_SQUARED:
                continue
            magnitude = _COULOMB_K * charge.charge / dist_squared
            dist = math.sqrt(dist_squared)
            fx += magnitude * rx / dist
            fy += magnitude * ry / dist
        return (fx, fy)

    def vector_field(self) -> Callable[[float, float], Vector]:
        """Return a callable that evaluates the live field at a point."""
        return self.field_at