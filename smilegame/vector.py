"""Two-dimensional vectors for positions and velocities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector:
    """A mutable 2D vector with float components."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self