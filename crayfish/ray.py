"""Rays with an origin, a direction and a time stamp."""

from __future__ import annotations

from dataclasses import dataclass, field

from crayfish.vec3 import Point3, Vec3


@dataclass(frozen=True, slots=True)
class Ray:
    """A half-line ``origin + t * direction`` emitted at ``time``."""

    origin: Point3 = field(default_factory=Vec3.zeros)
    direction: Vec3 = field(default_factory=Vec3.zeros)
    time: float = 0.0

    def at(self, t: float) -> Point3:
        return self.origin + t * self.direction