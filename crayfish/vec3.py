"""Three-component vectors and the scalar helpers used throughout the renderer."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import Iterator

_NEAR_ZERO = 1e-8


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180.0 / math.pi


def random_float() -> float:
    """Return a uniformly distributed float in [0, 1)."""
    return _random.random()


def random_float_in(low: float, high: float) -> float:
    """Return a uniformly distributed float in [low, high).

    Raises ValueError when the range is empty.
    """
    if not low < high:
        raise ValueError(f"cannot sample from empty range [{low}, {high})")
    value = low + (high - low) * _random.random()
    # Guard against rounding up to the excluded upper bound.
    return value if value < high else low


def _div(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising on zero."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _format_component(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value)) if value != 0.0 or math.copysign(1.0, value) > 0 else "-0"
    return repr(float(value))


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector, also used for points and colors."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_x(cls, x: float) -> Vec3:
        return cls(x, 0.0, 0.0)

    @classmethod
    def from_y(cls, y: float) -> Vec3:
        return cls(0.0, y, 0.0)

    @classmethod
    def from_z(cls, z: float) -> Vec3:
        return cls(0.0, 0.0, z)

    @classmethod
    def zeros(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def ones(cls) -> Vec3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def unit_x(cls) -> Vec3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vec3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vec3:
        return cls(0.0, 0.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return " ".join(_format_component(c) for c in self)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: object) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(other * self.x, other * self.y, other * self.z)
        return NotImplemented

    def __truediv__(self, other: object) -> Vec3:
        if isinstance(other, (int, float)):
            d = float(other)
            return Vec3(_div(self.x, d), _div(self.y, d), _div(self.z, d))
        return NotImplemented

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def stable_length(self) -> float:
        return math.sqrt(self.stable_length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def stable_length_squared(self) -> float:
        """Squared length computed with scaling to avoid overflow and underflow."""
        largest = max(abs(self.x), abs(self.y), abs(self.z))
        if largest == 0.0:
            return 0.0
        x, y, z = self.x / largest, self.y / largest, self.z / largest
        return largest * largest * (x * x + y * y + z * z)

    def near_zero(self) -> bool:
        return all(abs(c) < _NEAR_ZERO for c in self)

    @classmethod
    def random(cls) -> Vec3:
        return cls(random_float(), random_float(), random_float())

    @classmethod
    def random_in(cls, low: float, high: float) -> Vec3:
        return cls(
            random_float_in(low, high),
            random_float_in(low, high),
            random_float_in(low, high),
        )

    def unit_vector(self) -> Vec3:
        return self / self.length()

    def stable_unit_vector(self) -> Vec3:
        return self / self.stable_length()

    @classmethod
    def random_unit_vector(cls) -> Vec3:
        """A random direction uniformly distributed on the unit sphere."""
        while True:
            p = cls.random_in(-1.0, 1.0)
            if 0.0 < p.stable_length_squared() <= 1.0:
                return p.stable_unit_vector()

    @classmethod
    def random_on_hemisphere(cls, normal: Vec3) -> Vec3:
        on_unit_sphere = cls.random_unit_vector()
        return on_unit_sphere if on_unit_sphere.dot(normal) > 0.0 else -on_unit_sphere

    @classmethod
    def random_in_unit_disk(cls) -> Vec3:
        while True:
            p = cls(random_float_in(-1.0, 1.0), random_float_in(-1.0, 1.0), 0.0)
            if p.length_squared() < 1.0:
                return p

    def reflect(self, normal: Vec3) -> Vec3:
        return self - 2.0 * self.dot(normal) * normal

    def refract(self, normal: Vec3, etai_over_etat: float) -> Vec3:
        cos_theta = min((-self).dot(normal), 1.0)
        perp = etai_over_etat * (self + cos_theta * normal)
        parallel = -math.sqrt(abs(1.0 - perp.length_squared())) * normal
        return perp + parallel


Point3 = Vec3