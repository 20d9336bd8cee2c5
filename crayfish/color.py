"""Conversion of linear colors to 8-bit gamma-corrected RGB triples."""

from __future__ import annotations

import math

from crayfish.interval import Interval
from crayfish.vec3 import Vec3

Color = Vec3

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(component: float) -> float:
    """Apply gamma 2 correction; non-positive components map to zero."""
    if component > 0.0:
        return math.sqrt(component)
    return 0.0


def component_to_byte(component: float) -> int:
    """Map a component in [0, 1] to a byte, clamping out-of-range values."""
    return int(256.0 * _INTENSITY.clamp(component))


def to_rgb(color: Color) -> tuple[int, int, int]:
    """Convert a linear color to a gamma-corrected 8-bit RGB triple."""
    r, g, b = (component_to_byte(linear_to_gamma(c)) for c in color)
    return (r, g, b)