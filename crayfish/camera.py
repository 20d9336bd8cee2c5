"""A positionable thin-lens camera that renders a scene into an image."""

from __future__ import annotations

import math
import sys
from typing import Sequence, Union

from crayfish.color import Color, to_rgb
from crayfish.hittable import Hittable
from crayfish.image import Image
from crayfish.interval import Interval
from crayfish.ray import Ray
from crayfish.vec3 import Point3, Vec3, degrees_to_radians, random_float

VecLike = Union[Vec3, Sequence[float]]

_SKY_BLUE = Color(0.5, 0.7, 1.0)
_HIT_RANGE_MIN = 0.001


def _as_vec(value: VecLike) -> Vec3:
    return value if isinstance(value, Vec3) else Vec3(*value)


class Camera:
    """Casts jittered, defocused, time-sampled rays through every pixel."""

    def __init__(
        self,
        image: Image,
        samples_per_pixel: int,
        max_depth: int,
        vertical_fov: float,
        look_from: VecLike,
        look_at: VecLike,
        up: VecLike,
        defocus_angle: float,
        focus_distance: float,
    ) -> None:
        if samples_per_pixel < 1:
            raise ValueError(
                f"samples per pixel must be at least 1, got {samples_per_pixel}"
            )
        self.samples_per_pixel = samples_per_pixel
        self.pixel_sample_scale = 1.0 / samples_per_pixel
        self.max_depth = max_depth
        self.vertical_fov = vertical_fov
        self.look_from: Point3 = _as_vec(look_from)
        self.look_at: Point3 = _as_vec(look_at)
        self.up = _as_vec(up)
        self.defocus_angle = defocus_angle
        self.focus_distance = focus_distance

        theta = degrees_to_radians(vertical_fov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h * focus_distance
        viewport_width = viewport_height * (image.width / image.height)

        self.w = (self.look_from - self.look_at).unit_vector()
        self.u = self.up.cross(self.w).unit_vector()
        self.v = self.w.cross(self.u)

        self.center: Point3 = self.look_from
        across = viewport_width * self.u
        down = viewport_height * -self.v
        self.delta_x = across / image.width
        self.delta_y = down / image.height
        self.upper_left = (
            self.center - focus_distance * self.w - across / 2.0 - down / 2.0
        )
        self.pixel00 = self.upper_left + 0.5 * (self.delta_x + self.delta_y)

        defocus_radius = focus_distance * math.tan(
            degrees_to_radians(defocus_angle / 2.0)
        )
        self.defocus_disk_x = self.u * defocus_radius
        self.defocus_disk_y = self.v * defocus_radius

    def render(self, image: Image, world: Hittable) -> None:
        """Fill every pixel of ``image`` with the averaged color of its samples."""
        for y in range(image.height):
            print(f"\rScanlines remaining: {image.height - y}          ")
            for x in range(image.width):
                color = sum(
                    (
                        self.ray_color(self.get_ray(x, y), self.max_depth, world)
                        for _ in range(self.samples_per_pixel)
                    ),
                    Color.zeros(),
                )
                image.set_pixel(x, y, to_rgb(self.pixel_sample_scale * color))
        print("\rDone                             \n")

    def get_ray(self, x: int, y: int) -> Ray:
        """A ray from the lens toward a random point inside pixel (x, y)."""
        offset_x = random_float() - 0.5
        offset_y = random_float() - 0.5
        sample = (
            self.pixel00
            + (x + offset_x) * self.delta_x
            + (y + offset_y) * self.delta_y
        )
        origin = self.center if self.defocus_angle <= 0.0 else self._defocus_disk_sample()
        return Ray(origin, sample - origin, random_float())

    def _defocus_disk_sample(self) -> Point3:
        p = Vec3.random_in_unit_disk()
        return self.center + p.x * self.defocus_disk_x + p.y * self.defocus_disk_y

    def ray_color(self, ray: Ray, depth: int, world: Hittable) -> Color:
        """The light arriving along ``ray`` after at most ``depth`` bounces."""
        attenuation = Color.ones()
        for _ in range(max(depth, 0)):
            rec = world.hit(ray, Interval(_HIT_RANGE_MIN, math.inf))
            if rec is None:
                return attenuation * _background(ray)
            scattered = rec.material.scatter(ray, rec)
            if scattered is None:
                return Color.zeros()
            ray, bounce_attenuation = scattered
            attenuation = attenuation * bounce_attenuation
        return Color.zeros()


def _background(ray: Ray) -> Color:
    unit_direction = ray.direction.unit_vector()
    a = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - a) * Color.ones() + a * _SKY_BLUE