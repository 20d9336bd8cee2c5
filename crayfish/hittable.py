"""Ray-intersectable objects: the hit record, spheres and object lists."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Union

from crayfish.interval import Interval
from crayfish.material import Material
from crayfish.ray import Ray
from crayfish.vec3 import Point3, Vec3

PointLike = Union[Vec3, Sequence[float]]


def _as_vec(value: PointLike) -> Vec3:
    return value if isinstance(value, Vec3) else Vec3(*value)


@dataclass(frozen=True)
class HitRecord:
    """Where and how a ray struck a surface."""

    p: Point3
    normal: Vec3
    material: Material
    t: float
    front_face: bool

    @classmethod
    def from_ray(
        cls,
        p: PointLike,
        t: float,
        ray: Ray,
        material: Material,
        outward_normal: PointLike,
    ) -> HitRecord:
        """Build a record whose normal always faces against the ray."""
        outward = _as_vec(outward_normal)
        front_face = ray.direction.dot(outward) < 0.0
        return cls(
            p=_as_vec(p),
            normal=outward if front_face else -outward,
            material=material,
            t=t,
            front_face=front_face,
        )


class Hittable(ABC):
    """Anything a ray can intersect."""

    @abstractmethod
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        """Return the nearest hit with ``t`` strictly inside ``ray_t``, if any."""


class Sphere(Hittable):
    """A sphere whose center may move linearly over the time range [0, 1]."""

    def __init__(self, center: PointLike, radius: float, material: Material) -> None:
        self.center = Ray(_as_vec(center), Vec3.zeros())
        self.radius = radius if radius >= 0.0 else 0.0
        self.material = material

    @classmethod
    def moving(
        cls,
        initial_center: PointLike,
        final_center: PointLike,
        radius: float,
        material: Material,
    ) -> Sphere:
        """A sphere at ``initial_center`` at time 0 and ``final_center`` at time 1."""
        start = _as_vec(initial_center)
        sphere = cls(start, radius, material)
        sphere.center = Ray(start, _as_vec(final_center) - start)
        return sphere

    def __repr__(self) -> str:
        return (
            f"Sphere(center={self.center!r}, radius={self.radius!r}, "
            f"material={self.material!r})"
        )

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        current_center = self.center.at(ray.time)
        oc = current_center - ray.origin
        a = ray.direction.length_squared()
        if a == 0.0:
            return None
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None

        sqrtd = math.sqrt(discriminant)
        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        p = ray.at(root)
        return HitRecord.from_ray(
            p, root, ray, self.material, (p - current_center) / self.radius
        )


class HittableList(Hittable):
    """A collection of objects hit as one; the nearest hit wins."""

    def __init__(self, objects: Optional[Iterable[Hittable]] = None) -> None:
        self.objects: list[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable) -> None:
        self.objects.append(obj)

    def clear(self) -> None:
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        best: Optional[HitRecord] = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                best = rec
        return best