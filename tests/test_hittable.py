import math

import pytest

from crayfish.hittable import HitRecord, Hittable, HittableList, Sphere
from crayfish.interval import Interval
from crayfish.material import Lambertian
from crayfish.ray import Ray
from crayfish.vec3 import Vec3

MATERIAL = Lambertian((0.5, 0.5, 0.5))
FORWARD = Vec3(0.0, 0.0, -1.0)
WIDE = Interval(0.001, math.inf)


def _sphere(z, radius=0.5):
    return Sphere((0.0, 0.0, z), radius, MATERIAL)


def test_hit_record_front_face_keeps_normal():
    ray = Ray(Vec3.zeros(), FORWARD)
    rec = HitRecord.from_ray((0.0, 0.0, -1.0), 1.0, ray, MATERIAL, (0.0, 0.0, 1.0))
    assert rec.front_face is True
    assert rec.normal == Vec3(0.0, 0.0, 1.0)
    assert rec.p == Vec3(0.0, 0.0, -1.0)
    assert rec.material is MATERIAL


def test_hit_record_back_face_flips_normal():
    ray = Ray(Vec3.zeros(), FORWARD)
    rec = HitRecord.from_ray(Vec3.zeros(), 1.0, ray, MATERIAL, FORWARD)
    assert rec.front_face is False
    assert rec.normal == -FORWARD


def test_hittable_is_abstract():
    with pytest.raises(TypeError):
        Hittable()


def test_sphere_front_hit():
    ray = Ray(Vec3.zeros(), FORWARD)
    rec = _sphere(-1.0).hit(ray, WIDE)
    assert rec is not None
    assert rec.t == 0.5
    assert rec.p == Vec3(0.0, 0.0, -0.5)
    assert rec.normal == Vec3(0.0, 0.0, 1.0)
    assert rec.front_face is True
    assert rec.material is MATERIAL


def test_sphere_hit_point_lies_on_surface():
    sphere = Sphere((1.0, 2.0, -5.0), 2.0, MATERIAL)
    ray = Ray(Vec3(0.5, 1.5, 3.0), Vec3(0.1, 0.05, -1.0))
    rec = sphere.hit(ray, WIDE)
    assert rec is not None
    assert ray.at(rec.t).x == pytest.approx(rec.p.x)
    assert (rec.p - sphere.center.origin).length() == pytest.approx(2.0)
    assert rec.normal.length() == pytest.approx(1.0)
    assert rec.normal.dot(ray.direction) < 0.0


def test_sphere_miss():
    ray = Ray(Vec3.zeros(), Vec3(0.0, 1.0, 0.0))
    assert _sphere(-1.0).hit(ray, WIDE) is None


def test_sphere_hit_outside_interval():
    ray = Ray(Vec3.zeros(), FORWARD)
    assert _sphere(-1.0).hit(ray, Interval(0.001, 0.4)) is None


def test_sphere_behind_ray_is_not_hit():
    ray = Ray(Vec3.zeros(), -FORWARD)
    assert _sphere(-1.0).hit(ray, WIDE) is None


def test_sphere_hit_from_inside():
    ray = Ray(Vec3(0.0, 0.0, -1.0), FORWARD)
    rec = _sphere(-1.0).hit(ray, WIDE)
    assert rec is not None
    assert rec.front_face is False
    assert rec.normal.dot(ray.direction) < 0.0
    assert rec.t == 0.5


def test_zero_direction_never_hits():
    ray = Ray(Vec3.zeros(), Vec3.zeros())
    assert _sphere(-1.0).hit(ray, WIDE) is None


def test_negative_radius_clamps_to_zero():
    assert _sphere(-1.0, radius=-3.0).radius == 0.0


def test_moving_sphere_follows_time():
    sphere = Sphere.moving((0.0, 0.0, -1.0), (0.0, 5.0, -1.0), 0.5, MATERIAL)
    early = Ray(Vec3(0.0, 5.0, 0.0), FORWARD, 0.0)
    late = Ray(Vec3(0.0, 5.0, 0.0), FORWARD, 1.0)
    assert sphere.hit(early, WIDE) is None
    rec = sphere.hit(late, WIDE)
    assert rec is not None
    assert rec.p == Vec3(0.0, 5.0, -0.5)


def test_list_returns_closest_hit():
    near, far = _sphere(-1.0), _sphere(-3.0)
    world = HittableList([far, near])
    ray = Ray(Vec3.zeros(), FORWARD)
    rec = world.hit(ray, WIDE)
    assert rec is not None
    assert rec.t == near.hit(ray, WIDE).t
    assert rec.p == Vec3(0.0, 0.0, -0.5)


def test_list_order_does_not_matter():
    near, far = _sphere(-1.0), _sphere(-3.0)
    ray = Ray(Vec3.zeros(), FORWARD)
    first = HittableList([near, far]).hit(ray, WIDE)
    second = HittableList([far, near]).hit(ray, WIDE)
    assert first.t == second.t
    assert first.p == second.p


def test_empty_list_misses():
    assert HittableList().hit(Ray(Vec3.zeros(), FORWARD), WIDE) is None


def test_list_add_and_clear():
    world = HittableList()
    world.add(_sphere(-1.0))
    world.add(_sphere(-3.0))
    assert len(world) == 2
    assert world.hit(Ray(Vec3.zeros(), FORWARD), WIDE) is not None and len(list(world)) == 2
    world.clear()
    assert len(world) == 0
    assert world.hit(Ray(Vec3.zeros(), FORWARD), WIDE) is None