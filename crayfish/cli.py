"""Command line entry point that renders the demonstration scene."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from crayfish.camera import Camera
from crayfish.color import Color
from crayfish.hittable import HittableList, Sphere
from crayfish.image import Image
from crayfish.material import Dielectric, Lambertian, Metal
from crayfish.vec3 import Point3, Vec3, random_float, random_float_in

_ASPECT_RATIO = 16.0 / 9.0


def build_world() -> HittableList:
    """The scene of three large spheres amid a random field of small ones."""
    world = HittableList(
        [
            Sphere((0.0, -1000.0, 0.0), 1000.0, Lambertian((0.5, 0.5, 0.5))),
            Sphere((0.0, 1.0, 0.0), 1.0, Dielectric(1.5)),
            Sphere((-4.0, 1.0, 0.0), 1.0, Lambertian((0.4, 0.2, 0.1))),
            Sphere((0.4, 1.0, 0.0), 1.0, Metal((0.7, 0.6, 0.5), 0.0)),
        ]
    )
    clearing = Point3(4.0, 0.2, 0.0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_float()
            center = Point3(a + 0.9 * random_float(), 0.2, b + 0.9 * random_float())
            if (center - clearing).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                center2 = center + Vec3.from_y(random_float_in(0.0, 0.5))
                albedo = Color.random() * Color.random()
                world.add(Sphere.moving(center, center2, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Color.random_in(0.5, 1.0)
                world.add(Sphere(center, 0.2, Metal(albedo, random_float_in(0.0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))
    return world


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crayfish", description="Render the demonstration scene to an image."
    )
    parser.add_argument("-o", "--output", default="image.png", help="output file")
    parser.add_argument("--width", type=int, default=400, help="image width in pixels")
    parser.add_argument("--samples", type=int, default=100, help="samples per pixel")
    parser.add_argument("--depth", type=int, default=50, help="maximum ray bounces")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(argv)
    image = Image(_ASPECT_RATIO, args.width)
    camera = Camera(
        image,
        args.samples,
        args.depth,
        20.0,
        (13.0, 2.0, 3.0),
        Point3.zeros(),
        Vec3.unit_y(),
        0.6,
        10.0,
    )
    world = build_world()
    camera.render(image, world)
    image.save(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())