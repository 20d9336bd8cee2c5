# crayfish

A small path tracer that renders scenes built from spheres. Each sphere has a
material: diffuse (`Lambertian`), reflective (`Metal`, with a fuzz factor
capped at 1) or glass (`Dielectric`). The camera has a vertical field of view,
a thin lens for depth of field, and samples a random time per ray so that
moving spheres come out motion-blurred. Pixels are averaged over many jittered
samples and gamma corrected before being written as 8-bit RGB.

## Installation

```
pip install .
```

## Rendering the demo scene

```
crayfish
```

This builds a scene of three large spheres (glass, diffuse and metal) on a
large diffuse ground sphere, surrounded by a random field of small diffuse,
metal and glass spheres, and writes the rendering to `image.png` in the
current directory. The image has a 16:9 aspect ratio. While it works, the
command prints how many scanlines remain.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `-o`, `--output` | `image.png` | output file; the format follows from the extension |
| `--width` | `400` | image width in pixels |
| `--samples` | `100` | samples per pixel |
| `--depth` | `50` | maximum number of ray bounces |

Rendering is done in pure Python and is slow at the defaults. For a quick
look, try:

```
crayfish --width 100 --samples 10 --depth 10 -o preview.png
```

## Using the library

```python
from crayfish.camera import Camera
from crayfish.hittable import HittableList, Sphere
from crayfish.image import Image
from crayfish.material import Dielectric, Lambertian, Metal
from crayfish.vec3 import Vec3

image = Image(16 / 9, 200)
camera = Camera(
    image,
    samples_per_pixel=20,
    max_depth=10,
    vertical_fov=20.0,
    look_from=Vec3(13.0, 2.0, 3.0),
    look_at=Vec3.zeros(),
    up=Vec3.unit_y(),
    defocus_angle=0.6,
    focus_distance=10.0,
)

world = HittableList([
    Sphere(Vec3(0.0, -1000.0, 0.0), 1000.0, Lambertian(Vec3(0.5, 0.5, 0.5))),
    Sphere(Vec3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)),
    Sphere(Vec3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vec3(0.4, 0.2, 0.1))),
    Sphere(Vec3(4.0, 1.0, 0.0), 1.0, Metal(Vec3(0.7, 0.6, 0.5), 0.0)),
])

camera.render(image, world)
image.save("scene.png")
```

Points, colors and albedos may also be given as plain tuples, e.g.
`Sphere((0.0, 1.0, 0.0), 1.0, Lambertian((0.4, 0.2, 0.1)))`.

A sphere that moves while the shutter is open is made with
`Sphere.moving(initial_center, final_center, radius, material)`; it sits at
`initial_center` at time 0 and at `final_center` at time 1.

`crayfish.cli.build_world()` returns the random demo scene as a
`HittableList`, for use with your own camera.

### Modules

- `crayfish.vec3`: the immutable `Vec3` (also `Point3`) with arithmetic, dot
  and cross products, reflection and refraction, and random sampling helpers;
  `degrees_to_radians`, `radians_to_degrees`, `random_float`,
  `random_float_in`.
- `crayfish.interval`: `Interval`, with `contains`, `surrounds`, `clamp`,
  `size`, `empty()` and `universe()`.
- `crayfish.ray`: `Ray(origin, direction, time)` and `Ray.at(t)`.
- `crayfish.color`: `linear_to_gamma`, `component_to_byte` and `to_rgb`, which
  turn a linear color into a gamma-corrected 8-bit RGB triple.
- `crayfish.image`: `Image(aspect_ratio, width)` with `set_pixel`, `pixel` and
  `save`; the height is `width / aspect_ratio`, at least 1.
- `crayfish.material`: `Material` and its `Lambertian`, `Metal` and
  `Dielectric` kinds, and Schlick's `reflectance`.
- `crayfish.hittable`: `HitRecord`, `Hittable`, `Sphere` and `HittableList`.
- `crayfish.camera`: `Camera`, with `render`, `get_ray` and `ray_color`.
- `crayfish.cli`: the `crayfish` command (`main`) and `build_world`.

## Limitations

Spheres are the only shape. There are no light-emitting materials or
textures: all light comes from a fixed white-to-blue sky gradient. Rendering
runs on a single thread, and the scene of the `crayfish` command is fixed
apart from its random small spheres; there is no scene file format.

## Running the tests

```
pip install ".[test]"
pytest
```