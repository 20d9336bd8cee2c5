"""A small path-tracing renderer for scenes of spheres, with a demo-scene command."""

__version__ = "0.1.0"