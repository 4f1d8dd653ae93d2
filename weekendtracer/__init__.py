"""A small path tracer that renders spheres with diffuse, metal and glass materials to PPM text."""

__version__ = "0.1.0"