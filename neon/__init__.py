"""A path tracer that renders 3D scenes of spheres, quads and volumes to image files."""

__version__ = "0.1.0"