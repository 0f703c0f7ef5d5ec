"""N-dimensional rasters, boxes, interpolation and affine transforms."""

__version__ = "0.1.0"