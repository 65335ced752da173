"""Geometry, input mapping, draw layers and tessellation for a Path of Building runtime."""

__version__ = "0.1.0"