"""Colour gradients and noise textures rendered from per-pixel parameterisations."""

__version__ = "0.1.0"