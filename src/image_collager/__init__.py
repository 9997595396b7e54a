"""Public package exports for the image collager."""

from __future__ import annotations

from .collage import Shape, make_collage, save_collage

__all__ = ["Shape", "make_collage", "save_collage"]
