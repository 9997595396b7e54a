"""
Collage layout engine split into primitives, layouts, and rendering.

The package exposes the most commonly used entry points directly so
callers rarely need to reach into the submodules.
"""

from __future__ import annotations

from . import core, engine, layouts, naming, render, shapes
from .core import (
    CircleMask,
    Point,
    Rect,
    Size,
    draw_image,
    draw_image_masked,
    new_canvas,
    resize_image,
)
from .engine import make_collage
from .layouts import (
    CollageLayout,
    RowPartition,
    compute_layout,
    partition_rows,
)
from .naming import default_collage_name, save_collage
from .render import cell_origins, render_collage
from .shapes import SHAPE_CHOICES, Shape, ShapeStrategy, parse_shape

__all__ = [
    "SHAPE_CHOICES",
    "CircleMask",
    "CollageLayout",
    "Point",
    "Rect",
    "RowPartition",
    "Shape",
    "ShapeStrategy",
    "Size",
    "cell_origins",
    "compute_layout",
    "core",
    "default_collage_name",
    "draw_image",
    "draw_image_masked",
    "engine",
    "layouts",
    "make_collage",
    "naming",
    "new_canvas",
    "parse_shape",
    "partition_rows",
    "render",
    "render_collage",
    "resize_image",
    "save_collage",
    "shapes",
]
