"""
Cell shapes and their per-shape layout and drawing rules.

Each :class:`Shape` maps to one :class:`ShapeStrategy` that owns the
padding, the rule turning a resized image size into the size its cell
occupies, and the draw call. The sizer and renderer both go through the
strategy, so the measurement formulas live in exactly one place.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from PIL import Image

from image_collager.collage.core import (
    CircleMask,
    Point,
    Size,
    draw_image,
    draw_image_masked,
    resize_image,
)
from image_collager.constants import (
    CIRCLE_DIAMETER,
    CIRCLE_PADDING,
    RECTANGLE_PADDING,
)


class Shape(Enum):
    """Cell shape used for every image in a collage."""

    RECTANGLE = "Rectangle"
    CIRCLE = "Circle"


SHAPE_CHOICES: tuple[str, ...] = tuple(s.value for s in Shape)


def parse_shape(value: Shape | str) -> Shape:
    """Return the :class:`Shape` for an enum member or its string value."""
    if isinstance(value, Shape):
        return value
    try:
        return Shape(value)
    except ValueError as exc:
        msg = (f"invalid shape {value!r}; expected one of "
               f"{', '.join(SHAPE_CHOICES)}")
        raise ValueError(msg) from exc


def circle_diameter(size: Size) -> int:
    """Diameter of the shrunken inscribed circle for a resized image."""
    return int(min(size.width, size.height) * CIRCLE_DIAMETER)


def _rectangle_cell(size: Size) -> Size:
    return size


def _circle_cell(size: Size) -> Size:
    d = circle_diameter(size)
    return Size(d, d)


def _draw_rectangle(
    canvas: Image.Image,
    img: Image.Image,
    at: Point,
    cell: Size,
) -> None:
    draw_image(canvas, resize_image(img, cell), at)


def _draw_circle(
    canvas: Image.Image,
    img: Image.Image,
    at: Point,
    cell: Size,
) -> None:
    resized = resize_image(img, cell)
    w, h = resized.size
    radius = min(cell.width, w, h) // 2
    mask = CircleMask(Point(w // 2, h // 2), radius)
    draw_image_masked(canvas, resized, at, mask.to_image(Size(w, h)))


@dataclass(frozen=True)
class ShapeStrategy:
    """Padding, cell measurement and draw function for one shape."""

    shape: Shape
    padding: int
    cell_size: Callable[[Size], Size]
    draw: Callable[[Image.Image, Image.Image, Point, Size], None]


_STRATEGIES: dict[Shape, ShapeStrategy] = {
    Shape.RECTANGLE: ShapeStrategy(
        shape=Shape.RECTANGLE,
        padding=RECTANGLE_PADDING,
        cell_size=_rectangle_cell,
        draw=_draw_rectangle,
    ),
    Shape.CIRCLE: ShapeStrategy(
        shape=Shape.CIRCLE,
        padding=CIRCLE_PADDING,
        cell_size=_circle_cell,
        draw=_draw_circle,
    ),
}


def strategy_for(shape: Shape | str) -> ShapeStrategy:
    """Return the strategy for ``shape``."""
    return _STRATEGIES[parse_shape(shape)]
