"""Core rendering primitives for building image collages."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageChops

from image_collager.constants import (
    COLOR_MODE_RGBA,
    COLOR_TRANSPARENT,
    MASK_OPAQUE,
    MASK_TRANSPARENT,
)
from image_collager.type_defs import RGBA

# Pixels are sampled at their centre when classifying against the circle
_PIXEL_CENTER = 0.5


@dataclass(frozen=True)
class Point:
    """Integer pixel coordinate."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Point:
        """Return a copy shifted by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        """Return (x, y)."""
        return self.x, self.y


@dataclass(frozen=True)
class Size:
    """Width and height of a placed image or canvas."""

    width: int
    height: int

    def as_tuple(self) -> tuple[int, int]:
        """Return (width, height)."""
        return self.width, self.height

    @property
    def is_degenerate(self) -> bool:
        """True when either edge is below one pixel."""
        return self.width < 1 or self.height < 1


@dataclass(frozen=True)
class Rect:
    """Simple rectangle with convenience accessors."""

    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def from_origin(cls, origin: Point, size: Size) -> Rect:
        """Build the rectangle covering ``size`` pixels from ``origin``."""
        return cls(origin.x, origin.y,
                   origin.x + size.width, origin.y + size.height)

    @property
    def w(self) -> int:
        """Width."""
        return self.x1 - self.x0

    @property
    def h(self) -> int:
        """Height."""
        return self.y1 - self.y0

    def size(self) -> Size:
        """Return the rectangle's size."""
        return Size(self.w, self.h)

    def contains(self, other: Rect) -> bool:
        """Return True if ``other`` lies fully inside this rectangle."""
        return (self.x0 <= other.x0 and self.y0 <= other.y0
                and other.x1 <= self.x1 and other.y1 <= self.y1)

    def overlaps(self, other: Rect) -> bool:
        """Return True if the two rectangles share at least one pixel."""
        return (self.x0 < other.x1 and other.x0 < self.x1
                and self.y0 < other.y1 and other.y0 < self.y1)


@dataclass(frozen=True)
class CircleMask:
    """
    Hard-edged circular alpha mask.

    A pixel is opaque when its centre lies strictly inside the circle of
    ``radius`` around ``center``; every other pixel is transparent.
    """

    center: Point
    radius: int

    def contains(self, x: int, y: int) -> bool:
        """Classify a single pixel."""
        dx = x - self.center.x + _PIXEL_CENTER
        dy = y - self.center.y + _PIXEL_CENTER
        return dx * dx + dy * dy < self.radius * self.radius

    def alpha_at(self, x: int, y: int) -> int:
        """Return the mask alpha for a single pixel."""
        return MASK_OPAQUE if self.contains(x, y) else MASK_TRANSPARENT

    def to_image(self, size: Size) -> Image.Image:
        """Materialise the mask as an ``L`` image of the given size."""
        ys, xs = np.ogrid[0:size.height, 0:size.width]
        dx = xs - self.center.x + _PIXEL_CENTER
        dy = ys - self.center.y + _PIXEL_CENTER
        inside = dx * dx + dy * dy < self.radius * self.radius
        alpha = np.where(inside, MASK_OPAQUE, MASK_TRANSPARENT)
        return Image.fromarray(alpha.astype(np.uint8))


def new_canvas(size: Size, color: RGBA = COLOR_TRANSPARENT) -> Image.Image:
    """Allocate a blank RGBA canvas."""
    if size.is_degenerate:
        msg = f"Canvas size must be positive, got {size.width}x{size.height}"
        raise ValueError(msg)
    return Image.new(COLOR_MODE_RGBA, size.as_tuple(), color)


def _as_rgba(img: Image.Image) -> Image.Image:
    if img.mode == COLOR_MODE_RGBA:
        return img
    return img.convert(COLOR_MODE_RGBA)


def resize_image(img: Image.Image, size: Size) -> Image.Image:
    """
    Return a Lanczos-resampled RGBA copy of ``img`` at exactly ``size``.

    Palette and bilevel images are converted first, since Pillow resizes
    those modes with nearest-neighbour sampling whatever filter is asked.
    """
    if size.is_degenerate:
        msg = (f"invalid image dimensions: cannot resize to "
               f"{size.width}x{size.height}")
        raise ValueError(msg)
    return _as_rgba(img).resize(size.as_tuple(), Image.Resampling.LANCZOS)


def draw_image(canvas: Image.Image, img: Image.Image, at: Point) -> None:
    """Composite ``img`` over ``canvas`` with its top left at ``at``."""
    canvas.alpha_composite(_as_rgba(img), dest=at.as_tuple())


def draw_image_masked(
    canvas: Image.Image,
    img: Image.Image,
    at: Point,
    mask: Image.Image,
) -> None:
    """
    Composite ``img`` over ``canvas`` through ``mask``.

    The mask is combined with the source's own alpha, so transparent mask
    pixels leave the canvas untouched and opaque ones behave like
    :func:`draw_image`.
    """
    if mask.size != img.size:
        msg = f"Mask size {mask.size} does not match image size {img.size}"
        raise ValueError(msg)
    src = _as_rgba(img).copy()
    src.putalpha(ImageChops.multiply(src.getchannel("A"), mask))
    canvas.alpha_composite(src, dest=at.as_tuple())
