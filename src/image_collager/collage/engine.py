"""Single entry point tying partitioning, sizing, and rendering together."""

from __future__ import annotations

from typing import TYPE_CHECKING

from image_collager.collage.layouts import compute_layout, partition_rows
from image_collager.collage.render import render_collage
from image_collager.collage.shapes import Shape, parse_shape
from image_collager.constants import COLOR_TRANSPARENT
from image_collager.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from PIL import Image

    from image_collager.type_defs import RGBA


def make_collage(  # noqa: PLR0913
    desired_width: int,
    desired_height: int,
    number_of_rows: int,
    shape: Shape | str,
    images: Sequence[Image.Image],
    *,
    background: RGBA = COLOR_TRANSPARENT,
) -> Image.Image:
    """
    Arrange ``images`` into a grid of ``number_of_rows`` rows.

    Images are sorted tallest first, split into rows, and scaled so each
    row spans ``desired_width``. ``desired_height`` is accepted for
    symmetry but the output height follows from the content. Input
    images are never modified.

    Raises:
        ValueError: If the shape or row count is invalid, no images are
            given, or an image has a zero-sized edge.

    """
    cell_shape = parse_shape(shape)
    if not images:
        msg = "No images provided"
        raise ValueError(msg)

    partition = partition_rows(images, number_of_rows)
    layout = compute_layout(partition.rows, desired_width, cell_shape)
    if layout.canvas.height != desired_height:
        logger.debug(
            "Requested height %d, content needs %d",
            desired_height, layout.canvas.height,
        )
    return render_collage(
        partition.rows, layout, cell_shape, background=background,
    )
