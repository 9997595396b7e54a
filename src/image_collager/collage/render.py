"""Placement pass that draws partitioned images onto the collage canvas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from image_collager.collage.core import Point, new_canvas
from image_collager.collage.shapes import Shape, strategy_for
from image_collager.constants import COLOR_TRANSPARENT
from image_collager.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image

    from image_collager.collage.layouts import CollageLayout
    from image_collager.type_defs import RGBA, ImagesMatrix


def cell_origins(layout: CollageLayout) -> list[list[Point]]:
    """
    Return the top left corner of every cell.

    Cells run left to right from ``padding``; each row starts one
    ``padding`` below the tallest cell of the row above it.
    """
    padding = layout.padding
    origins: list[list[Point]] = []
    y = padding
    for row_idx, row_cells in enumerate(layout.cells):
        x = padding
        row_origins = []
        for cell in row_cells:
            row_origins.append(Point(x, y))
            x += cell.width + padding
        origins.append(row_origins)
        y += layout.row_height(row_idx) + padding
    return origins


def render_collage(
    rows: ImagesMatrix,
    layout: CollageLayout,
    shape: Shape | str,
    *,
    background: RGBA = COLOR_TRANSPARENT,
) -> Image.Image:
    """Allocate the canvas and draw every image into its cell."""
    if [len(r) for r in rows] != [len(r) for r in layout.cells]:
        msg = "Layout does not match the partitioned images"
        raise ValueError(msg)

    strategy = strategy_for(shape)
    canvas = new_canvas(layout.canvas, background)
    origins = cell_origins(layout)
    for row_idx, row in enumerate(rows):
        for col_idx, img in enumerate(row):
            at = origins[row_idx][col_idx]
            cell = layout.cells[row_idx][col_idx]
            logger.debug(
                "Drawing cell (%d, %d) at %d,%d size %dx%d",
                row_idx, col_idx, at.x, at.y, cell.width, cell.height,
            )
            strategy.draw(canvas, img, at, cell)
    return canvas
