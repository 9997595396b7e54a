"""Row partitioning and size calculation for collage grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from image_collager.collage.core import Size
from image_collager.collage.shapes import Shape, strategy_for
from image_collager.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from PIL import Image

    from image_collager.type_defs import ImagesMatrix

SizeMatrix = list[list[Size]]


@dataclass(frozen=True)
class RowPartition:
    """Images split into rows, tallest first."""

    rows: ImagesMatrix
    max_columns: int

    @property
    def number_of_rows(self) -> int:
        """Number of rows."""
        return len(self.rows)

    def row_lengths(self) -> list[int]:
        """Return the number of columns in each row."""
        return [len(row) for row in self.rows]


@dataclass(frozen=True)
class CollageLayout:
    """
    Sizes computed once for a partitioned collage.

    ``sizes`` holds every image's aspect-preserving resize target and
    ``cells`` the space each one occupies after the shape rule (equal to
    ``sizes`` for rectangles, the circle diameter square for circles).
    """

    sizes: SizeMatrix
    cells: SizeMatrix
    canvas: Size
    padding: int
    max_columns: int

    def row_height(self, row: int) -> int:
        """Tallest cell in ``row``."""
        return max(cell.height for cell in self.cells[row])


def partition_rows(
    images: Sequence[Image.Image],
    number_of_rows: int,
) -> RowPartition:
    """
    Sort images by height and split them into ``number_of_rows`` rows.

    Rows get ``len(images) // number_of_rows`` images each; the remainder
    is handed out one at a time to the earliest rows. The sort is stable,
    so images of equal height keep their input order.
    """
    total = len(images)
    if total == 0:
        msg = "No images provided"
        raise ValueError(msg)
    if number_of_rows < 1 or number_of_rows > total:
        msg = (f"invalid row count {number_of_rows}: must be between 1 and "
               f"the number of images ({total})")
        raise ValueError(msg)

    ordered = sorted(images, key=lambda im: im.height, reverse=True)
    base_columns = total // number_of_rows
    has_remainder = total % number_of_rows > 0

    rows: ImagesMatrix = []
    current = 0
    max_columns = 0
    for idx in range(number_of_rows):
        columns = base_columns
        if has_remainder and \
                (number_of_rows - idx) * base_columns < total - current:
            columns += 1
        max_columns = max(max_columns, columns)
        rows.append(ordered[current:current + columns])
        current += columns

    logger.info(
        "Partitioned %d images into %d rows (up to %d columns)",
        total, number_of_rows, max_columns,
    )
    return RowPartition(rows=rows, max_columns=max_columns)


def scaled_size(img: Image.Image, target_width: int) -> Size:
    """Scale ``img`` to ``target_width`` keeping its aspect ratio."""
    original_w, original_h = img.size
    if original_w < 1 or original_h < 1:
        msg = f"invalid image dimensions: {original_w}x{original_h}"
        raise ValueError(msg)
    factor = target_width / original_w
    size = Size(int(original_w * factor), int(original_h * factor))
    if size.is_degenerate:
        msg = (f"invalid image dimensions: {original_w}x{original_h} "
               f"scales to {size.width}x{size.height}")
        raise ValueError(msg)
    return size


def _max_column_height(cells: SizeMatrix, max_columns: int) -> int:
    """Largest sum of cell heights down any column."""
    best = 0
    for col in range(max_columns):
        column_height = sum(row[col].height for row in cells if len(row) > col)
        best = max(best, column_height)
    return best


def compute_layout(
    rows: ImagesMatrix,
    desired_width: int,
    shape: Shape | str,
) -> CollageLayout:
    """
    Compute per-image sizes and the enclosing canvas size.

    Every image in a row is scaled to ``desired_width // columns`` wide.
    The canvas is wide enough for the widest row of cells, plus padding
    around the edge and between neighbours.

    The height is not the plain tallest-column rule. It is the larger of
    the tallest column and the sum of each row's tallest cell, because the
    render cursor advances rows by their tallest cell. The two agree unless
    tall cells sit in different columns, in which case the column rule
    would clip the lower rows.
    """
    if not rows or any(not row for row in rows):
        msg = "Every row must hold at least one image"
        raise ValueError(msg)
    if desired_width < 1:
        msg = f"Desired width must be positive, got {desired_width}"
        raise ValueError(msg)

    strategy = strategy_for(shape)
    padding = strategy.padding
    max_columns = max(len(row) for row in rows)

    sizes: SizeMatrix = []
    cells: SizeMatrix = []
    max_width = 0
    stacked_height = 0
    for row in rows:
        calculated_width = desired_width // len(row)
        row_sizes = [scaled_size(im, calculated_width) for im in row]
        row_cells = [strategy.cell_size(size) for size in row_sizes]
        if any(cell.is_degenerate for cell in row_cells):
            msg = (f"invalid image dimensions: {strategy.shape.value} cells "
                   f"collapse below one pixel at width {calculated_width}")
            raise ValueError(msg)
        sizes.append(row_sizes)
        cells.append(row_cells)
        max_width = max(max_width, sum(cell.width for cell in row_cells))
        stacked_height += max(cell.height for cell in row_cells)

    # Rows advance by their tallest cell, which can exceed the tallest
    # column when tall cells sit in different columns.
    content_height = max(_max_column_height(cells, max_columns),
                         stacked_height)

    canvas = Size(
        max_width + (max_columns - 1) * padding + 2 * padding,
        content_height + (len(rows) - 1) * padding + 2 * padding,
    )
    logger.info(
        "Canvas %dx%d for %s cells (padding %d)",
        canvas.width, canvas.height, strategy.shape.value, padding,
    )
    return CollageLayout(
        sizes=sizes,
        cells=cells,
        canvas=canvas,
        padding=padding,
        max_columns=max_columns,
    )
