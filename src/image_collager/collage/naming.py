"""Path and persistence helpers for collage outputs."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from image_collager.collage.engine import make_collage
from image_collager.collage.shapes import Shape, parse_shape
from image_collager.config_defaults import DEFAULT_HEIGHT, DEFAULT_WIDTH
from image_collager.constants import COLOR_TRANSPARENT
from image_collager.image_io import load_images
from image_collager.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from image_collager.type_defs import RGBA


def default_collage_name(
    image_paths: Sequence[Path],
    shape: Shape | str,
    number_of_rows: int,
    out_dir: Path,
) -> Path:
    """Build a deterministic filename for a collage of ``image_paths``."""
    def stem(p: Path) -> str:
        return p.stem.replace(" ", "_")

    cell_shape = parse_shape(shape).value.lower()
    first = stem(image_paths[0]) if image_paths else "empty"
    name = (f"collage_{cell_shape}_{number_of_rows}x{len(image_paths)}"
            f"_{first}.png")
    return out_dir / name


def save_collage(  # noqa: PLR0913
    image_paths: Sequence[Path],
    out_path: Path,
    *,
    number_of_rows: int,
    shape: Shape | str,
    desired_width: int = DEFAULT_WIDTH,
    desired_height: int = DEFAULT_HEIGHT,
    background: RGBA = COLOR_TRANSPARENT,
) -> Path:
    """Open images, build a collage, and save it to out_path as PNG."""
    if not isinstance(out_path, Path):
        msg = "out_path must be a pathlib.Path"
        raise TypeError(msg)

    out_path.parent.mkdir(parents=True, exist_ok=True)

    images = load_images(image_paths)
    collage = make_collage(
        desired_width,
        desired_height,
        number_of_rows,
        shape,
        images,
        background=background,
    )
    collage.save(out_path, format="PNG")
    logger.info("Collage saved to: %s", out_path)
    return out_path
