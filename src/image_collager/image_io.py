"""Image loading and dimension checks for collage inputs."""
from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image

from image_collager.constants import COLOR_MODE_RGBA, MAX_DIMENSION
from image_collager.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable
    from pathlib import Path


def load_image(path: str | Path) -> Image.Image:
    """
    Load an image from a file path and convert to RGBA.

    The file is decoded fully and closed before returning.

    Args:
        path: Path to the image file

    Returns:
        PIL Image in RGBA mode

    Raises:
        FileNotFoundError: If the image file does not exist
        IOError: If the image cannot be opened or decoded

    """
    try:
        with Image.open(path) as img:
            return img.convert(COLOR_MODE_RGBA)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise FileNotFoundError(msg) from e
    except OSError as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise OSError(msg) from e


def validate_image_dimensions(img: Image.Image) -> None:
    """Ensure image has positive dimensions; warn when it is very large."""
    if img.width < 1 or img.height < 1:
        msg = f"invalid image dimensions: {img.width}x{img.height}"
        raise ValueError(msg)
    if img.width > MAX_DIMENSION or img.height > MAX_DIMENSION:
        logger.warning(
            "Image is large: %dx%d. This may slow processing.",
            img.width,
            img.height,
        )


def load_images(paths: Iterable[str | Path]) -> list[Image.Image]:
    """Load and validate every image in ``paths``, keeping their order."""
    images = []
    for path in paths:
        img = load_image(path)
        validate_image_dimensions(img)
        logger.debug("Loaded %s (%dx%d)", path, img.width, img.height)
        images.append(img)
    return images
