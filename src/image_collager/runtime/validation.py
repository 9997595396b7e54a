"""Input validation helpers for runtime configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def validate_image_paths(image_paths: Sequence[str]) -> None:
    """Ensure every provided image path points to a file."""
    for image_path in image_paths:
        if not Path(image_path).is_file():
            msg = f"Image not found: {image_path}"
            raise FileNotFoundError(msg)


def validate_layout_parameters(
    number_of_rows: int,
    image_count: int,
    desired_width: int,
) -> None:
    """Reject layouts the engine cannot build before loading any image."""
    if image_count < 1:
        msg = "No images provided"
        raise ValueError(msg)
    if number_of_rows < 1 or number_of_rows > image_count:
        msg = (f"invalid row count {number_of_rows}: must be between 1 and "
               f"the number of images ({image_count})")
        raise ValueError(msg)
    if desired_width < 1:
        msg = f"Desired width must be positive, got {desired_width}"
        raise ValueError(msg)
