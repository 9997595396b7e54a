"""Helpers for managing output locations of rendered collages."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from image_collager.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

_PNG_SUFFIX = ".png"


def setup_output_directory(
    output_path: str | Path,
    path_factory: Callable[[str], Path] = Path,
) -> Path:
    """
    Create the parent directory of ``output_path`` and return the path.

    Falls back to ``collage_output`` in the working directory when the
    desired parent cannot be created, keeping the file name.
    """
    resolved_path = path_factory(str(output_path))
    try:
        resolved_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create output directory: %s", exc)
        fallback_dir = path_factory("collage_output")
        fallback_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Using fallback directory: %s", fallback_dir)
        return fallback_dir / resolved_path.name
    return resolved_path


def collage_output_path(output_path: str | Path) -> Path:
    """Return ``output_path`` with a ``.png`` suffix."""
    path = Path(output_path)
    if path.suffix.lower() == _PNG_SUFFIX:
        return path
    return path.with_suffix(_PNG_SUFFIX)
