"""
Defines shared type aliases for the image collager.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from PIL import Image

RGBA = tuple[int, int, int, int]
ImagesMatrix = list[list[Image.Image]]


@dataclass(slots=True)
class InputPaths:
    """Image files that make up one collage, in command-line order."""

    image_paths: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.image_paths)
