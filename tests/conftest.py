"""
Test configuration and shared fixtures for image_collager.

This module defines reusable pytest fixtures for building in-memory
images, writing image files to disk, and routing the shared logger
through pytest's log capture.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from image_collager.constants import COLOR_MODE_RGBA
from image_collager.logging_utils import logger

ImageFactory = Callable[..., Image.Image]


@pytest.fixture
def make_image() -> ImageFactory:
    """Factory for solid RGBA images of a given size and color."""

    def _make(
        width: int,
        height: int,
        color: tuple[int, int, int, int] | str = (255, 0, 0, 255),
    ) -> Image.Image:
        return Image.new(COLOR_MODE_RGBA, (width, height), color)

    return _make


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a sample 100x100 red RGB PIL image."""
    return Image.new("RGB", (100, 100), color="red")


@pytest.fixture
def square_images(make_image: ImageFactory) -> list[Image.Image]:
    """Four 100x100 images in red, green, blue, yellow order."""
    return [
        make_image(100, 100, (255, 0, 0, 255)),
        make_image(100, 100, (0, 255, 0, 255)),
        make_image(100, 100, (0, 0, 255, 255)),
        make_image(100, 100, (255, 255, 0, 255)),
    ]


@pytest.fixture
def write_images(tmp_path: Path) -> Callable[..., list[Path]]:
    """Save solid RGB images of the given sizes and return their paths."""

    def _write(
        sizes: list[tuple[int, int]],
        color: str = "blue",
    ) -> list[Path]:
        paths = []
        for idx, size in enumerate(sizes):
            path = tmp_path / f"image_{idx}.png"
            Image.new("RGB", size, color=color).save(path)
            paths.append(path)
        return paths

    return _write


@pytest.fixture
def image_files(write_images: Callable[..., list[Path]]) -> list[Path]:
    """Four 64x64 PNG files on disk."""
    return write_images([(64, 64)] * 4)


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the collager logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
