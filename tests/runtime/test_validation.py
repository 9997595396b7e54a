"""Tests for runtime.validation helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from image_collager.runtime import validation as runtime_validation


def test_validate_image_paths_success(image_files: list[Path]) -> None:
    runtime_validation.validate_image_paths([str(p) for p in image_files])


@pytest.mark.parametrize(
    "paths",
    [
        ["missing.png"],
        [__file__, "missing.png"],
    ],
)
def test_validate_image_paths_failure(paths: list[str]) -> None:
    with pytest.raises(FileNotFoundError, match="missing.png"):
        runtime_validation.validate_image_paths(paths)


def test_validate_layout_parameters_success() -> None:
    runtime_validation.validate_layout_parameters(
        number_of_rows=2, image_count=4, desired_width=800,
    )


@pytest.mark.parametrize(
    ("rows", "count", "width", "message"),
    [
        (1, 0, 800, "No images provided"),
        (0, 4, 800, "invalid row count"),
        (5, 4, 800, "invalid row count"),
        (1, 4, 0, "Desired width must be positive"),
    ],
)
def test_validate_layout_parameters_failure(
    rows: int,
    count: int,
    width: int,
    message: str,
) -> None:
    with pytest.raises(ValueError, match=message):
        runtime_validation.validate_layout_parameters(rows, count, width)
