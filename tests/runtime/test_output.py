"""Tests for runtime.output helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from image_collager.runtime import output as runtime_output


def test_setup_output_directory_creates_parent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "collage.png"
    resolved = runtime_output.setup_output_directory(str(target))
    assert resolved == target
    assert target.parent.is_dir()


def test_setup_output_directory_fallback(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """An uncreatable parent falls back to collage_output/."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    with caplog.at_level("INFO"):
        resolved = runtime_output.setup_output_directory(
            str(blocker / "sub" / "collage.png"),
        )

    assert resolved == Path("collage_output") / "collage.png"
    assert (tmp_path / "collage_output").is_dir()
    assert "Failed to create output directory" in caplog.text


@pytest.mark.parametrize(
    ("given", "expected"),
    [
        ("out.png", "out.png"),
        ("out.PNG", "out.PNG"),
        ("out.jpg", "out.png"),
        ("out", "out.png"),
    ],
)
def test_collage_output_path(given: str, expected: str) -> None:
    assert runtime_output.collage_output_path(given) == Path(expected)
