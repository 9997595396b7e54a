"""
Unit tests for the config module used in the image collager.

Covers:
- Successful loading of a valid config.toml
- Default fallbacks for missing values
- Error handling for missing files and invalid values
- Merging command-line values over a loaded config
- Color parsing
"""
import tempfile
from pathlib import Path
from typing import Any

import pytest
import tomlkit
from pydantic import ValidationError

import image_collager.config as ic_config
from image_collager.config_defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_HEIGHT,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_WIDTH,
)


def create_toml_file(data: dict[str, Any]) -> str:
    """Write a TOML string to a temporary file and return its path."""
    doc = tomlkit.document()
    doc.update(data)
    toml_str = tomlkit.dumps(doc)

    with tempfile.NamedTemporaryFile(
        delete=False,
        suffix=".toml",
        mode="w",
        encoding="utf-8",
    ) as temp:
        temp.write(toml_str)
        return temp.name


def test_load_valid_config() -> None:
    """Test that a well-formed config.toml loads successfully."""
    path = create_toml_file({
        "layout": {"width": 1200, "height": 400},
        "output": {"output": "out/c.png", "show": True,
                   "background": "#ffffff"},
    })
    cfg = ic_config.ConfigLoader.load(path)

    assert isinstance(cfg, ic_config.CollageConfig)
    assert cfg.layout.width == 1200  # noqa: PLR2004
    assert cfg.layout.height == 400  # noqa: PLR2004
    assert cfg.output.output == "out/c.png"
    assert cfg.output.show is True
    assert cfg.output.background == "#ffffff"


def test_example_config_loads() -> None:
    """The config.toml shipped at the repository root is valid."""
    root = Path(__file__).resolve().parents[1]
    cfg = ic_config.ConfigLoader.load(str(root / "config.toml"))
    assert cfg.layout.width == DEFAULT_WIDTH
    assert cfg.output.output == "out/collage.png"


def test_missing_file_raises() -> None:
    """Ensure FileNotFoundError is raised for nonexistent config."""
    with pytest.raises(FileNotFoundError):
        ic_config.ConfigLoader.load("nonexistent_file.toml")


def test_partial_config_uses_defaults() -> None:
    """ConfigLoader should fall back to defaults for missing sections."""
    path = create_toml_file({"layout": {"height": 600}})
    cfg = ic_config.ConfigLoader.load(path)

    assert cfg.layout.height == 600  # noqa: PLR2004
    assert cfg.layout.width == DEFAULT_WIDTH
    assert cfg.output.output == DEFAULT_OUTPUT_PATH
    assert cfg.output.background == DEFAULT_BACKGROUND


@pytest.mark.parametrize(
    ("section", "values", "field"),
    [
        ("layout", {"height": 0}, "height"),
        ("layout", {"width": -5}, "width"),
        ("layout", {"shape": "Circle"}, "shape"),
        ("layout", {"rows": 2}, "rows"),
        ("output", {"format": "jpg"}, "format"),
    ],
)
def test_invalid_values_raise(
    section: str,
    values: dict[str, Any],
    field: str,
) -> None:
    path = create_toml_file({section: values})
    with pytest.raises(ValidationError) as exc_info:
        ic_config.ConfigLoader.load(path)
    assert field in str(exc_info.value)


def test_build_config_from_cli_overrides_base() -> None:
    base = ic_config.CollageConfig.model_validate(
        {"layout": {"height": 300, "width": 640}},
    )
    cfg = ic_config.build_config_from_cli(
        {"rows": 3, "shape": "Circle", "output": "x.png", "width": None,
         "height": 500, "images": ["a.png"]},
        base_config=base,
    )
    assert cfg.layout.height == 500  # noqa: PLR2004
    assert cfg.layout.width == 640  # noqa: PLR2004
    assert cfg.output.output == "x.png"
    assert base.layout.height == 300  # noqa: PLR2004


def test_build_config_from_cli_defaults() -> None:
    cfg = ic_config.build_config_from_cli({})
    assert cfg.layout.width == DEFAULT_WIDTH
    assert cfg.layout.height == DEFAULT_HEIGHT


def test_build_config_from_cli_validates() -> None:
    with pytest.raises(ValidationError):
        ic_config.build_config_from_cli({"width": 0})


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("#0a0b0c", (10, 11, 12, 255)),
        ("0a0b0c", (10, 11, 12, 255)),
        ("#0a0b0c80", (10, 11, 12, 128)),
        ("#00000000", (0, 0, 0, 0)),
    ],
)
def test_parse_color(text: str, expected: tuple[int, int, int, int]) -> None:
    assert ic_config.parse_color(text) == expected


def test_parse_color_errors() -> None:
    with pytest.raises(ValueError, match="must look like"):
        ic_config.parse_color("#fff")
    with pytest.raises(ValueError, match="invalid hex digits"):
        ic_config.parse_color("#xx0000")
