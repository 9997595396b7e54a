"""
Configuration schema and loader for the image collager.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, ConfigDict, Field

from image_collager.config_defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_HEIGHT,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_SHOW,
    DEFAULT_WIDTH,
)
from image_collager.type_defs import RGBA

_HEX_RGB_LENGTH = 6
_HEX_RGBA_LENGTH = 8
_OPAQUE = 255

# CLI argument name -> (config section, field name)
_CLI_FIELD_MAP: dict[str, tuple[str, str]] = {
    "width": ("layout", "width"),
    "height": ("layout", "height"),
    "output": ("output", "output"),
    "background": ("output", "background"),
    "show": ("output", "show"),
}


class LayoutConfig(BaseModel):
    """
    Control the target size of the collage.

    The cell shape and row count are positional command-line arguments
    and are not read from the config file.
    """

    model_config = ConfigDict(extra="forbid")

    width: int = Field(DEFAULT_WIDTH, ge=1)
    height: int = Field(DEFAULT_HEIGHT, ge=1)


class OutputConfig(BaseModel):
    """Configure where the collage goes and how it is displayed."""

    model_config = ConfigDict(extra="forbid")

    output: str = Field(DEFAULT_OUTPUT_PATH)
    background: str = Field(DEFAULT_BACKGROUND)
    show: bool = DEFAULT_SHOW


class CollageConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml.
    """

    model_config = ConfigDict(extra="forbid")

    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> CollageConfig:
        """Load a collage configuration from a TOML file."""
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return CollageConfig.model_validate(doc.unwrap())


def build_config_from_cli(
    cli_args: dict[str, Any],
    base_config: CollageConfig | None = None,
) -> CollageConfig:
    """
    Overlay command-line values on top of a base configuration.

    Keys missing from ``cli_args`` or set to None keep the base value.
    The merged result is validated again so CLI values obey the same
    constraints as the config file.
    """
    base = base_config or CollageConfig.model_validate({})
    data = base.model_dump()
    for arg_name, (section, field_name) in _CLI_FIELD_MAP.items():
        value = cli_args.get(arg_name)
        if value is not None:
            data[section][field_name] = value
    return CollageConfig.model_validate(data)


def parse_color(text: str) -> RGBA:
    """Parse ``#rrggbb`` or ``#rrggbbaa`` strings into RGBA tuples."""
    stripped = text.strip().lstrip("#")
    if len(stripped) not in (_HEX_RGB_LENGTH, _HEX_RGBA_LENGTH):
        msg = "color must look like #rrggbb or #rrggbbaa"
        raise ValueError(msg)
    try:
        channels = [int(stripped[i:i + 2], 16)
                    for i in range(0, len(stripped), 2)]
    except ValueError as exc:
        msg = "color contains invalid hex digits"
        raise ValueError(msg) from exc
    if len(channels) == _HEX_RGB_LENGTH // 2:
        channels.append(_OPAQUE)
    red, green, blue, alpha = channels
    return red, green, blue, alpha
