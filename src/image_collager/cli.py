"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

import image_collager.config as ic_config
import image_collager.runtime as ic_runtime
from image_collager.collage import SHAPE_CHOICES, save_collage
from image_collager.config_defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_WIDTH,
)
from image_collager.logging_utils import logger, set_verbose
from image_collager.type_defs import InputPaths

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

_PROG = "image-collager"


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog=_PROG,
        description="Arrange images into a rectangular or circular collage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"{_PROG} Rectangle 2 a.jpg b.jpg c.jpg d.jpg\n"
            f"{_PROG} Circle 1 a.jpg b.jpg c.jpg --output circles.png\n"
            f"{_PROG} Rectangle 3 *.png --width 1200 --show"
        ),
    )

    p.add_argument(
        "shape", nargs="?", choices=list(SHAPE_CHOICES),
        help="Cell shape")
    p.add_argument(
        "rows", nargs="?", type=int,
        help="Number of rows in the collage")
    p.add_argument(
        "images", nargs="*", default=[],
        help="Paths of the images to arrange")

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--width", type=int,
        help=f"Width every row is scaled to (default: {DEFAULT_WIDTH})",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--height", type=int,
        help="Requested height; the actual height follows the content",
        default=argparse.SUPPRESS)

    output = p.add_argument_group("output")
    output.add_argument(
        "--output", type=str,
        help=f"Output PNG path (default: {DEFAULT_OUTPUT_PATH})",
        default=argparse.SUPPRESS)
    output.add_argument(
        "--background", type=str,
        help=("Canvas color as #rrggbb or #rrggbbaa "
              f"(default: {DEFAULT_BACKGROUND})"),
        default=argparse.SUPPRESS)
    output.add_argument(
        "--show", action="store_true", default=argparse.SUPPRESS,
        help="Open the collage in the default image viewer")
    output.add_argument(
        "--verbose", action="store_true",
        help="Log every placed cell")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without building a collage")
    cfg.add_argument(
        "--version", action="version",
        version=f"%(prog)s {ic_runtime.resolve_project_version()}")

    return p


def log_parameters(
    paths: InputPaths,
    cfg: ic_config.CollageConfig,
    args: argparse.Namespace,
) -> None:
    """Log all effective parameters."""
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Images: %d", len(paths))
    logger.info("Shape: %s", args.shape)
    logger.info("Rows: %d", args.rows)
    logger.info("Width: %d", cfg.layout.width)
    logger.info("Requested Height: %d", cfg.layout.height)
    logger.info("Background: %s", cfg.output.background)
    logger.info("Output: %s", cfg.output.output)
    logger.info("Viewer: %s", "Enabled" if cfg.output.show else "Disabled")


def run_from_args(args: argparse.Namespace) -> Path:
    """Build and save a collage from command-line arguments."""
    set_verbose(args.verbose)

    base_cfg: ic_config.CollageConfig | None = None
    if args.config:
        base_cfg = ic_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            sys.exit(0)

    cfg = ic_config.build_config_from_cli(vars(args), base_config=base_cfg)
    paths = InputPaths(image_paths=list(args.images))
    log_parameters(paths, cfg, args)

    ic_runtime.validate_layout_parameters(
        args.rows, len(paths), cfg.layout.width,
    )
    ic_runtime.validate_image_paths(paths.image_paths)
    background = ic_config.parse_color(cfg.output.background)
    out_path = ic_runtime.collage_output_path(
        ic_runtime.setup_output_directory(cfg.output.output),
    )

    saved = save_collage(
        [Path(p) for p in paths.image_paths],
        out_path,
        number_of_rows=args.rows,
        shape=args.shape,
        desired_width=cfg.layout.width,
        desired_height=cfg.layout.height,
        background=background,
    )

    if cfg.output.show:
        with Image.open(saved) as img:
            img.show()
    return saved


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface for collage creation."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")
    if not args.validate_config_only and (
            args.shape is None or args.rows is None):
        arg_parser.error("No shape or number of rows defined")

    try:
        run_from_args(args)
    except (ValueError, OSError) as exc:
        arg_parser.error(str(exc))

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
