"""Runtime utilities for validation, output paths, and version lookup."""

from .output import collage_output_path, setup_output_directory
from .validation import validate_image_paths, validate_layout_parameters
from .version import resolve_project_version

__all__ = [
    "collage_output_path",
    "resolve_project_version",
    "setup_output_directory",
    "validate_image_paths",
    "validate_layout_parameters",
]
