"""Helpers for accessing the installed package version."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from image_collager.logging_utils import logger

DISTRIBUTION_NAME = "image-collager"
_UNKNOWN_VERSION = "0.0.0"


def _version_from_pyproject() -> str | None:
    """Return ``project.version`` of the nearest pyproject.toml, if any."""
    for parent in Path(__file__).resolve().parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            with pyproject_path.open("rb") as handle:
                data = tomllib.load(handle)
        except OSError as exc:
            logger.warning("Error reading %s: %s", pyproject_path, exc)
            return None
        version = data.get("project", {}).get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
    return None


def resolve_project_version() -> str:
    """
    Return the collager's version for ``--version``.

    Installed metadata wins; a source checkout falls back to its
    pyproject.toml, and anything else reports "0.0.0".
    """
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        pass
    return _version_from_pyproject() or _UNKNOWN_VERSION
