"""
Version utilities for the UIStrings collector.

Reads the installed distribution metadata and falls back to pyproject.toml
when running from a plain source checkout.
"""

import logging
import tomllib
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "uistrings-collector"


@lru_cache(maxsize=1)
def get_version() -> str:
    """
    Get the project version.

    Returns:
        Version string (e.g., "1.0.0"), or "unknown" if it cannot be determined
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.debug("Distribution metadata not found, falling back to pyproject.toml")

    pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug(f"Could not read {pyproject_path}: {e}")
        return "unknown"

    project = data.get("project", {})
    project_version = project.get("version") if isinstance(project, dict) else None
    return project_version if isinstance(project_version, str) else "unknown"
