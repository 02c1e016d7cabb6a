"""
Configuration for the UIStrings collector.

The defaults describe the repository layout the collector ships in: sources
live under ``lighthouse-core`` and the locale documents are written to
``lighthouse-core/lib/locales``. A YAML file can override any field.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Repository checkout containing src/uistrings
DEFAULT_PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_IGNORED_PATH_COMPONENTS = (
    "/.git",
    "/scripts",
    "/node_modules",
    "/renderer",
    "/test/",
    "-test.js",
)

DEFAULT_DESCRIPTIONS = {
    "failureTitle": "Show to users as the title of the audit when it is in a failing state.",
}


class CollectorConfig(BaseModel):
    """Settings for one collection run."""

    model_config = ConfigDict(extra="forbid")

    project_root: Path = Field(
        default=DEFAULT_PROJECT_ROOT,
        description="Root that string keys are made relative to",
    )
    source_dir: Path = Field(
        default=Path("lighthouse-core"),
        description="Directory to scan, relative to project_root",
    )
    locales_dir: Path = Field(
        default=Path("lighthouse-core/lib/locales"),
        description="Directory receiving <locale>.json, relative to project_root",
    )
    source_extension: str = Field(
        default=".js",
        description="File name suffix of candidate source files",
        pattern=r"^\.[A-Za-z0-9_.]+$",
    )
    ignored_path_components: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORED_PATH_COMPONENTS),
        description="Entries whose full path contains any of these are skipped",
    )
    default_descriptions: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_DESCRIPTIONS),
        description="Fallback translator descriptions by property name",
    )
    source_locale: str = Field(default="en-US", min_length=1)
    pseudo_locale: str = Field(default="en-XA", min_length=1)

    @field_validator("ignored_path_components")
    @classmethod
    def validate_ignored_path_components(cls, v: list[str]) -> list[str]:
        """Reject empty markers, which would match every path."""
        if any(not component for component in v):
            raise ValueError("Ignored path components must be non-empty strings")
        return v

    @field_validator("source_locale", "pseudo_locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Locales become file names, so they cannot contain path separators."""
        if "/" in v or "\\" in v:
            raise ValueError(f"Locale must not contain path separators: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_distinct_locales(self) -> CollectorConfig:
        """The pseudo-locale would overwrite the source locale otherwise."""
        if self.source_locale == self.pseudo_locale:
            raise ValueError("source_locale and pseudo_locale must differ")
        return self

    @property
    def source_path(self) -> Path:
        """Absolute directory to scan."""
        return self.project_root / self.source_dir

    @property
    def locales_path(self) -> Path:
        """Absolute directory receiving the locale documents."""
        return self.project_root / self.locales_dir


def load_config(config_path: Path, project_root: Path | None = None) -> CollectorConfig:
    """
    Load and validate collector settings from a YAML file.

    Args:
        config_path: Path to the YAML configuration file
        project_root: Root used when the file does not set ``project_root``

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}", config_path)

    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}", config_path) from e

    if raw_config_data is None:
        config_data: dict[str, object] = {}
    elif isinstance(raw_config_data, dict):
        config_data = dict(raw_config_data)  # pyright: ignore[reportUnknownArgumentType]
    else:
        raise ConfigurationError(
            f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}",
            config_path,
        )

    # A relative project_root is relative to the configuration file
    configured_root = config_data.get("project_root")
    if isinstance(configured_root, str):
        config_data["project_root"] = config_path.parent / configured_root
    elif project_root is not None and configured_root is None:
        config_data["project_root"] = project_root

    try:
        config = CollectorConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}", config_path) from e

    logger.debug(f"Loaded configuration from {config_path}")
    return config
