"""
Exception classes for the UIStrings collector.

Every error raised here is fatal for a collection run: the command line
reports it and exits without writing any locale file.
"""

from __future__ import annotations

from pathlib import Path


class UIStringsError(Exception):
    """Base exception class for UIStrings collection errors."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path: Path | None = Path(path) if path is not None else None


class MissingExportError(UIStringsError):
    """A file declares a UIStrings block but does not export it."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            f"UIStrings not exported: {path} declares a UIStrings block "
            + "but does not export it",
            path=path,
        )


class DeclarationParseError(UIStringsError):
    """The isolated UIStrings declaration is not valid syntax."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Could not parse UIStrings in {path}: {reason}", path=path)
        self.reason: str = reason


class UnsupportedMessageError(UIStringsError):
    """A UIStrings property cannot be read without evaluating code."""

    def __init__(self, path: Path | str, key: str | None, reason: str) -> None:
        location = f"{path} | {key}" if key is not None else str(path)
        super().__init__(f"Unsupported UIStrings entry in {location}: {reason}", path=path)
        self.key: str | None = key


class ConfigurationError(Exception):
    """Configuration-related errors."""

    def __init__(self, message: str, config_path: Path | None = None) -> None:
        super().__init__(message)
        self.config_path: Path | None = config_path
