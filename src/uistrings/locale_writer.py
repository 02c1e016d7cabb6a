"""
Locale document serialization.

A locale document is ``<locales_dir>/<locale>.json``: the string table as a
JSON object in table order, indented by two spaces, with non-ASCII text kept
literal and a trailing newline, so unchanged sources give byte-identical files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .types import StringTable

logger = logging.getLogger(__name__)


def locale_file_path(locale: str, locales_dir: Path) -> Path:
    """Return the document path for a locale."""
    return locales_dir / f"{locale}.json"


def render_locale_document(strings: StringTable) -> str:
    """
    Serialize a string table to the exact text of a locale document.

    Args:
        strings: Table to serialize

    Returns:
        JSON text ending with a newline
    """
    return json.dumps(strings, indent=2, ensure_ascii=False) + "\n"


def write_strings_to_locale_format(locale: str, strings: StringTable, locales_dir: Path) -> Path:
    """
    Write a string table as the document of a locale.

    Any existing document is replaced; nothing is merged.

    Args:
        locale: Locale identifier, used as the file name
        strings: Table to write
        locales_dir: Directory receiving the document (created if missing)

    Returns:
        Path of the written document

    Raises:
        OSError: If the document cannot be written
    """
    output_file = locale_file_path(locale, locales_dir)
    _ = output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w", encoding="utf-8", newline="\n") as file:
        _ = file.write(render_locale_document(strings))

    logger.debug(f"Wrote {len(strings)} strings to {output_file}")
    return output_file


def read_locale_file(locale: str, locales_dir: Path) -> StringTable:
    """
    Load a locale document back into a string table.

    Raises:
        FileNotFoundError: If the document does not exist
        ValueError: If the document is not a JSON object
    """
    document_path = locale_file_path(locale, locales_dir)
    with open(document_path, "r", encoding="utf-8") as file:
        data: object = json.load(file)  # pyright: ignore[reportAny]

    if not isinstance(data, dict):
        raise ValueError(f"Locale document must contain a JSON object: {document_path}")
    return data  # pyright: ignore[reportUnknownVariableType]


def locale_file_is_current(locale: str, strings: StringTable, locales_dir: Path) -> bool:
    """
    Check whether the document on disk matches what would be written.

    Args:
        locale: Locale identifier
        strings: Table that would be written
        locales_dir: Directory holding the document

    Returns:
        True if the file exists with exactly the rendered content
    """
    document_path = locale_file_path(locale, locales_dir)
    if not document_path.exists():
        return False
    existing = document_path.read_text(encoding="utf-8")
    return existing == render_locale_document(strings)
