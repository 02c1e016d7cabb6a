"""
UIStrings collection from a JavaScript source tree.

Source files declare their user-facing messages in a top-level object literal:

    const UIStrings = {
      /** Title of a diagnostic audit. */
      title: 'Avoids enormous network payloads',
      displayValue: 'Total size was {totalBytes, number, bytes} KB',
    };

    module.exports.UIStrings = UIStrings;

Only that declaration is cut out of the file and parsed with esprima, which
keeps the collector independent of whatever syntax the rest of the file uses.
Message text is read straight from the literal values in the parse tree, and
the translator description is the comment placed in front of each property.

Usage Examples:
    Collect every table below the configured source directory:
        >>> from uistrings.config import CollectorConfig
        >>> from uistrings.collector import collect_all_strings_in_dir
        >>> config = CollectorConfig()
        >>> strings = collect_all_strings_in_dir(config.source_path, config)
        >>> strings["lighthouse-core/audits/metrics/first-contentful-paint.js | title"]
        {'message': 'First Contentful Paint', 'description': '...'}
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

import esprima
from esprima.error_handler import Error as EsprimaError

from .config import CollectorConfig
from .exceptions import DeclarationParseError, MissingExportError, UnsupportedMessageError
from .types import MessageEntry, StringTable

logger = logging.getLogger(__name__)

UISTRINGS_IDENTIFIER = "UIStrings"

# Top-level declaration up to the first line that is exactly "};"
UISTRINGS_REGEX = re.compile(
    r"^(?:export[ \t]+)?(?P<declaration>const UIStrings = [\s\S]*?^\};\r?\n)",
    re.MULTILINE,
)

# String literals are kept so that "//" inside a URL is not taken for a comment
COMMENT_OR_STRING_REGEX = re.compile(
    r"""('(?:\\.|[^'\\\n])*'|"(?:\\.|[^"\\\n])*"|`(?:\\.|[^`\\])*`)|//[^\n]*|/\*[\s\S]*?\*/"""
)

EXPORT_ASSIGNMENT_PATTERNS = (
    re.compile(r"\bexports\.UIStrings\s*=(?!=)"),
    re.compile(r"^export[ \t]+const[ \t]+UIStrings\b", re.MULTILINE),
)

CJS_EXPORT_OBJECT_REGEX = re.compile(r"\bmodule\.exports\s*=\s*\{(?P<entries>[^}]*)\}")
CJS_EXPORT_ENTRY_REGEX = re.compile(r"""^(?:UIStrings|(['"]?)UIStrings\1\s*:[\s\S]*)$""")

ESM_EXPORT_LIST_REGEX = re.compile(r"\bexport\s*\{(?P<entries>[^}]*)\}")
ESM_EXPORT_ENTRY_REGEX = re.compile(r"^(?:UIStrings|[\w$]+\s+as\s+UIStrings)$")


def is_ignored_path(path: Path, ignored_path_components: Iterable[str]) -> bool:
    """
    Check whether a file or directory is excluded from collection.

    Args:
        path: Entry to check; its absolute POSIX form is matched
        ignored_path_components: Substrings that exclude any path containing them

    Returns:
        True if the entry (and, for a directory, its whole subtree) is skipped
    """
    full_path = path.absolute().as_posix()
    return any(component in full_path for component in ignored_path_components)


def find_uistrings_declaration(content: str) -> str | None:
    """
    Cut the ``const UIStrings = {...};`` declaration out of a source file.

    Args:
        content: Full text of the source file

    Returns:
        The declaration text including its trailing newline, or None
    """
    match = UISTRINGS_REGEX.search(content)
    if match is None:
        return None
    return match.group("declaration")


def strip_comments(content: str) -> str:
    """Replace every comment with a space, leaving string literals intact."""
    return COMMENT_OR_STRING_REGEX.sub(lambda match: match.group(1) or " ", content)


def _exports_entry(entries: str, entry_regex: re.Pattern[str]) -> bool:
    """Check a comma separated export list for an entry named UIStrings."""
    return any(entry_regex.match(entry.strip()) for entry in entries.split(","))


def exports_uistrings(content: str) -> bool:
    """
    Check whether a source file exports something under the name ``UIStrings``.

    Comments are ignored. Renaming exports such as ``{strings: UIStrings}``
    or ``export {UIStrings as strings}`` do not count.
    """
    code = strip_comments(content)
    if any(pattern.search(code) for pattern in EXPORT_ASSIGNMENT_PATTERNS):
        return True
    if any(
        _exports_entry(match.group("entries"), CJS_EXPORT_ENTRY_REGEX)
        for match in CJS_EXPORT_OBJECT_REGEX.finditer(code)
    ):
        return True
    return any(
        _exports_entry(match.group("entries"), ESM_EXPORT_ENTRY_REGEX)
        for match in ESM_EXPORT_LIST_REGEX.finditer(code)
    )


def _property_key(prop: Any, path: str) -> str:  # pyright: ignore[reportExplicitAny,reportAny]
    """Return the name of a non-computed object literal property."""
    if prop.type != "Property" or prop.computed:
        raise UnsupportedMessageError(path, None, f"{prop.type} is not a plain property")

    key = prop.key
    match key.type:
        case "Identifier":
            return str(key.name)
        case "Literal" if isinstance(key.value, str):
            return key.value
        case _:
            raise UnsupportedMessageError(path, None, f"unsupported property key {key.type}")


def _cooked_text(quasi: Any) -> str:  # pyright: ignore[reportExplicitAny,reportAny]
    """Escape-processed text of a template literal chunk."""
    value = quasi.value
    if isinstance(value, Mapping):
        return str(value["cooked"])  # pyright: ignore[reportUnknownArgumentType]
    return str(value.cooked)


def _static_string_value(node: Any, path: str, key: str) -> str:  # pyright: ignore[reportExplicitAny,reportAny]
    """
    Evaluate a property value that is built only from string constants.

    Raises:
        UnsupportedMessageError: If the value needs code evaluation
    """
    match node.type:
        case "Literal" if isinstance(node.value, str):
            return node.value
        case "TemplateLiteral" if not node.expressions:
            return "".join(_cooked_text(quasi) for quasi in node.quasis)
        case "BinaryExpression" if node.operator == "+":
            return _static_string_value(node.left, path, key) + _static_string_value(
                node.right, path, key
            )
        case _:
            raise UnsupportedMessageError(
                path, key, f"{node.type} is not a string literal, template literal or concatenation"
            )


def compute_description(
    comments: Sequence[Any],  # pyright: ignore[reportExplicitAny]
    prop: Any,  # pyright: ignore[reportExplicitAny,reportAny]
    key: str,
    start_offset: int,
    default_descriptions: Mapping[str, str],
) -> str | None:
    """
    Find the translator description written in front of a property.

    The first comment starting after ``start_offset`` (the end of the previous
    property) and no later than the start of ``prop`` wins. Its text loses one
    leading ``*`` and surrounding whitespace.

    Args:
        comments: Comments of the parsed declaration in source order
        prop: Property node whose description is wanted
        key: Property name, used for the default description lookup
        start_offset: End offset of the previous property, 0 for the first one
        default_descriptions: Fallback descriptions by property name

    Returns:
        The description, or None if neither a comment nor a default exists
    """
    end_offset: int = prop.range[0]
    for comment in comments:
        comment_start: int = comment.range[0]
        if comment_start <= start_offset or comment_start > end_offset:
            continue
        return str(comment.value).replace("*", "", 1).strip()

    return default_descriptions.get(key)


def collect_strings_from_source(
    content: str,
    relative_path: str,
    default_descriptions: Mapping[str, str],
) -> StringTable:
    """
    Extract the UIStrings table of a single source file.

    Args:
        content: Full text of the source file
        relative_path: Path used in the keys and error messages
        default_descriptions: Fallback descriptions by property name

    Returns:
        Entries keyed ``"<relative_path> | <property>"`` in declaration order,
        empty if the file declares no UIStrings

    Raises:
        MissingExportError: If the declaration exists but is not exported
        DeclarationParseError: If the declaration is not valid syntax
        UnsupportedMessageError: If a key or message cannot be read statically
    """
    declaration = find_uistrings_declaration(content)
    if declaration is None:
        return {}

    if not exports_uistrings(content):
        raise MissingExportError(relative_path)

    try:
        program = esprima.parseScript(declaration, {"comment": True, "range": True})  # pyright: ignore[reportUnknownMemberType]
    except EsprimaError as e:
        raise DeclarationParseError(relative_path, str(e)) from e

    comments: list[Any] = list(program.comments or [])  # pyright: ignore[reportExplicitAny]
    strings: StringTable = {}

    for statement in program.body:
        if statement.type != "VariableDeclaration":
            continue
        declarator = statement.declarations[0]
        if declarator.id.name != UISTRINGS_IDENTIFIER:
            continue
        if declarator.init is None or declarator.init.type != "ObjectExpression":
            raise UnsupportedMessageError(relative_path, None, "UIStrings is not an object literal")

        last_property_end = 0
        for prop in declarator.init.properties:
            key = _property_key(prop, relative_path)
            entry: MessageEntry = {"message": _static_string_value(prop.value, relative_path, key)}
            description = compute_description(
                comments, prop, key, last_property_end, default_descriptions
            )
            if description is not None:
                entry["description"] = description

            strings[f"{relative_path} | {key}"] = entry
            logger.debug(f"Found UIString {key!r} in {relative_path}")
            last_property_end = prop.range[1]

    return strings


def collect_all_strings_in_dir(
    directory: Path,
    config: CollectorConfig,
    strings: StringTable | None = None,
) -> StringTable:
    """
    Recursively collect UIStrings tables below a directory.

    Entries are visited depth first in name order; ignored entries are
    skipped before a directory is entered or a file is read.

    Args:
        directory: Directory to scan
        config: Collector settings (project root, ignore markers, defaults)
        strings: Table to extend; a new one is created when omitted

    Returns:
        The table holding every collected entry

    Raises:
        OSError: If a directory or file cannot be read
        MissingExportError: If a file declares UIStrings without exporting it
        DeclarationParseError: If a UIStrings declaration cannot be parsed
        UnsupportedMessageError: If a message cannot be read statically
    """
    if strings is None:
        strings = {}

    for entry in sorted(directory.iterdir(), key=lambda entry: entry.name):
        if is_ignored_path(entry, config.ignored_path_components):
            continue

        if entry.is_dir():
            _ = collect_all_strings_in_dir(entry, config, strings)
            continue

        if not entry.name.endswith(config.source_extension):
            continue

        relative_path = Path(os.path.relpath(entry, config.project_root)).as_posix()
        logger.info(f"Collecting from {relative_path}")

        content = entry.read_text(encoding="utf-8")
        strings.update(
            collect_strings_from_source(content, relative_path, config.default_descriptions)
        )

    return strings
