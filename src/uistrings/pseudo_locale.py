"""
Pseudo-localization of collected strings.

Every ASCII letter outside ``{...}`` placeholders gets a combining accent,
alternating circumflex and acute, so untranslated or truncated text stands
out in the UI while ICU arguments such as ``{count, plural, ...}`` survive.
"""

from __future__ import annotations

import logging
import string

from .types import MessageEntry, StringTable

logger = logging.getLogger(__name__)

COMBINING_CIRCUMFLEX = "\u0302"
COMBINING_ACUTE = "\u0301"

ASCII_LETTERS = frozenset(string.ascii_letters)


def pseudo_localize_message(message: str) -> str:
    """
    Accent the letters of a message, leaving placeholders untouched.

    Args:
        message: Source message

    Returns:
        The message with a combining mark after each letter outside braces

    Examples:
        >>> pseudo_localize_message("ab") == "a\\u0302b\\u0301"
        True
        >>> pseudo_localize_message("{n} a") == "{n} a\\u0302"
        True
    """
    pseudo_localized: list[str] = []
    brace_count = 0
    use_hat_for_accent_mark = True

    for char in message:
        pseudo_localized.append(char)
        # Characters inside braces are left alone
        if char == "{":
            brace_count += 1
        elif char == "}":
            brace_count -= 1
        elif brace_count == 0 and char in ASCII_LETTERS:
            pseudo_localized.append(
                COMBINING_CIRCUMFLEX if use_hat_for_accent_mark else COMBINING_ACUTE
            )
            use_hat_for_accent_mark = not use_hat_for_accent_mark

    return "".join(pseudo_localized)


def create_pseudo_locale_strings(strings: StringTable) -> StringTable:
    """
    Build the pseudo-locale table for a collected table.

    Descriptions are dropped; the pseudo-locale carries messages only.

    Args:
        strings: Collected source-locale table

    Returns:
        New table with the same keys in the same order
    """
    pseudo_localized_strings: StringTable = {}
    for key, entry in strings.items():
        pseudo_entry: MessageEntry = {"message": pseudo_localize_message(entry["message"])}
        pseudo_localized_strings[key] = pseudo_entry

    logger.debug(f"Pseudo-localized {len(pseudo_localized_strings)} messages")
    return pseudo_localized_strings
