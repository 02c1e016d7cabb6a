"""
UIStrings collector - extracts localizable ``UIStrings`` tables from a source tree.

The pipeline walks the tree, collects every message with its translator
description, builds an accented pseudo-locale from it and writes both as
locale JSON documents.
"""

from .collector import collect_all_strings_in_dir
from .locale_writer import write_strings_to_locale_format
from .pseudo_locale import create_pseudo_locale_strings
from .version import get_version

__all__ = [
    "collect_all_strings_in_dir",
    "create_pseudo_locale_strings",
    "get_version",
    "write_strings_to_locale_format",
]
