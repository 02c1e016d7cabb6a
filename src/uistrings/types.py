"""Shared type definitions for string tables."""

from __future__ import annotations

from typing import NotRequired, TypeAlias, TypedDict


class MessageEntry(TypedDict):
    """One localizable message and its optional translator description."""

    message: str
    description: NotRequired[str]


# "<path relative to project root> | <property name>" -> entry
StringTable: TypeAlias = dict[str, MessageEntry]
