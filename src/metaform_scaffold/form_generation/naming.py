"""Identifier casing helpers for field names, locale keys and file names."""

from __future__ import annotations

import re

_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def split_words(value: str) -> list[str]:
    """Split on separators, case transitions and digit runs."""
    return _WORD_PATTERN.findall(value)


def camel_case(value: str) -> str:
    words = split_words(value)
    if not words:
        return ""
    return words[0].lower() + "".join(capitalize(word) for word in words[1:])


def kebab_case(value: str) -> str:
    return "-".join(word.lower() for word in split_words(value))


def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:].lower()


def field_name(property_name: str) -> str:
    """Camel-case each dot separated segment, keeping flattened prefixes visible."""
    return ".".join(camel_case(segment) for segment in property_name.split("."))
