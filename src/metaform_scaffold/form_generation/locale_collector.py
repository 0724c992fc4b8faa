"""Locale dictionary accumulated while a form is built."""

from __future__ import annotations

import json
from typing import Any

from metaform_scaffold.rule_resolution import Operation

from .naming import camel_case, capitalize


def locale_reference(key: str) -> str:
    """Return the placeholder the form renderer substitutes with a locale string."""
    return f"[[{key}]]"


def _key_segment(segment: object) -> str:
    # enum literals such as true, 1.5 or null are spelled as in the schema
    if isinstance(segment, str):
        return segment
    return json.dumps(segment)


class LocaleCollector:
    """Ordered locale entries for one (definition, operation) pair."""

    def __init__(self, definition_name: str, operation: Operation) -> None:
        self.base_key = f"forms.{camel_case(definition_name)}{capitalize(operation.value)}"
        self._entries: dict[str, Any] = {}

    def key(self, *segments: object) -> str:
        return ".".join([self.base_key, *(_key_segment(segment) for segment in segments)])

    def register(self, key: str, value: Any) -> str:
        self._entries[key] = value
        return locale_reference(key)

    @property
    def entries(self) -> dict[str, Any]:
        return dict(self._entries)
