"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class PropertyAttributes:
    """Read-only view over one raw Swagger property mapping."""

    raw: Mapping[str, Any]

    @property
    def type(self) -> str | None:
        value = self.raw.get("type")
        return value if isinstance(value, str) else None

    @property
    def format(self) -> str | None:
        value = self.raw.get("format")
        return value if isinstance(value, str) else None

    @property
    def enum(self) -> tuple[Any, ...] | None:
        values = self.raw.get("enum")
        if isinstance(values, (list, tuple)):
            return tuple(values)
        return None

    @property
    def items(self) -> Mapping[str, Any]:
        items = self.raw.get("items")
        return items if isinstance(items, Mapping) else {}

    @property
    def ref(self) -> str | None:
        value = self.raw.get("$ref")
        return value if isinstance(value, str) and value else None

    @property
    def items_ref(self) -> str | None:
        value = self.items.get("$ref")
        return value if isinstance(value, str) and value else None

    @property
    def description(self) -> str | None:
        value = self.raw.get("description")
        if value is None:
            return None
        return str(value)


@dataclass(frozen=True)
class SchemaDefinition:
    """Named schema entity with ordered properties."""

    name: str
    properties: Mapping[str, Mapping[str, Any]]
    required: tuple[str, ...] = ()

    def property_attributes(self, property_name: str) -> PropertyAttributes:
        return PropertyAttributes(self.properties[property_name])


@dataclass(frozen=True)
class SchemaDocument:
    """Structured representation of a Swagger definitions document."""

    definitions: Mapping[str, SchemaDefinition]
    source_path: Path | None = field(default=None, compare=False)

    def get(self, name: str) -> SchemaDefinition | None:
        return self.definitions.get(name)
