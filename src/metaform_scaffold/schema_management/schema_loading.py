"""Schema loading service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .schema_models import SchemaDefinition, SchemaDocument


class SchemaError(Exception):
    """Raised for schema loading or reference resolution failures."""


def load_schema_document(schema_path: Path | str) -> SchemaDocument:
    """Read a Swagger YAML/JSON file into a structured document."""
    path = Path(schema_path)
    if not path.exists():
        raise SchemaError(f"Schema file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"Failed to parse schema file {path}: {exc}") from exc

    return parse_schema_document(parsed, source_path=path)


def parse_schema_document(root: Any, *, source_path: Path | None = None) -> SchemaDocument:
    """Build a SchemaDocument from an already parsed Swagger mapping."""
    if not isinstance(root, Mapping):
        raise SchemaError("Schema root must be a mapping.")
    raw_definitions = root.get("definitions")
    if not isinstance(raw_definitions, Mapping):
        raise SchemaError("Schema must define a 'definitions' mapping.")

    definitions: dict[str, SchemaDefinition] = {}
    for name, raw_definition in raw_definitions.items():
        definitions[str(name)] = _parse_definition(str(name), raw_definition)
    return SchemaDocument(definitions=definitions, source_path=source_path)


def _parse_definition(name: str, raw_definition: Any) -> SchemaDefinition:
    if not isinstance(raw_definition, Mapping):
        raise SchemaError(f"Definition '{name}' must be a mapping.")
    raw_properties = raw_definition.get("properties") or {}
    if not isinstance(raw_properties, Mapping):
        raise SchemaError(f"Definition '{name}' properties must be a mapping.")

    properties = {
        str(property_name): dict(attributes) if isinstance(attributes, Mapping) else {}
        for property_name, attributes in raw_properties.items()
    }
    return SchemaDefinition(
        name=name,
        properties=properties,
        required=_normalize_required(raw_definition.get("required")),
    )


def _normalize_required(value: Any) -> tuple[str, ...]:
    if isinstance(value, Sequence) and not isinstance(value, str):
        return tuple(str(item) for item in value)
    return ()
