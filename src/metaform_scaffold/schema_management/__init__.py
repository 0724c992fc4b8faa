"""Schema management exports."""

from .reference_flattening import (
    flatten_properties,
    prepare_schema,
    reference_target,
    resolve_reference,
)
from .schema_loading import SchemaError, load_schema_document, parse_schema_document
from .schema_models import PropertyAttributes, SchemaDefinition, SchemaDocument

__all__ = [
    "PropertyAttributes",
    "SchemaDefinition",
    "SchemaDocument",
    "SchemaError",
    "flatten_properties",
    "load_schema_document",
    "parse_schema_document",
    "prepare_schema",
    "reference_target",
    "resolve_reference",
]
