"""Form generation exports."""

from .field_builder import build_field
from .field_types import (
    ColumnType,
    FieldType,
    coerce_column_type,
    coerce_field_type,
    resolve_column_type,
    resolve_field_type,
    type_value,
)
from .form_assembler import build_form, generate_forms
from .form_models import FormBuildContext, GeneratedForm, GenerationFailure, GenerationReport
from .locale_collector import LocaleCollector, locale_reference
from .naming import camel_case, capitalize, field_name, kebab_case
from .table_builder import build_columns

__all__ = [
    "ColumnType",
    "FieldType",
    "FormBuildContext",
    "GeneratedForm",
    "GenerationFailure",
    "GenerationReport",
    "LocaleCollector",
    "build_columns",
    "build_field",
    "build_form",
    "camel_case",
    "capitalize",
    "coerce_column_type",
    "coerce_field_type",
    "field_name",
    "generate_forms",
    "kebab_case",
    "locale_reference",
    "resolve_column_type",
    "resolve_field_type",
    "type_value",
]
