"""Form field and table column type resolution."""

from __future__ import annotations

from enum import Enum

from metaform_scaffold.schema_management import PropertyAttributes

_NUMBER_SCHEMA_TYPES = frozenset({"integer", "number"})
_NUMBER_FORMATS = frozenset({"int32", "int64", "double"})


class FieldType(str, Enum):
    """Field types understood by the metaform renderer."""

    TEXT = "text"
    MEMO = "memo"
    EMAIL = "email"
    URL = "url"
    NUMBER = "number"
    BOOLEAN = "boolean"
    RADIO = "radio"
    SELECT = "select"
    CHECKLIST = "checklist"
    DATE = "date"
    DATE_TIME = "date-time"
    TIME = "time"
    TABLE = "table"
    FILES = "files"
    HTML = "html"
    HIDDEN = "hidden"
    SUBMIT = "submit"


class ColumnType(str, Enum):
    """Column types allowed inside a table field."""

    TEXT = "text"
    NUMBER = "number"
    ENUM = "enum"
    DATE = "date"
    TIME = "time"


_COLUMN_TYPES_BY_FIELD_TYPE = {
    FieldType.TEXT: ColumnType.TEXT,
    FieldType.NUMBER: ColumnType.NUMBER,
    FieldType.SELECT: ColumnType.ENUM,
    FieldType.DATE: ColumnType.DATE,
    FieldType.TIME: ColumnType.TIME,
}


def resolve_field_type(attributes: PropertyAttributes) -> FieldType | None:
    """Infer the field type of a schema property; first matching rule wins."""
    schema_type = attributes.type
    schema_format = attributes.format

    if attributes.enum is not None:
        return FieldType.SELECT
    if schema_type in _NUMBER_SCHEMA_TYPES and schema_format in _NUMBER_FORMATS:
        return FieldType.NUMBER
    if schema_type == "string":
        if schema_format is None:
            return FieldType.TEXT
        if schema_format == "date":
            return FieldType.DATE
        if schema_format == "date-time":
            return FieldType.DATE_TIME
    if schema_type == "array" and attributes.items_ref is not None:
        return FieldType.TABLE
    return None


def resolve_column_type(attributes: PropertyAttributes) -> ColumnType | None:
    """Infer a column type, or None when the property cannot be a column."""
    field_type = resolve_field_type(attributes)
    if field_type is None:
        return None
    return _COLUMN_TYPES_BY_FIELD_TYPE.get(field_type)


def coerce_field_type(value: str) -> FieldType | str:
    """Map a rule override onto a known field type.

    Types the generator has no special handling for are passed to the renderer
    unchanged.
    """
    try:
        return FieldType(value)
    except ValueError:
        return value


def coerce_column_type(value: str) -> ColumnType | str:
    """Map a column rule override onto a known column type, passing others through."""
    try:
        return ColumnType(value)
    except ValueError:
        return value


def type_value(resolved_type: FieldType | ColumnType | str) -> str:
    if isinstance(resolved_type, Enum):
        return str(resolved_type.value)
    return resolved_type
