"""Table column derivation for array-of-reference properties."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from metaform_scaffold.rule_resolution import DEFAULT_COLUMN_ORDER, ColumnRule, FieldRule
from metaform_scaffold.schema_management import (
    PropertyAttributes,
    SchemaError,
    resolve_reference,
)

from .field_types import ColumnType, coerce_column_type, resolve_column_type, type_value
from .form_models import FormBuildContext
from .locale_collector import locale_reference


def build_columns(
    context: FormBuildContext,
    property_name: str,
    name: str,
    attributes: PropertyAttributes,
    rule: FieldRule,
) -> list[dict[str, Any]]:
    """Build the ordered columns of a table field from its referenced definition.

    Columns are sorted on their `order` (default 100, ties keep declaration
    order, extra columns last) and `order` is dropped from the output.
    """
    ref = attributes.items_ref
    if ref is None:
        raise SchemaError(
            f"Table property '{property_name}' of definition '{context.definition.name}' "
            "has no items $ref."
        )
    referenced = resolve_reference(
        context.document, ref, owner=context.definition.name, property_name=property_name
    )

    columns: list[dict[str, Any]] = []
    for referenced_name in referenced.properties:
        column = _build_column(
            context,
            name,
            referenced_name,
            referenced.property_attributes(referenced_name),
            rule.column_rule(referenced_name),
        )
        if column is not None:
            columns.append(column)

    for column_name, column_attributes in rule.extra_columns.items():
        columns.append(_build_extra_column(context, name, column_name, column_attributes))

    columns.sort(key=_column_order)
    for column in columns:
        column.pop("order", None)
    return columns


def _build_column(
    context: FormBuildContext,
    name: str,
    referenced_name: str,
    attributes: PropertyAttributes,
    column_rule: ColumnRule,
) -> dict[str, Any] | None:
    inferred_type = resolve_column_type(attributes)
    if inferred_type is None or column_rule.skip:
        return None

    column_type = coerce_column_type(column_rule.type) if column_rule.type else inferred_type
    locales = context.locales
    column: dict[str, Any] = {
        "title": locales.register(
            locales.key(name, referenced_name), attributes.description or referenced_name
        ),
        "name": referenced_name,
        "type": type_value(column_type),
    }
    for key, value in (
        ("calculate-sum", column_rule.calculate_sum),
        ("order", column_rule.order),
        ("min", column_rule.min),
        ("max", column_rule.max),
        ("step", column_rule.step),
    ):
        if value is not None:
            column[key] = value
    column.update(copy.deepcopy(dict(column_rule.extra)))

    if inferred_type is ColumnType.ENUM:
        column["values"] = [
            {
                "text": locales.register(locales.key(name, referenced_name, value), value),
                "value": value,
            }
            for value in attributes.enum or ()
        ]
    return column


def _build_extra_column(
    context: FormBuildContext, name: str, column_name: str, attributes: Mapping[str, Any]
) -> dict[str, Any]:
    locales = context.locales
    title_key = locales.key(name, column_name)
    if "title" not in attributes:
        locales.register(title_key, column_name)
    column: dict[str, Any] = {"title": locale_reference(title_key), "name": column_name}
    column.update(copy.deepcopy(dict(attributes)))
    return column


def _column_order(column: Mapping[str, Any]) -> int | float:
    order = column.get("order", DEFAULT_COLUMN_ORDER)
    if isinstance(order, bool) or not isinstance(order, (int, float)):
        return DEFAULT_COLUMN_ORDER
    return order
