"""Form field construction for one schema property."""

from __future__ import annotations

import copy
import logging
from typing import Any

from metaform_scaffold.rule_resolution import FieldRule
from metaform_scaffold.schema_management import PropertyAttributes

from .field_types import FieldType, coerce_field_type, resolve_field_type, type_value
from .form_models import FormBuildContext
from .naming import field_name
from .table_builder import build_columns

_LOGGER = logging.getLogger(__name__)


def build_field(
    context: FormBuildContext,
    property_name: str,
    attributes: PropertyAttributes,
    rule: FieldRule,
) -> dict[str, Any] | None:
    """Build the field for a property, or None when it is skipped or untyped.

    Visible fields register their title under the form's locale key and select
    fields one option label per enum value. Rule extras are applied last and
    win over generated attributes.
    """
    if rule.skip:
        return None

    field_type = coerce_field_type(rule.type) if rule.type else resolve_field_type(attributes)
    if field_type is None:
        _LOGGER.debug(
            "No field type for %s.%s, property dropped", context.definition.name, property_name
        )
        return None

    name = field_name(property_name)
    locales = context.locales
    field: dict[str, Any] = {"name": name, "type": type_value(field_type)}

    if field_type is not FieldType.HIDDEN:
        field["title"] = locales.register(
            locales.key(name), attributes.description or property_name
        )
        field["required"] = property_name in context.definition.required

    if field_type is FieldType.SELECT:
        field["options"] = [
            {"text": locales.register(locales.key(name, value), value), "name": value}
            for value in attributes.enum or ()
        ]

    if field_type is FieldType.TABLE:
        field["columns"] = build_columns(context, property_name, name, attributes, rule)
        field["addRows"] = True

    field.update(copy.deepcopy(dict(rule.extra)))
    return field
