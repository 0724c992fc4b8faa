"""Form assembly per definition and operation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from metaform_scaffold.rule_resolution import (
    PREPARE_RULES_KEY,
    Operation,
    RuleError,
    RuleSet,
    is_definition_skipped,
    resolve_definition_rules,
    resolve_rule_set,
)
from metaform_scaffold.schema_management import (
    PropertyAttributes,
    SchemaDocument,
    SchemaError,
    flatten_properties,
    prepare_schema,
)

from .field_builder import build_field
from .field_types import FieldType
from .form_models import FormBuildContext, GeneratedForm, GenerationFailure, GenerationReport
from .locale_collector import LocaleCollector
from .naming import field_name

_LOGGER = logging.getLogger(__name__)


def build_form(
    document: SchemaDocument,
    definition_name: str,
    operation: Operation,
    rule_set: RuleSet,
) -> GeneratedForm:
    """Build the form document and locale map for one definition and operation."""
    definition = document.get(definition_name)
    if definition is None:
        raise SchemaError(f"Unknown definition: '{definition_name}'")

    locales = LocaleCollector(definition.name, operation)
    title = locales.register(locales.base_key, definition.name)
    context = FormBuildContext(
        document=document, definition=definition, operation=operation, locales=locales
    )

    properties = flatten_properties(
        document, definition.name, definition.properties, rule_set.fields
    )
    fields_by_name: dict[str, dict[str, Any]] = {}
    for property_name, raw_attributes in properties.items():
        field = build_field(
            context,
            property_name,
            PropertyAttributes(raw_attributes),
            rule_set.field_rule(property_name),
        )
        if field is not None:
            # same camel-cased name: the later property replaces the earlier one
            fields_by_name[field_name(property_name)] = field

    fields = list(fields_by_name.values())
    fields.append(
        {
            "name": "submit",
            "type": FieldType.SUBMIT.value,
            "text": locales.register(locales.key("save"), "Save"),
        }
    )
    return GeneratedForm(
        definition_name=definition.name,
        operation=operation,
        form={"title": title, "sections": [{"fields": fields}]},
        locales=locales.entries,
    )


def generate_forms(document: SchemaDocument, rules: Mapping[str, Any] | None) -> GenerationReport:
    """Generate update and create forms for every definition not skipped by rules.

    The prepare rules are applied once up front; a failure there aborts the
    run. Any later failure only drops the affected (definition, operation) pair.
    """
    rules = rules or {}
    prepare_rules = rules.get(PREPARE_RULES_KEY)
    prepared = prepare_schema(
        document, prepare_rules if isinstance(prepare_rules, Mapping) else None
    )

    forms: list[GeneratedForm] = []
    failures: list[GenerationFailure] = []
    for definition_name in prepared.definitions:
        if is_definition_skipped(resolve_definition_rules(rules, definition_name)):
            _LOGGER.debug("Definition '%s' skipped by rules", definition_name)
            continue
        for operation in Operation:
            try:
                rule_set = resolve_rule_set(rules, definition_name, operation)
                forms.append(build_form(prepared, definition_name, operation, rule_set))
            except (SchemaError, RuleError) as exc:
                _LOGGER.warning(
                    "Could not generate %s form for '%s': %s",
                    operation.value,
                    definition_name,
                    exc,
                )
                failures.append(
                    GenerationFailure(
                        definition_name=definition_name, operation=operation, message=str(exc)
                    )
                )
    return GenerationReport(forms=tuple(forms), failures=tuple(failures))
