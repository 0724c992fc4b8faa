"""Reference resolution and property flattening."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from metaform_scaffold.rule_resolution import FieldRule, deep_merge, parse_rule_set

from .schema_loading import SchemaError
from .schema_models import PropertyAttributes, SchemaDefinition, SchemaDocument

_LOGGER = logging.getLogger(__name__)


def reference_target(ref: str) -> str:
    """Return the definition name a `$ref` points to (its last path segment)."""
    return ref[ref.rfind("/") + 1 :]


def resolve_reference(
    document: SchemaDocument, ref: str, *, owner: str, property_name: str
) -> SchemaDefinition:
    """Return the referenced definition or fail naming the broken reference."""
    target = reference_target(ref)
    definition = document.get(target) if target else None
    if definition is None:
        raise SchemaError(
            f"Unresolvable reference '{ref}' on property '{property_name}' "
            f"of definition '{owner}'."
        )
    return definition


def flatten_properties(
    document: SchemaDocument,
    owner: str,
    properties: Mapping[str, Mapping[str, Any]],
    field_rules: Mapping[str, FieldRule],
) -> dict[str, dict[str, Any]]:
    """Return a private copy of `properties` with flatten rules applied.

    Referenced properties are either inserted as `<property>.<referenced>` or
    merged into the mapping, where they win over same-named properties. The
    flattened property itself is always removed. Only the properties present
    on entry are considered, so a flatten never cascades.
    """
    flattened: dict[str, dict[str, Any]] = copy.deepcopy(
        {name: dict(attributes) for name, attributes in properties.items()}
    )
    for property_name, attributes in properties.items():
        rule = field_rules.get(property_name)
        ref = PropertyAttributes(attributes).ref
        if rule is None or not rule.flatten or ref is None:
            continue

        referenced = resolve_reference(
            document, ref, owner=owner, property_name=property_name
        )
        if rule.prefix_flat_properties:
            for referenced_name, referenced_attributes in referenced.properties.items():
                flattened[f"{property_name}.{referenced_name}"] = copy.deepcopy(
                    dict(referenced_attributes)
                )
        else:
            flattened = deep_merge(flattened, referenced.properties)
        flattened.pop(property_name, None)
        _LOGGER.debug("Flattened %s.%s from %s", owner, property_name, referenced.name)
    return flattened


def prepare_schema(
    document: SchemaDocument, prepare_rules: Mapping[str, Any] | None
) -> SchemaDocument:
    """Apply the global prepare flatten rules and return a new schema snapshot.

    References resolve against the unprepared document, so the snapshot does
    not depend on the order in which definitions are prepared.
    """
    if not prepare_rules:
        return document

    definitions = dict(document.definitions)
    for definition_name, raw_rules in prepare_rules.items():
        definition = document.get(str(definition_name))
        if definition is None:
            _LOGGER.debug("Prepare rules reference unknown definition '%s'", definition_name)
            continue
        rule_set = parse_rule_set(raw_rules if isinstance(raw_rules, Mapping) else None)
        definitions[definition.name] = replace(
            definition,
            properties=flatten_properties(
                document, definition.name, definition.properties, rule_set.fields
            ),
        )
    return SchemaDocument(definitions=definitions, source_path=document.source_path)
