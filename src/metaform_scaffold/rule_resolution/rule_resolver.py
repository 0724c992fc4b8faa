"""Layered rule resolution service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .rule_merging import deep_merge
from .rule_models import DEFAULT_COLUMN_ORDER, ColumnRule, FieldRule, Operation, RuleSet

WILDCARD_KEY = "*"
PREPARE_RULES_KEY = "prepare"

_LOGGER = logging.getLogger(__name__)


class RuleError(Exception):
    """Raised when a rule cannot be applied to the generated form."""


def resolve_definition_rules(
    rules: Mapping[str, Any] | None, definition_name: str
) -> dict[str, Any]:
    """Merge wildcard definition rules with the rules named for the definition."""
    rules = rules or {}
    named = None if definition_name == PREPARE_RULES_KEY else rules.get(definition_name)
    return deep_merge(
        _mapping_or_none(rules.get(WILDCARD_KEY)),
        _mapping_or_none(named),
    )


def is_definition_skipped(definition_rules: Mapping[str, Any]) -> bool:
    """Return True when merged definition rules suppress generation."""
    return bool(definition_rules.get("skip", False))


def resolve_rule_set(
    rules: Mapping[str, Any] | None, definition_name: str, operation: Operation
) -> RuleSet:
    """Return the effective rules for one (definition, operation) pair.

    Precedence, lowest first: wildcard definition, named definition, the
    definition's wildcard operation, the named operation.
    """
    definition_rules = resolve_definition_rules(rules, definition_name)
    operation_rules = deep_merge(
        _mapping_or_none(definition_rules.get(WILDCARD_KEY)),
        _mapping_or_none(definition_rules.get(operation.value)),
    )
    return parse_rule_set(operation_rules)


def parse_rule_set(value: Mapping[str, Any] | None) -> RuleSet:
    """Parse a merged rule mapping, ignoring malformed entries."""
    raw_fields = _mapping_or_none((value or {}).get("fields"))
    if raw_fields is None:
        return RuleSet()

    fields: dict[str, FieldRule] = {}
    for property_name, raw_rule in raw_fields.items():
        if not isinstance(raw_rule, Mapping):
            _LOGGER.debug("Ignoring non-mapping rule for field '%s'", property_name)
            continue
        fields[str(property_name)] = _parse_field_rule(raw_rule)
    return RuleSet(fields=fields)


def _parse_field_rule(raw_rule: Mapping[str, Any]) -> FieldRule:
    columns: dict[str, ColumnRule] = {}
    for column_name, raw_column in (_mapping_or_none(raw_rule.get("columns")) or {}).items():
        if isinstance(raw_column, Mapping):
            columns[str(column_name)] = _parse_column_rule(raw_column)

    extra_columns = {
        str(column_name): dict(attributes)
        for column_name, attributes in (
            _mapping_or_none(raw_rule.get("extra-columns")) or {}
        ).items()
        if isinstance(attributes, Mapping)
    }
    return FieldRule(
        skip=bool(raw_rule.get("skip", False)),
        flatten=bool(raw_rule.get("flatten", False)),
        prefix_flat_properties=bool(raw_rule.get("prefixFlatProperties", False)),
        type=_optional_type(raw_rule.get("type")),
        extra=dict(_mapping_or_none(raw_rule.get("extra")) or {}),
        columns=columns,
        extra_columns=extra_columns,
    )


def _parse_column_rule(raw_column: Mapping[str, Any]) -> ColumnRule:
    return ColumnRule(
        skip=bool(raw_column.get("skip", False)),
        type=_optional_type(raw_column.get("type")),
        calculate_sum=raw_column.get("calculate-sum"),
        order=_order_value(raw_column.get("order")),
        min=raw_column.get("min"),
        max=raw_column.get("max"),
        step=raw_column.get("step"),
        extra=dict(_mapping_or_none(raw_column.get("extra")) or {}),
    )


def _optional_type(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise RuleError(f"Type override must be a string, got {value!r}")
    return value.strip() or None


def _order_value(value: Any) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_COLUMN_ORDER
    return value


def _mapping_or_none(value: Any) -> Mapping[str, Any] | None:
    return value if isinstance(value, Mapping) else None
