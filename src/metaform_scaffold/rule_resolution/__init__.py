"""Rule resolution exports."""

from .rule_merging import deep_merge
from .rule_models import DEFAULT_COLUMN_ORDER, ColumnRule, FieldRule, Operation, RuleSet
from .rule_resolver import (
    PREPARE_RULES_KEY,
    WILDCARD_KEY,
    RuleError,
    is_definition_skipped,
    parse_rule_set,
    resolve_definition_rules,
    resolve_rule_set,
)

__all__ = [
    "DEFAULT_COLUMN_ORDER",
    "PREPARE_RULES_KEY",
    "WILDCARD_KEY",
    "ColumnRule",
    "FieldRule",
    "Operation",
    "RuleError",
    "RuleSet",
    "deep_merge",
    "is_definition_skipped",
    "parse_rule_set",
    "resolve_definition_rules",
    "resolve_rule_set",
]
