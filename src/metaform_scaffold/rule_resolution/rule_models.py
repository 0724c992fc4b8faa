"""Rule resolution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFAULT_COLUMN_ORDER = 100


class Operation(str, Enum):
    """Form operations generated per definition, in generation order."""

    UPDATE = "update"
    CREATE = "create"


@dataclass(frozen=True)
class ColumnRule:  # pylint: disable=too-many-instance-attributes
    """Override for one generated table column."""

    skip: bool = False
    type: str | None = None
    calculate_sum: Any = None
    order: int | float = DEFAULT_COLUMN_ORDER
    min: Any = None
    max: Any = None
    step: Any = None
    extra: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FieldRule:  # pylint: disable=too-many-instance-attributes
    """Override for one schema property."""

    skip: bool = False
    flatten: bool = False
    prefix_flat_properties: bool = False
    type: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)
    columns: Mapping[str, ColumnRule] = field(default_factory=dict)
    extra_columns: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    def column_rule(self, column_name: str) -> ColumnRule:
        return self.columns.get(column_name, _DEFAULT_COLUMN_RULE)


@dataclass(frozen=True)
class RuleSet:
    """Effective rules for one (definition, operation) pair."""

    fields: Mapping[str, FieldRule] = field(default_factory=dict)

    def field_rule(self, property_name: str) -> FieldRule:
        return self.fields.get(property_name, _DEFAULT_FIELD_RULE)


_DEFAULT_COLUMN_RULE = ColumnRule()
_DEFAULT_FIELD_RULE = FieldRule()
