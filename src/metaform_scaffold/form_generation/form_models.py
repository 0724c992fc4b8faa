"""Form generation entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from metaform_scaffold.rule_resolution import Operation
from metaform_scaffold.schema_management import SchemaDefinition, SchemaDocument

from .locale_collector import LocaleCollector
from .naming import kebab_case


@dataclass(frozen=True)
class FormBuildContext:
    """Shared state while building the fields of one form."""

    document: SchemaDocument
    definition: SchemaDefinition
    operation: Operation
    locales: LocaleCollector


@dataclass(frozen=True)
class GeneratedForm:
    """Form document and locale map generated for one definition and operation."""

    definition_name: str
    operation: Operation
    form: Mapping[str, Any]
    locales: Mapping[str, Any]

    @property
    def file_stem(self) -> str:
        return f"{kebab_case(self.definition_name)}-{self.operation.value}"

    @property
    def form_filename(self) -> str:
        return f"{self.file_stem}.json"

    @property
    def locales_filename(self) -> str:
        return f"{self.file_stem}-locales.json"


@dataclass(frozen=True)
class GenerationFailure:
    """One (definition, operation) pair that could not be generated."""

    definition_name: str
    operation: Operation
    message: str


@dataclass(frozen=True)
class GenerationReport:
    """Outcome of generating forms for every definition in a schema."""

    forms: tuple[GeneratedForm, ...]
    failures: tuple[GenerationFailure, ...] = ()

    @property
    def succeeded(self) -> bool:
        return not self.failures
