"""Generation run use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from metaform_scaffold.artifact_writing import ArtifactWriteError, write_generated_form
from metaform_scaffold.configuration import (
    Configuration,
    ConfigurationError,
    GenerationTarget,
    load_configuration,
)
from metaform_scaffold.form_generation import generate_forms
from metaform_scaffold.schema_management import SchemaError, load_schema_document

from .run_contracts import GenerationOutcome, GenerationRequest, TargetOutcome

_LOGGER = logging.getLogger(__name__)


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_generation_run(request: GenerationRequest) -> GenerationOutcome:
    """Generate and write forms for every selected target of the configuration.

    Raises:
      GenerationRunError: If the configuration cannot be loaded or names an
        unknown target. Failures of a single target are reported on its
        TargetOutcome and do not stop the remaining targets.
    """
    try:
        configuration = load_configuration(request.config_path)
        targets = _select_targets(configuration, request.target_names)
    except ConfigurationError as exc:
        raise GenerationRunError(str(exc)) from exc

    return GenerationOutcome(targets=tuple(_run_target(target) for target in targets))


def _select_targets(
    configuration: Configuration, target_names: tuple[str, ...]
) -> tuple[GenerationTarget, ...]:
    if not target_names:
        return configuration.targets
    known = configuration.target_names()
    unknown = [name for name in target_names if name not in known]
    if unknown:
        raise ConfigurationError(
            f"Unknown target(s): {', '.join(unknown)}. Configured: {', '.join(known)}"
        )
    return tuple(target for target in configuration.targets if target.name in target_names)


def _run_target(target: GenerationTarget) -> TargetOutcome:
    """Generate one target; a target-wide failure is recorded, not raised."""
    _LOGGER.info("Generating forms for target '%s' from %s", target.name, target.schema_path)
    written: list[Path] = []
    try:
        document = load_schema_document(target.schema_path)
        report = generate_forms(document, target.rules)
        for generated in report.forms:
            written.extend(write_generated_form(generated, target.output_dir))
    except (SchemaError, ArtifactWriteError) as exc:
        _LOGGER.warning("Target '%s' could not be generated: %s", target.name, exc)
        return TargetOutcome(
            target_name=target.name,
            written_paths=tuple(written),
            failures=(),
            error=f"Target '{target.name}': {exc}",
        )
    return TargetOutcome(
        target_name=target.name,
        written_paths=tuple(written),
        failures=report.failures,
    )
