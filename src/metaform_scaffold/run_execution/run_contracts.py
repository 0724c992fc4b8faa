"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from metaform_scaffold.form_generation import GenerationFailure


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for executing one generation run."""

    config_path: str
    target_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class TargetOutcome:
    """Files written and pairs that failed for one configured target.

    `error` is set when the target as a whole could not be generated, for
    example because its schema file is missing or the prepare pass failed.
    """

    target_name: str
    written_paths: tuple[Path, ...]
    failures: tuple[GenerationFailure, ...]
    error: str | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    targets: tuple[TargetOutcome, ...]

    @property
    def written_paths(self) -> tuple[Path, ...]:
        return tuple(path for target in self.targets for path in target.written_paths)

    @property
    def failures(self) -> tuple[GenerationFailure, ...]:
        return tuple(failure for target in self.targets for failure in target.failures)

    @property
    def failed_targets(self) -> tuple[TargetOutcome, ...]:
        return tuple(target for target in self.targets if target.error is not None)

    @property
    def succeeded(self) -> bool:
        return not self.failures and not self.failed_targets
