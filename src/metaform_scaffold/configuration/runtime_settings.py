"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class GenerationTarget:
    """One schema to generate forms from, and where to write them."""

    name: str
    schema_path: Path
    output_dir: Path
    rules: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    targets: tuple[GenerationTarget, ...]

    def target_names(self) -> tuple[str, ...]:
        return tuple(target.name for target in self.targets)
