"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, GenerationTarget


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the generator configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    parsed = _read_yaml(path, "configuration file")
    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    targets_section = parsed.get("targets")
    if not isinstance(targets_section, Mapping) or not targets_section:
        raise ConfigurationError("Configuration section 'targets' must list at least one target.")

    targets = tuple(
        _parse_target(str(name), value, path.parent) for name, value in targets_section.items()
    )
    return Configuration(path=path, targets=targets)


def _parse_target(name: str, value: Any, base_path: Path) -> GenerationTarget:
    section = _require_mapping(value, f"targets.{name}")
    schema_path = _resolve_path(
        base_path, _require_non_empty_string(section.get("schema"), f"targets.{name}.schema")
    )
    output_dir = _resolve_path(
        base_path,
        _require_non_empty_string(section.get("output_dir"), f"targets.{name}.output_dir"),
    )
    return GenerationTarget(
        name=name,
        schema_path=schema_path,
        output_dir=output_dir,
        rules=_load_rules(section, base_path, name),
    )


def _load_rules(section: Mapping[str, Any], base_path: Path, name: str) -> dict[str, Any]:
    inline = section.get("rules")
    rules_file = section.get("rules_file")
    if inline is not None and rules_file is not None:
        raise ConfigurationError(f"targets.{name} must not set both rules and rules_file.")
    if rules_file is not None:
        rules_path = _resolve_path(
            base_path, _require_non_empty_string(rules_file, f"targets.{name}.rules_file")
        )
        if not rules_path.exists():
            raise ConfigurationError(f"Rules file not found: {rules_path}")
        inline = _read_yaml(rules_path, "rules file")
    if inline is None:
        return {}
    if not isinstance(inline, Mapping):
        raise ConfigurationError(f"targets.{name}.rules must be a mapping.")
    return dict(inline)


def _read_yaml(path: Path, label: str) -> Any:
    text = path.read_text(encoding="utf-8")
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse {label}: {exc}") from exc


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
