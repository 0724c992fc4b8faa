"""JSON artifact writer service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from metaform_scaffold.form_generation import GeneratedForm


class ArtifactWriteError(Exception):
    """Raised when a generated artifact cannot be written."""


def write_generated_form(generated: GeneratedForm, output_dir: Path | str) -> tuple[Path, Path]:
    """Write the form document and its locale map, returning both paths."""
    destination = Path(output_dir)
    form_path = write_json_document(generated.form, destination / generated.form_filename)
    locales_path = write_json_document(
        generated.locales, destination / generated.locales_filename
    )
    return form_path, locales_path


def write_json_document(document: Mapping[str, Any], output_path: Path | str) -> Path:
    """Write one mapping as two-space indented UTF-8 JSON, keeping key order."""
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        raise ArtifactWriteError(f"Failed to write {path}: {exc}") from exc
    return path.resolve()
