"""Artifact writer tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from metaform_scaffold.artifact_writing import (
    ArtifactWriteError,
    write_generated_form,
    write_json_document,
)
from metaform_scaffold.form_generation import GeneratedForm
from metaform_scaffold.rule_resolution import Operation


def test_writes_form_and_locales_under_kebab_case_names(tmp_path: Path) -> None:
    generated = GeneratedForm(
        definition_name="PurchaseOrder",
        operation=Operation.UPDATE,
        form={"title": "[[forms.purchaseOrderUpdate]]", "sections": [{"fields": []}]},
        locales={"forms.purchaseOrderUpdate": "PurchaseOrder"},
    )

    form_path, locales_path = write_generated_form(generated, tmp_path / "nested" / "forms")

    assert form_path.name == "purchase-order-update.json"
    assert locales_path.name == "purchase-order-update-locales.json"
    assert json.loads(form_path.read_text(encoding="utf-8")) == generated.form
    assert json.loads(locales_path.read_text(encoding="utf-8")) == generated.locales


def test_json_is_indented_keeps_key_order_and_non_ascii(tmp_path: Path) -> None:
    path = write_json_document({"b": "Größe", "a": 1}, tmp_path / "doc.json")

    assert path.read_text(encoding="utf-8") == '{\n  "b": "Größe",\n  "a": 1\n}'


def test_unserializable_document_raises_artifact_write_error(tmp_path: Path) -> None:
    with pytest.raises(ArtifactWriteError, match="Failed to write"):
        write_json_document({"value": object()}, tmp_path / "doc.json")


def test_output_path_blocked_by_file_raises_artifact_write_error(tmp_path: Path) -> None:
    blocker = tmp_path / "forms"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(ArtifactWriteError):
        write_json_document({"a": 1}, blocker / "doc.json")
