"""Artifact writing exports."""

from .artifact_writer import ArtifactWriteError, write_generated_form, write_json_document

__all__ = [
    "ArtifactWriteError",
    "write_generated_form",
    "write_json_document",
]
