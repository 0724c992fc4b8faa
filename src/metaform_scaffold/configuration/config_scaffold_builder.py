"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "metaform-scaffold.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration template for metaform-scaffold.
# Replace every <REQUIRED> placeholder before running generate.
# Relative paths are resolved against the directory of this file.

targets:
  # One entry per schema; forms are written as <definition>-<operation>.json
  # and <definition>-<operation>-locales.json into output_dir.
  api:
    schema: "<REQUIRED>"
    output_dir: "<REQUIRED>"
    # Either inline rules below or rules_file: "<OPTIONAL>" (YAML or JSON).
    rules:
      # Flatten $ref properties into their definition before any form is built.
      # prepare:
      #   Customer:
      #     fields:
      #       address:
      #         flatten: true
      # Rules for every definition; use a definition name for specific rules.
      "*":
        # Rules for both operations; "create" and "update" override them.
        "*":
          fields:
            id:
              type: hidden
      # Order:
      #   skip: true
      # Invoice:
      #   update:
      #     fields:
      #       rows:
      #         columns:
      #           amount:
      #             calculate-sum: true
      #             order: 10
      #         extra-columns:
      #           note:
      #             type: text
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder generator configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
