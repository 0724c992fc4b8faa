"""Deep merge of layered rule mappings."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


def deep_merge(*layers: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge mappings left to right into a new dict.

    Nested mappings merge recursively, every other value (sequences included)
    replaces the earlier one. Inputs are never mutated and the result shares no
    mutable state with them.
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        if not layer:
            continue
        _merge_into(merged, layer)
    return merged


def _merge_into(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        current = target.get(key)
        if isinstance(value, Mapping):
            if not isinstance(current, dict):
                current = {}
                target[key] = current
            _merge_into(current, value)
        else:
            target[key] = copy.deepcopy(value)
