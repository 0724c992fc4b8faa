"""Run execution domain exports."""

from .generation_run_use_case import GenerationRunError, execute_generation_run
from .run_contracts import GenerationOutcome, GenerationRequest, TargetOutcome

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "TargetOutcome",
    "GenerationRunError",
    "execute_generation_run",
]
