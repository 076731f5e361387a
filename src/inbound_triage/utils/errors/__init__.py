"""Exceções compartilhadas do pipeline."""

from .exceptions import (
    MalformedSourceError,
    PipelineError,
    PriorityRulesError,
    TranslationError,
    ValidationError,
    WriteOnceViolationError,
)

__all__ = [
    "MalformedSourceError",
    "PipelineError",
    "PriorityRulesError",
    "TranslationError",
    "ValidationError",
    "WriteOnceViolationError",
]
