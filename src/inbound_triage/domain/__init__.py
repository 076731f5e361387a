"""Modelos de domínio: registro canônico e resultados do pipeline."""

from .message import WRITE_ONCE_FIELDS, CanonicalMessage, Priority, SourceType
from .result import PipelineFailure, PipelineResult

__all__ = [
    "WRITE_ONCE_FIELDS",
    "CanonicalMessage",
    "PipelineFailure",
    "PipelineResult",
    "Priority",
    "SourceType",
]
