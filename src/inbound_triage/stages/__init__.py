"""Estágios do pipeline, na ordem de execução.

SourceAdapter (normalizers) → Validator → TextLimiter → Translator →
PriorityClassifier → SummaryGenerator.
"""

from .priority_classifier import classify_message, classify_text
from .summary_generator import build_summary, count_words, summarize_message
from .text_limiter import limit_message, truncate_text
from .translator import resolve_source_language, translate_message
from .validator import validate_message

__all__ = [
    "build_summary",
    "classify_message",
    "classify_text",
    "count_words",
    "limit_message",
    "resolve_source_language",
    "summarize_message",
    "translate_message",
    "truncate_text",
    "validate_message",
]
