"""Protocolos de colaboradores externos do pipeline."""

from .sinks import MessageSinkProtocol
from .translation import TranslationServiceProtocol

__all__ = [
    "MessageSinkProtocol",
    "TranslationServiceProtocol",
]
