"""Implementações de TranslationServiceProtocol."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inbound_triage.config.settings.translation import get_translation_settings

from .google_client import GoogleTranslateClient
from .static_client import IdentityTranslator, StaticTranslator

if TYPE_CHECKING:
    from inbound_triage.config.settings.translation import TranslationSettings
    from inbound_triage.protocols import TranslationServiceProtocol


def create_translator(settings: TranslationSettings | None = None) -> TranslationServiceProtocol:
    """Cria o tradutor configurado em TRANSLATION_PROVIDER."""
    settings = settings or get_translation_settings()
    if settings.provider == "identity":
        return IdentityTranslator()
    return GoogleTranslateClient(settings=settings)


__all__ = [
    "GoogleTranslateClient",
    "IdentityTranslator",
    "StaticTranslator",
    "create_translator",
]
