"""Protocolo do serviço externo de tradução."""

from __future__ import annotations

from typing import Protocol


class TranslationServiceProtocol(Protocol):
    """Contrato mínimo para tradução de texto.

    Implementações podem falhar ou exceder o tempo; o Translator trata
    qualquer falha como TranslationError, sem fallback.
    """

    async def translate(self, text: str, source_language: str, target_language: str) -> str: ...
