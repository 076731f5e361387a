"""Settings do serviço externo de tradução."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

TranslationProvider = Literal["google", "identity"]

GOOGLE_TRANSLATE_BASE_URL = "https://translation.googleapis.com/language/translate/v2"


@dataclass(frozen=True)
class TranslationSettings:
    """Configurações de tradução.

    Attributes:
        provider: "google" (Cloud Translation v2) ou "identity" (dev/testes)
        api_key: Chave da API Google Cloud Translation
        base_url: Endpoint da API
        timeout_seconds: Limite da chamada; estourado vira TranslationError
    """

    provider: TranslationProvider = "google"
    api_key: str = ""
    base_url: str = GOOGLE_TRANSLATE_BASE_URL
    timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.provider not in ("google", "identity"):
            errors.append("TRANSLATION_PROVIDER deve ser 'google' ou 'identity'")

        if self.provider == "google" and not self.api_key:
            errors.append("GOOGLE_TRANSLATE_API_KEY não configurado")

        if self.timeout_seconds <= 0:
            errors.append("TRANSLATION_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_provider(value: str) -> TranslationProvider:
    return "identity" if value.lower() in ("identity", "none", "off") else "google"


def _load_from_env() -> TranslationSettings:
    """Carrega TranslationSettings de variáveis de ambiente."""
    return TranslationSettings(
        provider=_parse_provider(os.getenv("TRANSLATION_PROVIDER", "google")),
        api_key=os.getenv("GOOGLE_TRANSLATE_API_KEY", ""),
        base_url=os.getenv("GOOGLE_TRANSLATE_BASE_URL", GOOGLE_TRANSLATE_BASE_URL),
        timeout_seconds=float(os.getenv("TRANSLATION_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_translation_settings() -> TranslationSettings:
    """Retorna instância cacheada de TranslationSettings."""
    return _load_from_env()
