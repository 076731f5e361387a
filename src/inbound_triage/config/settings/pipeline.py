"""Settings do pipeline de triagem.

Idioma alvo, limite de texto, marcador de truncamento, tamanho do resumo e
caminho opcional das regras de prioridade. Carregadas de variáveis de
ambiente e cacheadas.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_MAX_TEXT_LENGTH = 5000
DEFAULT_TRUNCATION_MARKER = "... [truncated]"
DEFAULT_SUMMARY_MAX_CHARS = 200
SUMMARY_ELLIPSIS = "..."
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class PipelineSettings:
    """Configurações do pipeline.

    Attributes:
        target_language: Idioma para o qual as mensagens são traduzidas
        default_source_language: Idioma assumido quando não há detecção
        max_text_length: Limite de caracteres de messageText
        truncation_marker: Sufixo anexado ao texto truncado
        summary_max_chars: Tamanho máximo do resumo
        priority_rules_path: YAML alternativo de regras de prioridade
        log_level: Nível de log do serviço
    """

    target_language: str = DEFAULT_LANGUAGE
    default_source_language: str = DEFAULT_LANGUAGE
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    truncation_marker: str = DEFAULT_TRUNCATION_MARKER
    summary_max_chars: int = DEFAULT_SUMMARY_MAX_CHARS
    priority_rules_path: str = ""
    log_level: str = "INFO"

    def validate(self) -> list[str]:
        """Valida configurações.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.target_language:
            errors.append("TARGET_LANGUAGE não pode ser vazio")

        if not self.default_source_language:
            errors.append("DEFAULT_SOURCE_LANGUAGE não pode ser vazio")

        if self.max_text_length <= 0:
            errors.append("MAX_TEXT_LENGTH deve ser > 0")

        if not self.truncation_marker:
            errors.append("TRUNCATION_MARKER não pode ser vazio")

        if self.summary_max_chars <= len(SUMMARY_ELLIPSIS):
            errors.append(f"SUMMARY_MAX_CHARS deve ser > {len(SUMMARY_ELLIPSIS)}")

        return errors


def _load_from_env() -> PipelineSettings:
    """Carrega PipelineSettings de variáveis de ambiente."""
    return PipelineSettings(
        target_language=os.getenv("TARGET_LANGUAGE", DEFAULT_LANGUAGE).strip().lower(),
        default_source_language=os.getenv(
            "DEFAULT_SOURCE_LANGUAGE", DEFAULT_LANGUAGE
        ).strip().lower(),
        max_text_length=int(os.getenv("MAX_TEXT_LENGTH", str(DEFAULT_MAX_TEXT_LENGTH))),
        truncation_marker=os.getenv("TRUNCATION_MARKER", DEFAULT_TRUNCATION_MARKER),
        summary_max_chars=int(
            os.getenv("SUMMARY_MAX_CHARS", str(DEFAULT_SUMMARY_MAX_CHARS))
        ),
        priority_rules_path=os.getenv("PRIORITY_RULES_PATH", ""),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


@lru_cache(maxsize=1)
def get_pipeline_settings() -> PipelineSettings:
    """Retorna instância cacheada de PipelineSettings."""
    return _load_from_env()
