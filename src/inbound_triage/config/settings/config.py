"""Objeto de configuração injetável consumido pelo pipeline.

Reúne tudo o que os estágios precisam sem que leiam variáveis de ambiente
diretamente, o que mantém os estágios puros e testáveis.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from inbound_triage.config.settings.pipeline import (
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_TEXT_LENGTH,
    DEFAULT_SUMMARY_MAX_CHARS,
    DEFAULT_TRUNCATION_MARKER,
    SUMMARY_ELLIPSIS,
    PipelineSettings,
    get_pipeline_settings,
)
from inbound_triage.config.settings.priority_rules import (
    PriorityRules,
    get_default_priority_rules,
    load_priority_rules,
)
from inbound_triage.config.settings.translation import get_translation_settings


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """Parâmetros do pipeline.

    Attributes:
        target_language: Idioma alvo da tradução
        default_source_language: Idioma assumido sem detecção
        max_text_length: Limite de caracteres de messageText
        truncation_marker: Sufixo do texto truncado
        summary_max_chars: Tamanho máximo do resumo
        translation_timeout_seconds: Limite da chamada de tradução
        priority_rules: Regras ordenadas de palavras-chave
    """

    target_language: str = DEFAULT_LANGUAGE
    default_source_language: str = DEFAULT_LANGUAGE
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH
    truncation_marker: str = DEFAULT_TRUNCATION_MARKER
    summary_max_chars: int = DEFAULT_SUMMARY_MAX_CHARS
    translation_timeout_seconds: float = 10.0
    priority_rules: PriorityRules = field(default_factory=get_default_priority_rules)

    def __post_init__(self) -> None:
        if self.max_text_length <= 0:
            raise ValueError("max_text_length deve ser > 0")
        # O resumo truncado precisa caber texto além das reticências
        if self.summary_max_chars <= len(SUMMARY_ELLIPSIS):
            raise ValueError(f"summary_max_chars deve ser > {len(SUMMARY_ELLIPSIS)}")
        if self.translation_timeout_seconds <= 0:
            raise ValueError("translation_timeout_seconds deve ser > 0")

    @classmethod
    def from_settings(
        cls,
        settings: PipelineSettings | None = None,
        translation_timeout_seconds: float | None = None,
    ) -> PipelineConfig:
        """Constrói a configuração a partir das settings de ambiente."""
        settings = settings or get_pipeline_settings()
        if translation_timeout_seconds is None:
            translation_timeout_seconds = get_translation_settings().timeout_seconds
        rules = (
            load_priority_rules(settings.priority_rules_path)
            if settings.priority_rules_path
            else get_default_priority_rules()
        )
        return cls(
            target_language=settings.target_language,
            default_source_language=settings.default_source_language,
            max_text_length=settings.max_text_length,
            truncation_marker=settings.truncation_marker,
            summary_max_chars=settings.summary_max_chars,
            translation_timeout_seconds=translation_timeout_seconds,
            priority_rules=rules,
        )
