"""Exceções do pipeline de triagem inbound.

Toda falha de estágio é uma subclasse de PipelineError e carrega o nome do
estágio de origem e o tipo de erro, para que o use case possa reportá-la
como falha etiquetada sem inspecionar a classe concreta.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base para falhas de estágio do pipeline.

    Attributes:
        stage: Estágio que originou a falha (ex: "validator")
        field: Campo do registro canônico envolvido (quando aplicável)
    """

    error_kind: str = "pipeline"
    default_stage: str = "pipeline"

    def __init__(
        self,
        message: str,
        *,
        stage: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.stage = stage or self.default_stage
        self.field = field


class MalformedSourceError(PipelineError):
    """Evento bruto sem nenhum conteúdo aproveitável."""

    error_kind = "malformed_source"
    default_stage = "source_adapter"


class ValidationError(PipelineError):
    """Campo obrigatório ausente, vazio ou com tipo incorreto."""

    error_kind = "validation"
    default_stage = "validator"


class TranslationError(PipelineError):
    """Falha ou timeout do serviço externo de tradução."""

    error_kind = "translation"
    default_stage = "translator"


class WriteOnceViolationError(PipelineError):
    """Tentativa de sobrescrever reference_id/timestamp já definidos."""

    error_kind = "write_once"
    default_stage = "summary_generator"


class PriorityRulesError(ValueError):
    """Configuração de regras de prioridade inválida."""
