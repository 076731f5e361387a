"""Tipos de resultado do pipeline (sucesso ou falha etiquetada)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from inbound_triage.domain.message import CanonicalMessage
    from inbound_triage.fsm.types import StateTransition
    from inbound_triage.utils.errors import PipelineError


@dataclass(frozen=True, slots=True)
class PipelineFailure:
    """Falha terminal de uma execução do pipeline.

    Attributes:
        stage: Estágio que falhou (ex: "validator", "translator")
        error_kind: Tipo do erro (ex: "validation", "translation")
        detail: Mensagem do erro (sem PII)
        field: Campo envolvido, quando aplicável
        input_reference: Referência ao evento bruto, para auditoria/retry
    """

    stage: str
    error_kind: str
    detail: str
    field: str | None = None
    input_reference: str | None = None

    @classmethod
    def from_error(
        cls,
        error: PipelineError,
        input_reference: str | None,
    ) -> PipelineFailure:
        return cls(
            stage=error.stage,
            error_kind=error.error_kind,
            detail=str(error),
            field=error.field,
            input_reference=input_reference,
        )

    def to_log_dict(self) -> dict[str, Any]:
        return {
            "stage": self.stage,
            "error_kind": self.error_kind,
            "field": self.field,
            "input_reference": self.input_reference,
        }


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Resultado de uma execução: mensagem sumarizada ou falha, nunca ambos."""

    success: bool
    message: CanonicalMessage | None = None
    failure: PipelineFailure | None = None
    history: tuple[StateTransition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Valida consistência do resultado."""
        if self.success and (self.message is None or self.failure is not None):
            raise ValueError("Resultado de sucesso deve incluir apenas message")
        if not self.success and (self.failure is None or self.message is not None):
            raise ValueError("Resultado de falha deve incluir apenas failure")

    @classmethod
    def ok(
        cls,
        message: CanonicalMessage,
        history: tuple[StateTransition, ...] = (),
    ) -> PipelineResult:
        return cls(success=True, message=message, history=history)

    @classmethod
    def failed(
        cls,
        failure: PipelineFailure,
        history: tuple[StateTransition, ...] = (),
    ) -> PipelineResult:
        return cls(success=False, failure=failure, history=history)
