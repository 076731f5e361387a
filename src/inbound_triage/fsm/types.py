"""Tipos de dados para transições do pipeline."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from inbound_triage.fsm.states import PipelineState


@dataclass(frozen=True, slots=True)
class StateTransition:
    """Registro imutável de uma transição de estado.

    Attributes:
        from_state: Estado de origem
        to_state: Estado de destino
        trigger: Estágio que causou a transição (ex: "validator")
        metadata: Dados adicionais para auditoria (nunca conter PII)
        timestamp: Momento da transição (UTC)
    """

    from_state: PipelineState
    to_state: PipelineState
    trigger: str
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs (sem PII)."""
        return {
            "from_state": self.from_state.name,
            "to_state": self.to_state.name,
            "trigger": self.trigger,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """Resultado de uma tentativa de transição."""

    success: bool
    transition: StateTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
