"""Máquina de estados de uma execução do pipeline.

Uma instância por mensagem; não é compartilhada entre execuções.
"""

from __future__ import annotations

from typing import Any

from inbound_triage.fsm.states import (
    DEFAULT_INITIAL_STATE,
    PipelineState,
    is_terminal,
)
from inbound_triage.fsm.transitions import get_valid_targets, is_transition_valid
from inbound_triage.fsm.types import StateTransition, TransitionResult


class PipelineStateMachine:
    """Controla o avanço de uma mensagem pelos estágios.

    Attributes:
        current_state: Estado atual
        history: Transições realizadas, em ordem
    """

    __slots__ = ("_current_state", "_history", "_reference")

    def __init__(self, reference: str = "") -> None:
        """
        Args:
            reference: Referência do evento bruto, usada em logs
        """
        self._current_state = DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._reference = reference

    @property
    def current_state(self) -> PipelineState:
        return self._current_state

    @property
    def history(self) -> tuple[StateTransition, ...]:
        return tuple(self._history)

    @property
    def reference(self) -> str:
        return self._reference

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_state)

    def get_valid_targets(self) -> frozenset[PipelineState]:
        return get_valid_targets(self._current_state)

    def transition(
        self,
        target: PipelineState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """Tenta transitar para `target`.

        Args:
            target: Estado de destino
            trigger: Estágio que provocou a transição
            metadata: Dados de auditoria (nunca PII)

        Returns:
            TransitionResult com sucesso/falha
        """
        if self.is_terminal:
            return TransitionResult(
                success=False,
                error_reason=f"Estado terminal {self._current_state.name} não permite transições",
            )

        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição {self._current_state.name} → {target.name} não permitida"
                ),
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._current_state = target
        self._history.append(transition)
        return TransitionResult(success=True, transition=transition)

    def advance(self, target: PipelineState, trigger: str) -> StateTransition:
        """Transita ou levanta RuntimeError (violação de ordem é bug interno)."""
        result = self.transition(target, trigger)
        if not result.success or result.transition is None:
            raise RuntimeError(result.error_reason)
        return result.transition

    def fail(self, trigger: str, metadata: dict[str, Any] | None = None) -> TransitionResult:
        """Leva a execução ao estado terminal FAILED."""
        return self.transition(PipelineState.FAILED, trigger, metadata)

    def get_history_summary(self) -> list[dict[str, Any]]:
        """Histórico em formato seguro para logs."""
        return [t.to_log_dict() for t in self._history]
