"""Estados do pipeline de triagem.

Máquina linear, sem arestas de retorno:
RAW → ADAPTED → VALIDATED → LIMITED → TRANSLATED → CLASSIFIED → SUMMARIZED.
Qualquer estado não-terminal pode ir para FAILED.
"""

from enum import StrEnum


class PipelineState(StrEnum):
    """Estados de uma execução do pipeline para uma mensagem."""

    RAW = "RAW"
    ADAPTED = "ADAPTED"
    VALIDATED = "VALIDATED"
    LIMITED = "LIMITED"
    TRANSLATED = "TRANSLATED"
    CLASSIFIED = "CLASSIFIED"

    # Estados terminais
    SUMMARIZED = "SUMMARIZED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


# Ordem canônica do caminho feliz
PIPELINE_ORDER: tuple[PipelineState, ...] = (
    PipelineState.RAW,
    PipelineState.ADAPTED,
    PipelineState.VALIDATED,
    PipelineState.LIMITED,
    PipelineState.TRANSLATED,
    PipelineState.CLASSIFIED,
    PipelineState.SUMMARIZED,
)

TERMINAL_STATES: frozenset[PipelineState] = frozenset({
    PipelineState.SUMMARIZED,
    PipelineState.FAILED,
})

DEFAULT_INITIAL_STATE: PipelineState = PipelineState.RAW


def is_terminal(state: PipelineState) -> bool:
    """Verifica se o estado encerra a execução."""
    return state in TERMINAL_STATES
