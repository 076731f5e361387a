"""
Máquina de estados do pipeline de triagem.

Estrutura:
    - states: PipelineState e estados terminais
    - transitions: mapa VALID_TRANSITIONS derivado da ordem dos estágios
    - types: StateTransition, TransitionResult
    - machine: PipelineStateMachine
"""

from inbound_triage.fsm.machine import PipelineStateMachine
from inbound_triage.fsm.states import (
    DEFAULT_INITIAL_STATE,
    PIPELINE_ORDER,
    TERMINAL_STATES,
    PipelineState,
    is_terminal,
)
from inbound_triage.fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)
from inbound_triage.fsm.types import StateTransition, TransitionResult

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "PIPELINE_ORDER",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "PipelineState",
    "PipelineStateMachine",
    "StateTransition",
    "TransitionResult",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "validate_transition_map",
]
