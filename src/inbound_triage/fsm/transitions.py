"""Regras de transição do pipeline.

O mapa é derivado de PIPELINE_ORDER: cada estado avança apenas para o
seguinte ou para FAILED. Estados terminais não têm saída.
"""

from inbound_triage.fsm.states import (
    PIPELINE_ORDER,
    TERMINAL_STATES,
    PipelineState,
)

TransitionMap = dict[PipelineState, frozenset[PipelineState]]


def _build_transition_map() -> TransitionMap:
    transitions: TransitionMap = {}
    for current, following in zip(PIPELINE_ORDER, PIPELINE_ORDER[1:]):
        transitions[current] = frozenset({following, PipelineState.FAILED})
    for state in TERMINAL_STATES:
        transitions[state] = frozenset()
    return transitions


VALID_TRANSITIONS: TransitionMap = _build_transition_map()


def get_valid_targets(state: PipelineState) -> frozenset[PipelineState]:
    """Retorna os destinos permitidos a partir de `state`."""
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: PipelineState, to_state: PipelineState) -> bool:
    """Verifica se a transição é permitida."""
    if from_state in TERMINAL_STATES:
        return False
    return to_state in get_valid_targets(from_state)


def validate_transition_map() -> list[str]:
    """Valida a integridade do mapa de transições.

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in PipelineState:
        if state not in VALID_TRANSITIONS:
            errors.append(f"Estado {state.name} ausente em VALID_TRANSITIONS")

    for state in TERMINAL_STATES:
        if VALID_TRANSITIONS.get(state):
            errors.append(f"Estado terminal {state.name} possui transições de saída")

    for source, targets in VALID_TRANSITIONS.items():
        if source in TERMINAL_STATES:
            continue
        if PipelineState.FAILED not in targets:
            errors.append(f"Estado {source.name} não pode transitar para FAILED")
        backwards = [
            t for t in targets
            if t in PIPELINE_ORDER and PIPELINE_ORDER.index(t) <= PIPELINE_ORDER.index(source)
        ]
        if backwards:
            errors.append(f"Estado {source.name} possui aresta de retorno")

    return errors
