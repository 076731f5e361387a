"""correlation_id por execução do pipeline.

Cada chamada de ProcessInboundUseCase.execute() roda dentro de um
`correlation_scope`. Chamadas aninhadas herdam o id do chamador, e
execuções concorrentes (tasks distintas) nunca se enxergam.

Uso:
    with correlation_scope() as correlation_id:
        logger.info("pipeline_started", extra={"correlation_id": correlation_id})
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_current: ContextVar[str] = ContextVar("inbound_triage_correlation_id", default="")


def new_event_reference() -> str:
    """UUID v4 usado como correlation_id ou referência de evento sem id de canal."""
    return str(uuid.uuid4())


def get_correlation_id() -> str:
    """Id da execução corrente; string vazia fora de um correlation_scope."""
    return _current.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Ativa um correlation_id até o fim do bloco.

    Args:
        correlation_id: Id explícito. Se None, reaproveita o id do escopo
            externo ou gera um novo.

    Yields:
        O correlation_id ativo dentro do bloco.
    """
    value = correlation_id or _current.get() or new_event_reference()
    token = _current.set(value)
    try:
        yield value
    finally:
        _current.reset(token)
