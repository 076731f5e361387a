"""Filters de logging: contexto da execução e redação de conteúdo.

CorrelationIdFilter injeta correlation_id e service. RedactingFilter
substitui campos de conteúdo de mensagem que cheguem por engano via `extra`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from inbound_triage.observability.correlation import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[REDACTED]"

# Campos do registro canônico que nunca podem ir para os logs
SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "message_text",
        "translated_text",
        "summary",
        "subject",
        "source_id",
        "body",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record.

    Args:
        service_name: Nome do serviço nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Padrão: o ContextVar da execução corrente do pipeline.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or get_correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id passado explicitamente via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing or self._get_correlation_id()
        record.service = self._service_name
        return True


class RedactingFilter(logging.Filter):
    """Troca o valor de campos sensíveis por REDACTED; nunca descarta o record."""

    def __init__(self, fields: Iterable[str] = SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields & record.__dict__.keys():
            if record.__dict__[name] is not None:
                record.__dict__[name] = REDACTED
        return True
