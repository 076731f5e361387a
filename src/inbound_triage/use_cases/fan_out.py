"""Fan-out do registro final para os sinks.

Cada sink recebe a mesma mensagem; falha de um sink é registrada e não
afeta os demais nem o resultado do pipeline.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inbound_triage.domain.message import CanonicalMessage
    from inbound_triage.protocols import MessageSinkProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FanOutReport:
    """Resultado da entrega: nomes dos sinks entregues e com falha."""

    delivered: tuple[str, ...] = ()
    failed: tuple[str, ...] = ()

    @property
    def all_delivered(self) -> bool:
        return not self.failed


class FanOutUseCase:
    """Entrega uma mensagem sumarizada a todos os sinks configurados."""

    def __init__(self, sinks: Sequence[MessageSinkProtocol]) -> None:
        self._sinks = tuple(sinks)

    @property
    def sink_names(self) -> tuple[str, ...]:
        return tuple(sink.name for sink in self._sinks)

    async def dispatch(self, message: CanonicalMessage) -> FanOutReport:
        """Entrega em paralelo e consolida o relatório.

        Raises:
            ValueError: Se a mensagem não estiver sumarizada.
        """
        if not message.is_summarized:
            raise ValueError("Fan-out exige mensagem sumarizada")

        results = await asyncio.gather(
            *(sink.deliver(message) for sink in self._sinks),
            return_exceptions=True,
        )

        delivered: list[str] = []
        failed: list[str] = []
        for sink, outcome in zip(self._sinks, results):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                failed.append(sink.name)
                logger.warning(
                    "sink_delivery_failed",
                    extra={
                        "sink": sink.name,
                        "reference_id": message.reference_id,
                        "error_type": type(outcome).__name__,
                    },
                )
            else:
                delivered.append(sink.name)

        return FanOutReport(delivered=tuple(delivered), failed=tuple(failed))
