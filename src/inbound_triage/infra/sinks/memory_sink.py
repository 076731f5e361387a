"""Sink em memória — desenvolvimento e testes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inbound_triage.domain.message import CanonicalMessage


class InMemorySink:
    """Acumula as mensagens entregues."""

    def __init__(self, name: str = "memory") -> None:
        self.name = name
        self.delivered: list[CanonicalMessage] = []

    async def deliver(self, message: CanonicalMessage) -> None:
        self.delivered.append(message)
