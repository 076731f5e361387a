"""Protocolo dos sinks de fan-out (notificação, resposta, logging)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from inbound_triage.domain.message import CanonicalMessage


class MessageSinkProtocol(Protocol):
    """Consumidor do registro final; semântica de entrega é do sink."""

    name: str

    async def deliver(self, message: CanonicalMessage) -> None: ...
