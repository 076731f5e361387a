"""Sink de notificação de administradores.

Monta o texto com build_admin_notification e delega o envio a um callable
assíncrono (canal de chat, email interno, etc.).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inbound_triage.domain.message import Priority
from inbound_triage.payload_builders import build_admin_notification

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from inbound_triage.domain.message import CanonicalMessage


class AdminNotificationSink:
    """Notifica administradores sobre mensagens a partir de uma prioridade mínima.

    Args:
        send: Callable assíncrono que recebe o texto da notificação
        min_priority: Prioridade mínima notificada (padrão: todas)
    """

    name = "admin_notification"

    _RANK: dict[Priority, int] = {
        Priority.LOW: 0,
        Priority.NORMAL: 1,
        Priority.HIGH: 2,
        Priority.URGENT: 3,
    }

    def __init__(
        self,
        send: Callable[[str], Awaitable[None]],
        min_priority: Priority = Priority.LOW,
    ) -> None:
        self._send = send
        self._min_rank = self._RANK[min_priority]

    async def deliver(self, message: CanonicalMessage) -> None:
        if message.priority is None or self._RANK[message.priority] < self._min_rank:
            return
        await self._send(build_admin_notification(message))
