"""Projeção do registro final para a notificação de administradores."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inbound_triage.domain.message import Priority
from inbound_triage.utils.sanitizer import mask_sender, sanitize_pii

if TYPE_CHECKING:
    from inbound_triage.domain.message import CanonicalMessage

PRIORITY_BADGES: dict[Priority, str] = {
    Priority.URGENT: "[URGENT]",
    Priority.HIGH: "[HIGH]",
    Priority.NORMAL: "[NORMAL]",
    Priority.LOW: "[LOW]",
}


def build_admin_notification(message: CanonicalMessage) -> str:
    """Texto da notificação: prioridade, canal, remetente mascarado e resumo.

    Raises:
        ValueError: Se a mensagem ainda não passou pelo SummaryGenerator.
    """
    if not message.is_summarized or message.priority is None:
        raise ValueError("Notificação exige mensagem classificada e sumarizada")

    lines = [
        f"{PRIORITY_BADGES[message.priority]} New {message.source_type} message",
        f"From: {mask_sender(message.source_id)}",
        f"Reference: {message.reference_id}",
        f"Processed: {message.timestamp}",
        f"Language: {message.detected_source_language or '-'}",
        f"Words: {message.word_count}",
        "",
        sanitize_pii(message.summary or ""),
    ]
    return "\n".join(lines)
