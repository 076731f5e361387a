"""Projeções de resposta ao remetente (WhatsApp e email)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from inbound_triage.domain.message import SourceType

if TYPE_CHECKING:
    from inbound_triage.domain.message import CanonicalMessage


def _require_text(text: str) -> str:
    if not isinstance(text, str) or not text.strip():
        raise ValueError("Texto da resposta é obrigatório")
    return text


def build_whatsapp_text_reply(message: CanonicalMessage, text: str) -> dict[str, Any]:
    """Payload de mensagem de texto conforme API Meta Cloud.

    Raises:
        ValueError: Se a mensagem não veio do WhatsApp ou texto vazio.
    """
    if message.source_type != SourceType.WHATSAPP:
        raise ValueError("Resposta WhatsApp exige mensagem de origem WhatsApp")
    return {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": message.source_id,
        "type": "text",
        "text": {
            "preview_url": False,
            "body": _require_text(text),
        },
    }


def build_email_reply(message: CanonicalMessage, text: str) -> dict[str, Any]:
    """Payload de resposta por email.

    Raises:
        ValueError: Se a mensagem não veio de email ou texto vazio.
    """
    if message.source_type != SourceType.EMAIL:
        raise ValueError("Resposta por email exige mensagem de origem email")

    if message.subject:
        subject = message.subject
        if not subject.lower().startswith("re:"):
            subject = f"Re: {subject}"
    else:
        subject = f"Re: your message [{message.reference_id}]"

    return {
        "to": message.source_id,
        "subject": subject,
        "body": _require_text(text),
        "in_reply_to": message.input_reference,
    }
