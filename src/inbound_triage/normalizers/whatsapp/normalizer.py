"""Normalizer WhatsApp — payload extraído → CanonicalMessage."""

from __future__ import annotations

import logging
from typing import Any

from inbound_triage.domain.message import CanonicalMessage, SourceType
from inbound_triage.normalizers._common import normalize_language, normalize_sender
from inbound_triage.utils.errors import MalformedSourceError

from .extractor import extract_payload_message

logger = logging.getLogger(__name__)

# Caracteres invisíveis comuns em mensagens WhatsApp
_INVISIBLE_CHARS = ("\u200e", "\u200f", "\u200b", "\u200c", "\u200d", "\ufeff")


def clean_whatsapp_text(text: str) -> str:
    """Remove marcas de direção, zero-width e BOM."""
    for char in _INVISIBLE_CHARS:
        text = text.replace(char, "")
    return text


def normalize_message(payload: Any) -> CanonicalMessage:
    """Normaliza um evento WhatsApp.

    Corpo ausente vira string vazia (rejeitada depois pelo Validator);
    corpo com tipo inesperado é repassado como está para o mesmo fim.

    Raises:
        MalformedSourceError: Se o payload não contém nenhuma mensagem.
    """
    if not isinstance(payload, dict):
        raise MalformedSourceError("Payload WhatsApp deve ser um objeto")

    extracted = extract_payload_message(payload)
    if extracted is None:
        raise MalformedSourceError("Payload WhatsApp sem mensagens", field="messages")

    body = extracted["body"]
    if body is None:
        body = ""
    elif isinstance(body, str):
        body = clean_whatsapp_text(body)

    logger.debug(
        "whatsapp_message_adapted",
        extra={"message_type": extracted["message_type"], "has_body": bool(body)},
    )

    return CanonicalMessage(
        source_type=SourceType.WHATSAPP,
        source_id=normalize_sender(extracted["from_number"]),
        message_text=body,
        detected_source_language=normalize_language(extracted["language"]),
        input_reference=extracted["message_id"],
    )
