"""Normalizer para formatos não reconhecidos.

Repassa o texto bruto sem modificação, com source_type=unknown, para que o
Validator decida. Sem nenhum campo textual, o evento é malformado.
"""

from __future__ import annotations

from typing import Any

from inbound_triage.domain.message import CanonicalMessage, SourceType
from inbound_triage.normalizers._common import normalize_language, normalize_sender
from inbound_triage.utils.errors import MalformedSourceError

_TEXT_KEYS = ("text", "body", "message", "content")
_SENDER_KEYS = ("from", "sender", "sourceId", "source_id")


def normalize_message(payload: Any) -> CanonicalMessage:
    """Normaliza um evento de formato desconhecido.

    Raises:
        MalformedSourceError: Se não houver nenhum campo textual utilizável.
    """
    if isinstance(payload, str):
        return CanonicalMessage(source_type=SourceType.UNKNOWN, message_text=payload)

    if not isinstance(payload, dict):
        raise MalformedSourceError(
            f"Formato de evento não reconhecido: {type(payload).__name__}"
        )

    text_key = next((k for k in _TEXT_KEYS if k in payload), None)
    if text_key is None:
        raise MalformedSourceError("Evento sem conteúdo textual reconhecível")

    sender = next((payload[k] for k in _SENDER_KEYS if payload.get(k) is not None), None)

    return CanonicalMessage(
        source_type=SourceType.UNKNOWN,
        source_id=normalize_sender(sender),
        message_text=payload[text_key],
        detected_source_language=normalize_language(payload.get("language")),
        input_reference=payload.get("id") if isinstance(payload.get("id"), str) else None,
    )
