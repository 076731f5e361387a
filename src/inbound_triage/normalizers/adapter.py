"""SourceAdapter — ponto de entrada da normalização por canal.

Recebe um evento bruto e uma dica opcional de canal e devolve um
CanonicalMessage parcialmente preenchido (source_type, source_id,
message_text, detected_source_language). Função pura.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from inbound_triage.domain.message import SourceType
from inbound_triage.normalizers import email, unknown, whatsapp
from inbound_triage.utils.errors import MalformedSourceError

if TYPE_CHECKING:
    from collections.abc import Callable

    from inbound_triage.domain.message import CanonicalMessage

logger = logging.getLogger(__name__)

_NORMALIZERS: dict[SourceType, Callable[[Any], CanonicalMessage]] = {
    SourceType.WHATSAPP: whatsapp.normalize_message,
    SourceType.EMAIL: email.normalize_message,
    SourceType.UNKNOWN: unknown.normalize_message,
}


def detect_channel(raw_event: Any) -> SourceType:
    """Detecta o canal pelo formato do evento."""
    if whatsapp.is_whatsapp_payload(raw_event):
        return SourceType.WHATSAPP
    if email.is_email_payload(raw_event):
        return SourceType.EMAIL
    return SourceType.UNKNOWN


def resolve_channel(raw_event: Any, channel_hint: SourceType | str | None) -> SourceType:
    """Usa a dica de canal quando informada; senão detecta pelo formato.

    Raises:
        MalformedSourceError: Se a dica não corresponde a nenhum canal.
    """
    if channel_hint is None or channel_hint == "":
        return detect_channel(raw_event)
    try:
        return SourceType(str(channel_hint).strip().lower())
    except ValueError as exc:
        raise MalformedSourceError(
            f"Canal desconhecido: {channel_hint!r}", field="channel_hint"
        ) from exc


def adapt_source(
    raw_event: Any,
    channel_hint: SourceType | str | None = None,
) -> CanonicalMessage:
    """Normaliza um evento bruto para o registro canônico.

    Args:
        raw_event: Payload WhatsApp, email IMAP (dict ou Message) ou outro
        channel_hint: "whatsapp", "email", "unknown" ou None (autodetecção)

    Raises:
        MalformedSourceError: Se nada utilizável puder ser extraído.
    """
    channel = resolve_channel(raw_event, channel_hint)
    message = _NORMALIZERS[channel](raw_event)
    logger.debug(
        "source_adapted",
        extra={"source_type": str(channel), "hinted": channel_hint is not None},
    )
    return message
