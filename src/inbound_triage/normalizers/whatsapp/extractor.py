"""Extrator de payloads WhatsApp.

Formatos suportados:
- Plano: {"messages": [{...}], "from": "+55..."}
- Envelope Meta Cloud API: {"entry": [{"changes": [{"value": {"messages": [...],
  "contacts": [...]}}]}]}

Apenas extração estrutural; validação de conteúdo é do Validator.
"""

from __future__ import annotations

import logging
from typing import Any

from ._extraction_helpers import extract_body, extract_contact_wa_id

logger = logging.getLogger(__name__)


def _first_message(messages: Any) -> dict[str, Any] | None:
    if isinstance(messages, list) and messages and isinstance(messages[0], dict):
        return messages[0]
    return None


def _iter_envelope_values(payload: dict[str, Any]) -> list[dict[str, Any]]:
    values: list[dict[str, Any]] = []
    entries = payload.get("entry")
    if not isinstance(entries, list):
        return values
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        changes = entry.get("changes")
        if not isinstance(changes, list):
            continue
        for change in changes:
            if isinstance(change, dict) and isinstance(change.get("value"), dict):
                values.append(change["value"])
    return values


def is_whatsapp_payload(payload: Any) -> bool:
    """Verifica se o payload tem formato WhatsApp (plano ou envelope)."""
    if not isinstance(payload, dict):
        return False
    if isinstance(payload.get("messages"), list):
        return True
    return any("messages" in value for value in _iter_envelope_values(payload))


def extract_payload_message(payload: dict[str, Any]) -> dict[str, Any] | None:
    """Extrai a primeira mensagem do payload para estrutura intermediária.

    Returns:
        Dict com message_id, from_number, body, language e message_type,
        ou None se o payload não contém nenhuma mensagem.
    """
    msg = _first_message(payload.get("messages"))
    contacts = payload.get("contacts")

    if msg is None:
        for value in _iter_envelope_values(payload):
            msg = _first_message(value.get("messages"))
            if msg is not None:
                contacts = value.get("contacts")
                break

    if msg is None:
        return None

    top_level = payload.get("messages")
    if isinstance(top_level, list) and len(top_level) > 1:
        logger.info("whatsapp_extra_messages_ignored", extra={"count": len(top_level)})

    from_number = msg.get("from") or payload.get("from") or extract_contact_wa_id(contacts)

    return {
        "message_id": msg.get("id"),
        "from_number": from_number,
        "body": extract_body(msg),
        "language": msg.get("language") or msg.get("lang") or payload.get("language"),
        "message_type": msg.get("type") or "unknown",
    }
