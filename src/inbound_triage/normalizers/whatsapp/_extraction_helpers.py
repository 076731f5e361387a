"""Helpers de extração de campos de mensagens WhatsApp.

Cada função navega com segurança por blocos opcionais: segmento ausente ou
com tipo inesperado resulta em None, nunca em exceção.
"""

from __future__ import annotations

from typing import Any

# Tipos de mídia cujo bloco pode trazer `caption`
_CAPTION_MEDIA_TYPES = ("image", "video", "document")


def extract_text_message(msg: dict[str, Any]) -> Any:
    """Extrai corpo de mensagem de texto (`text.body`)."""
    text_block = msg.get("text")
    if isinstance(text_block, dict):
        return text_block.get("body")
    return None


def extract_button_message(msg: dict[str, Any]) -> str | None:
    """Extrai texto de resposta a botão de template (`button.text`)."""
    button_block = msg.get("button")
    if isinstance(button_block, dict):
        return button_block.get("text")
    return None


def extract_interactive_message(msg: dict[str, Any]) -> str | None:
    """Extrai título da resposta interativa (button_reply ou list_reply)."""
    interactive_block = msg.get("interactive")
    if not isinstance(interactive_block, dict):
        return None
    for reply_key in ("button_reply", "list_reply"):
        reply = interactive_block.get(reply_key) or {}
        if isinstance(reply, dict) and reply.get("title"):
            return reply.get("title")
    return None


def extract_media_caption(msg: dict[str, Any]) -> str | None:
    """Extrai legenda de mídia (image, video, document)."""
    for media_type in _CAPTION_MEDIA_TYPES:
        media_block = msg.get(media_type)
        if isinstance(media_block, dict) and media_block.get("caption"):
            return media_block.get("caption")
    return None


def extract_body(msg: dict[str, Any]) -> Any:
    """Extrai o corpo textual conforme o tipo da mensagem.

    Sem `type` explícito, tenta os blocos na ordem text → button →
    interactive → legenda de mídia.
    """
    message_type = msg.get("type")
    if message_type == "text":
        return extract_text_message(msg)
    if message_type == "button":
        return extract_button_message(msg)
    if message_type == "interactive":
        return extract_interactive_message(msg)
    if message_type in _CAPTION_MEDIA_TYPES:
        return extract_media_caption(msg)

    for extractor in (
        extract_text_message,
        extract_button_message,
        extract_interactive_message,
        extract_media_caption,
    ):
        body = extractor(msg)
        if body is not None:
            return body
    return None


def extract_contact_wa_id(contacts: Any) -> str | None:
    """Extrai `wa_id` do primeiro contato do webhook."""
    if isinstance(contacts, list) and contacts and isinstance(contacts[0], dict):
        return contacts[0].get("wa_id")
    return None
