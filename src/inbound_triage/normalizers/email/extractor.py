"""Extrator de emails (objeto IMAP ou `email.message.Message`).

Formatos suportados:
- Dict de polling IMAP: subject, body/text/textPlain, html/textHtml, from,
  messageId, headers
- `email.message.Message` da stdlib (multipart ou simples)

O remetente pode vir como "Nome <a@b.com>" ou como {"value": [{"address"}]}.
"""

from __future__ import annotations

import html
import re
from email.header import decode_header
from email.message import Message
from email.utils import parseaddr
from typing import Any

# Chaves que identificam um dict como email
EMAIL_MARKER_KEYS = frozenset({"subject", "textPlain", "textHtml", "html", "messageId"})

_PLAIN_BODY_KEYS = ("body", "text", "textPlain")
_HTML_BODY_KEYS = ("html", "textHtml")

_TAG_RE = re.compile(r"<[^>]+>")
_BLOCK_TAG_RE = re.compile(r"(?i)<\s*(br|/p|/div|/li|/tr)\s*/?>")


def is_email_payload(payload: Any) -> bool:
    """Verifica se o evento tem formato de email."""
    if isinstance(payload, Message):
        return True
    if not isinstance(payload, dict):
        return False
    if EMAIL_MARKER_KEYS & payload.keys():
        return True
    # {"body": ..., "from": "a@b.com"} sem subject também é email
    return "body" in payload and "@" in (extract_sender(payload.get("from")) or "")


def strip_html_tags(markup: str) -> str:
    """Remove tags HTML preservando quebras de bloco."""
    text = _BLOCK_TAG_RE.sub("\n", markup)
    text = _TAG_RE.sub(" ", text)
    text = html.unescape(text)
    lines = [" ".join(line.split()) for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


def _decode_bytes(raw: bytes, charset: str | None) -> str:
    # Charsets desconhecidos (unknown-8bit, x-unknown) caem para utf-8
    try:
        return raw.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return raw.decode("utf-8", errors="replace")


def decode_mime_header(value: str | None) -> str:
    """Decodifica header MIME (=?utf-8?...?=) para texto."""
    if not value:
        return ""
    parts: list[str] = []
    for part, charset in decode_header(value):
        if isinstance(part, bytes):
            parts.append(_decode_bytes(part, charset))
        else:
            parts.append(part)
    return "".join(parts)


def extract_sender(value: Any) -> str | None:
    """Extrai o endereço do remetente em minúsculas."""
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, dict):
        addresses = value.get("value")
        if isinstance(addresses, list) and addresses and isinstance(addresses[0], dict):
            value = addresses[0].get("address")
        else:
            value = value.get("address") or value.get("text")
    if not isinstance(value, str):
        return None
    _, address = parseaddr(value)
    return address.strip().lower() or None


def _body_from_dict(payload: dict[str, Any]) -> Any:
    for key in _PLAIN_BODY_KEYS:
        if key in payload and payload[key] is not None:
            return payload[key]
    for key in _HTML_BODY_KEYS:
        markup = payload.get(key)
        if isinstance(markup, str) and markup:
            return strip_html_tags(markup)
    return None


def _body_from_message(msg: Message) -> str:
    text_plain = ""
    text_html = ""
    parts = msg.walk() if msg.is_multipart() else [msg]
    for part in parts:
        if part.get_content_maintype() == "multipart":
            continue
        if part.get_content_disposition() == "attachment":
            continue
        payload = part.get_payload(decode=True)
        if not payload:
            continue
        text = _decode_bytes(payload, part.get_content_charset())
        if part.get_content_type() == "text/plain":
            text_plain += text
        elif part.get_content_type() == "text/html":
            text_html += text
    return text_plain or strip_html_tags(text_html)


def _header_text(value: Any) -> str | None:
    # Headers de EmailMessage são subclasses de str
    if value is None:
        return None
    return str(value).strip() or None


def _header(headers: Any, name: str) -> Any:
    if not isinstance(headers, dict):
        return None
    lowered = name.lower()
    for key, value in headers.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return None


def extract_email(payload: dict[str, Any] | Message) -> dict[str, Any]:
    """Extrai campos de email para estrutura intermediária.

    Returns:
        Dict com message_id, sender, subject, body e language.
    """
    if isinstance(payload, Message):
        return {
            "message_id": _header_text(payload.get("Message-ID")),
            "sender": extract_sender(decode_mime_header(payload.get("From"))),
            "subject": decode_mime_header(payload.get("Subject")),
            "body": _body_from_message(payload),
            "language": _header_text(payload.get("Content-Language")),
        }

    headers = payload.get("headers")
    return {
        "message_id": payload.get("messageId") or _header(headers, "message-id"),
        "sender": extract_sender(payload.get("from")),
        "subject": payload.get("subject"),
        "body": _body_from_dict(payload),
        "language": payload.get("language") or _header(headers, "content-language"),
    }
