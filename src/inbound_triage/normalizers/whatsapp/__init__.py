"""Normalizer WhatsApp — extração e normalização de mensagens.

Aceita o formato plano e o envelope da Meta Cloud API. Tipos com corpo
textual: text, button, interactive (título da resposta) e legendas de mídia.
"""

from .extractor import extract_payload_message, is_whatsapp_payload
from .normalizer import clean_whatsapp_text, normalize_message

__all__ = [
    "clean_whatsapp_text",
    "extract_payload_message",
    "is_whatsapp_payload",
    "normalize_message",
]
