"""Normalizers por canal — conversão de eventos brutos para CanonicalMessage.

Estrutura:
- whatsapp/: formato plano e envelope Meta Cloud API
- email/: objetos de polling IMAP e email.message.Message
- unknown: repasse de texto bruto para formatos não reconhecidos
- adapter: detecção de canal e despacho (SourceAdapter)
"""

from .adapter import adapt_source, detect_channel, resolve_channel

__all__ = [
    "adapt_source",
    "detect_channel",
    "resolve_channel",
]
