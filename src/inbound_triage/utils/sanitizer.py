"""Mascaramento de PII para logs e projeções de notificação.

Responsabilidade:
- Mascarar e-mails e telefones em trechos de texto
- Mascarar o identificador do remetente (telefone ou e-mail)

Determinístico: mesma entrada = mesma saída.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

_PATTERNS: Final[dict[str, Pattern[str]]] = {
    "email": re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"),
    # Telefones internacionais: +55 11 98765-4321, (11) 98765-4321, 5511987654321
    "phone": re.compile(r"\+?\(?\d{1,3}\)?[\s.-]?(?:\d[\s.-]?){7,12}\d"),
}

_MASKS: Final[dict[str, str]] = {
    "email": "[EMAIL]",
    "phone": "[PHONE]",
}


def sanitize_pii(text: str) -> str:
    """Mascara PII em texto.

    Args:
        text: Texto potencialmente contendo PII

    Returns:
        Texto com e-mails e telefones substituídos por máscaras

    Exemplos:
        >>> sanitize_pii("Contate em john@example.com")
        'Contate em [EMAIL]'
    """
    if not text:
        return text

    result = text
    # E-mail antes de telefone: dígitos dentro de endereços não viram [PHONE]
    for pii_type, pattern in _PATTERNS.items():
        result = pattern.sub(_MASKS[pii_type], result)
    return result


def mask_sender(source_id: str | None) -> str:
    """Mascara o identificador do remetente mantendo pistas mínimas.

    Exemplos:
        >>> mask_sender("+5511987654321")
        '+55*******4321'
        >>> mask_sender("maria@example.com")
        'm***@example.com'
    """
    if not source_id:
        return "[unknown]"

    if "@" in source_id:
        local, _, domain = source_id.partition("@")
        return f"{local[:1]}***@{domain}"

    if len(source_id) <= 4:
        return "*" * len(source_id)

    head = source_id[:3]
    tail = source_id[-4:]
    return f"{head}{'*' * (len(source_id) - 7)}{tail}" if len(source_id) > 7 else f"***{tail}"
