"""TextLimiter — limite de tamanho do corpo com marcador visível.

O corte é por contagem de caracteres, não por palavra: pode cair no meio
de uma palavra. O texto truncado termina com o marcador; reaplicar o
estágio não o altera de novo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inbound_triage.config.settings.pipeline import (
    DEFAULT_MAX_TEXT_LENGTH,
    DEFAULT_TRUNCATION_MARKER,
)
from inbound_triage.utils.errors import ValidationError

if TYPE_CHECKING:
    from inbound_triage.domain.message import CanonicalMessage


def truncate_text(
    text: str,
    max_length: int = DEFAULT_MAX_TEXT_LENGTH,
    marker: str = DEFAULT_TRUNCATION_MARKER,
) -> str:
    """Trunca `text` em `max_length` caracteres e anexa `marker`.

    Texto com exatamente `max_length + len(marker)` caracteres terminado
    pelo marcador já é resultado de truncamento e passa inalterado.
    """
    if len(text) <= max_length:
        return text
    if len(text) == max_length + len(marker) and text.endswith(marker):
        return text
    return text[:max_length] + marker


def limit_message(
    message: CanonicalMessage,
    max_length: int = DEFAULT_MAX_TEXT_LENGTH,
    marker: str = DEFAULT_TRUNCATION_MARKER,
) -> CanonicalMessage:
    """Aplica o limite a messageText.

    Raises:
        ValidationError: Se messageText não for string.
    """
    text = message.message_text
    if not isinstance(text, str):
        raise ValidationError(
            "messageText deve ser string", stage="text_limiter", field="messageText"
        )

    limited = truncate_text(text, max_length, marker)
    if limited is text:
        return message
    return message.updated(message_text=limited)
