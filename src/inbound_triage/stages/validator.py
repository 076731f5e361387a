"""Validator — ponto único que garante corpo utilizável para os estágios seguintes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inbound_triage.utils.errors import ValidationError

if TYPE_CHECKING:
    from inbound_triage.domain.message import CanonicalMessage


def validate_message(message: CanonicalMessage) -> CanonicalMessage:
    """Valida campos obrigatórios e devolve o registro inalterado.

    Raises:
        ValidationError: messageText ausente, não-string, vazio ou só espaços;
            ou sourceId ausente. O campo ofensor vai em `field`.
    """
    text = message.message_text
    if text is None:
        raise ValidationError("messageText ausente", field="messageText")
    if not isinstance(text, str):
        raise ValidationError(
            f"messageText deve ser string, recebido {type(text).__name__}",
            field="messageText",
        )
    if not text.strip():
        raise ValidationError("messageText vazio", field="messageText")

    source_id = message.source_id
    if not isinstance(source_id, str) or not source_id.strip():
        raise ValidationError("sourceId ausente", field="sourceId")

    return message
