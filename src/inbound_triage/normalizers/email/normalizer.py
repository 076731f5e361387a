"""Normalizer Email — email extraído → CanonicalMessage.

Regra de junção de assunto e corpo:
- assunto e corpo preenchidos: "<assunto>\n\n<corpo>"
- só corpo: corpo
- corpo vazio: string vazia, mesmo com assunto (assunto sozinho não é corpo)
"""

from __future__ import annotations

import logging
from email.message import Message
from typing import Any

from inbound_triage.domain.message import CanonicalMessage, SourceType
from inbound_triage.normalizers._common import normalize_language
from inbound_triage.utils.errors import MalformedSourceError

from .extractor import extract_email

logger = logging.getLogger(__name__)

SUBJECT_BODY_SEPARATOR = "\n\n"


def join_subject_and_body(subject: Any, body: Any) -> Any:
    """Aplica a regra de junção; corpo não-string é repassado intacto."""
    if body is None:
        return ""
    if not isinstance(body, str):
        return body
    if not body.strip():
        return ""
    if isinstance(subject, str) and subject.strip():
        return f"{subject.strip()}{SUBJECT_BODY_SEPARATOR}{body}"
    return body


def normalize_message(payload: Any) -> CanonicalMessage:
    """Normaliza um email.

    Raises:
        MalformedSourceError: Se o evento não for dict nem Message.
    """
    if not isinstance(payload, (dict, Message)):
        raise MalformedSourceError("Email deve ser um objeto ou email.message.Message")

    extracted = extract_email(payload)
    subject = extracted["subject"] if isinstance(extracted["subject"], str) else None

    logger.debug(
        "email_message_adapted",
        extra={
            "has_subject": bool(subject),
            "has_body": bool(extracted["body"]),
        },
    )

    return CanonicalMessage(
        source_type=SourceType.EMAIL,
        source_id=extracted["sender"],
        message_text=join_subject_and_body(subject, extracted["body"]),
        subject=subject.strip() if subject else None,
        detected_source_language=normalize_language(extracted["language"]),
        input_reference=extracted["message_id"],
    )
