"""SummaryGenerator — resumo, contagem de palavras e rastreamento.

Resumo: texto processado com espaços colapsados; acima do limite, corta
na última fronteira de palavra dentro do limite e anexa reticências.
Estágio idempotente: reference_id e timestamp já definidos são mantidos.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from inbound_triage.config.settings.pipeline import DEFAULT_SUMMARY_MAX_CHARS, SUMMARY_ELLIPSIS

if TYPE_CHECKING:
    from collections.abc import Callable

    from inbound_triage.domain.message import CanonicalMessage


def count_words(text: str) -> int:
    """Número de tokens separados por espaço em branco."""
    return len(text.split())


def build_summary(text: str, max_chars: int = DEFAULT_SUMMARY_MAX_CHARS) -> str:
    """Trecho determinístico de até `max_chars` caracteres (reticências inclusas)."""
    collapsed = " ".join(text.split())
    if len(collapsed) <= max_chars:
        return collapsed

    budget = max(max_chars - len(SUMMARY_ELLIPSIS), 1)
    cut = collapsed[:budget]
    boundary = cut.rfind(" ")
    if boundary > 0:
        cut = cut[:boundary]
    return cut.rstrip() + SUMMARY_ELLIPSIS


def generate_reference_id() -> str:
    """Id de rastreamento único por invocação."""
    return f"msg_{uuid.uuid4().hex}"


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


def summarize_message(
    message: CanonicalMessage,
    max_chars: int = DEFAULT_SUMMARY_MAX_CHARS,
    *,
    id_factory: Callable[[], str] = generate_reference_id,
    clock: Callable[[], str] = utc_now_iso,
) -> CanonicalMessage:
    """Preenche summary, word_count, timestamp e reference_id."""
    text = message.processed_text
    return message.updated(
        summary=build_summary(text, max_chars),
        word_count=count_words(text),
        timestamp=message.timestamp or clock(),
        reference_id=message.reference_id or id_factory(),
    )
