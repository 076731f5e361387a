"""Sink que registra o registro final como log estruturado (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inbound_triage.domain.message import CanonicalMessage

logger = logging.getLogger(__name__)


class LoggingSink:
    """Emite `message_processed` com metadados do registro."""

    name = "logging"

    async def deliver(self, message: CanonicalMessage) -> None:
        logger.info(
            "message_processed",
            extra={
                "reference_id": message.reference_id,
                "source_type": str(message.source_type),
                "priority": str(message.priority) if message.priority else None,
                "word_count": message.word_count,
                "source_language": message.detected_source_language,
                "processed_at": message.timestamp,
            },
        )
