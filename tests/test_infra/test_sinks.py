"""Testes dos sinks de fan-out."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock

import pytest

from inbound_triage.domain import CanonicalMessage, Priority, SourceType
from inbound_triage.infra.sinks import AdminNotificationSink, InMemorySink, LoggingSink


def _final(priority: Priority = Priority.URGENT) -> CanonicalMessage:
    return CanonicalMessage(
        source_type=SourceType.WHATSAPP,
        source_id="+5511987654321",
        message_text="urgent asap help",
        detected_source_language="en",
        translated_text="urgent asap help",
        priority=priority,
        summary="urgent asap help",
        word_count=3,
        timestamp="2026-10-18T12:00:00+00:00",
        reference_id="msg_abc",
    )


class TestLoggingSink:
    """Log estruturado sem PII."""

    @pytest.mark.asyncio
    async def test_logs_metadata_without_body(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="inbound_triage.infra.sinks.logging_sink"):
            await LoggingSink().deliver(_final())
        record = caplog.records[-1]
        assert record.getMessage() == "message_processed"
        assert record.reference_id == "msg_abc"
        assert record.priority == "urgent"
        assert "urgent asap help" not in str(record.__dict__.values())
        assert "+5511987654321" not in str(record.__dict__.values())


class TestInMemorySink:
    """Acumula entregas."""

    @pytest.mark.asyncio
    async def test_collects(self) -> None:
        sink = InMemorySink(name="audit")
        await sink.deliver(_final())
        assert sink.name == "audit"
        assert [m.reference_id for m in sink.delivered] == ["msg_abc"]


class TestAdminNotificationSink:
    """Notificação a partir de prioridade mínima."""

    @pytest.mark.asyncio
    async def test_sends_notification(self) -> None:
        send = AsyncMock()
        await AdminNotificationSink(send).deliver(_final())
        send.assert_awaited_once()
        text = send.await_args.args[0]
        assert text.startswith("[URGENT] New whatsapp message")
        assert "+55*******4321" in text

    @pytest.mark.asyncio
    async def test_below_threshold_is_skipped(self) -> None:
        send = AsyncMock()
        sink = AdminNotificationSink(send, min_priority=Priority.HIGH)
        await sink.deliver(_final(Priority.NORMAL))
        send.assert_not_awaited()
        await sink.deliver(_final(Priority.HIGH))
        send.assert_awaited_once()
