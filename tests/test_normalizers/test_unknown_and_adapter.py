"""Testes do normalizer de formato desconhecido e do SourceAdapter."""

from __future__ import annotations

from typing import Any

import pytest

from inbound_triage.domain import SourceType
from inbound_triage.normalizers import adapt_source, detect_channel, resolve_channel
from inbound_triage.normalizers.unknown import normalize_message
from inbound_triage.utils.errors import MalformedSourceError


class TestUnknownNormalizer:
    """Formatos não reconhecidos repassam o texto."""

    def test_bare_string(self) -> None:
        msg = normalize_message("hello")
        assert msg.source_type == SourceType.UNKNOWN
        assert msg.message_text == "hello"
        assert msg.source_id is None

    def test_dict_with_text_and_sender(self) -> None:
        msg = normalize_message({"id": "evt-9", "sender": " ops ", "content": "disk full"})
        assert msg.message_text == "disk full"
        assert msg.source_id == "ops"
        assert msg.input_reference == "evt-9"

    def test_text_key_precedence(self) -> None:
        assert normalize_message({"body": "b", "text": "t"}).message_text == "t"

    def test_text_value_passed_untouched(self) -> None:
        assert normalize_message({"text": None}).message_text is None

    @pytest.mark.parametrize("payload", [{"foo": "bar"}, 42, None, ["x"]])
    def test_no_usable_content_is_malformed(self, payload: Any) -> None:
        with pytest.raises(MalformedSourceError):
            normalize_message(payload)


class TestSourceAdapter:
    """Detecção e dica de canal."""

    def test_detects_channels(
        self, whatsapp_payload: dict[str, Any], email_payload: dict[str, Any]
    ) -> None:
        assert detect_channel(whatsapp_payload) == SourceType.WHATSAPP
        assert detect_channel(email_payload) == SourceType.EMAIL
        assert detect_channel({"text": "x"}) == SourceType.UNKNOWN

    def test_hint_overrides_detection(self, email_payload: dict[str, Any]) -> None:
        assert resolve_channel(email_payload, "UNKNOWN") == SourceType.UNKNOWN
        assert resolve_channel(email_payload, None) == SourceType.EMAIL
        assert resolve_channel(email_payload, "") == SourceType.EMAIL

    def test_invalid_hint(self) -> None:
        with pytest.raises(MalformedSourceError) as exc_info:
            resolve_channel({}, "telegram")
        assert exc_info.value.field == "channel_hint"

    def test_adapt_with_hint(self, whatsapp_payload: dict[str, Any]) -> None:
        msg = adapt_source(whatsapp_payload, SourceType.WHATSAPP)
        assert msg.source_type == SourceType.WHATSAPP
        assert msg.source_id == "+123"

    def test_hint_for_wrong_shape_is_malformed(self) -> None:
        with pytest.raises(MalformedSourceError):
            adapt_source({"text": "x"}, "whatsapp")

    def test_adapter_is_pure(self, whatsapp_payload: dict[str, Any]) -> None:
        first = adapt_source(whatsapp_payload)
        second = adapt_source(whatsapp_payload)
        assert first == second
        assert whatsapp_payload["messages"][0]["text"]["body"] == "urgent asap help"
