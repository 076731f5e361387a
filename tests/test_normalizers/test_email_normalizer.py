"""Testes do normalizer de email (dict IMAP e email.message.Message)."""

from __future__ import annotations

from email import message_from_bytes
from email.message import EmailMessage
from typing import Any

import pytest

from inbound_triage.domain import SourceType
from inbound_triage.normalizers.email import (
    decode_mime_header,
    extract_sender,
    is_email_payload,
    join_subject_and_body,
    normalize_message,
    strip_html_tags,
)
from inbound_triage.utils.errors import MalformedSourceError


class TestJoinSubjectAndBody:
    """Regra de junção assunto + corpo."""

    def test_subject_and_body(self) -> None:
        assert join_subject_and_body("Order", "Broken box") == "Order\n\nBroken box"

    def test_body_only(self) -> None:
        assert join_subject_and_body(None, "Broken box") == "Broken box"
        assert join_subject_and_body("  ", "Broken box") == "Broken box"

    @pytest.mark.parametrize("body", [None, "", "   \n"])
    def test_empty_body_yields_empty_text_even_with_subject(self, body: Any) -> None:
        assert join_subject_and_body("Help", body) == ""

    def test_non_string_body_passed_through(self) -> None:
        assert join_subject_and_body("Help", ["x"]) == ["x"]


class TestEmailHelpers:
    """Remetente, HTML e headers MIME."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Maria Silva <Maria@Example.com>", "maria@example.com"),
            ("joao@example.com", "joao@example.com"),
            ({"value": [{"address": "Ana@Example.com", "name": "Ana"}]}, "ana@example.com"),
            ([{"address": "x@y.com"}], "x@y.com"),
            (None, None),
            (123, None),
        ],
    )
    def test_extract_sender(self, value: Any, expected: str | None) -> None:
        assert extract_sender(value) == expected

    def test_strip_html_tags(self) -> None:
        html = "<p>Hello&nbsp;<b>team</b></p><p>Line&amp;two</p><br/>end"
        assert strip_html_tags(html) == "Hello team\nLine&two\nend"

    def test_decode_mime_header(self) -> None:
        assert decode_mime_header("=?utf-8?q?Reclama=C3=A7=C3=A3o?=") == "Reclamação"
        assert decode_mime_header(None) == ""
        assert decode_mime_header("=?x-bogus?q?Pedido?=") == "Pedido"

    def test_detection(self, email_payload: dict[str, Any]) -> None:
        assert is_email_payload(email_payload)
        assert is_email_payload({"body": "oi", "from": "a@b.com"})
        assert is_email_payload(EmailMessage())
        assert not is_email_payload({"body": "oi", "from": "+551199"})
        assert not is_email_payload("texto")


class TestNormalizeDict:
    """Email em dict de polling IMAP."""

    def test_full_email(self, email_payload: dict[str, Any]) -> None:
        msg = normalize_message(email_payload)
        assert msg.source_type == SourceType.EMAIL
        assert msg.source_id == "maria@example.com"
        assert msg.subject == "Order 4411"
        assert msg.message_text == "Order 4411\n\nThe package arrived broken."
        assert msg.input_reference == "<abc123@mail.example.com>"

    def test_html_body_when_no_plain_text(self) -> None:
        msg = normalize_message({"from": "a@b.com", "html": "<div>Hi <i>there</i></div>"})
        assert msg.message_text == "Hi there"

    def test_subject_with_empty_body(self) -> None:
        msg = normalize_message({"from": "a@b.com", "subject": "Help", "body": ""})
        assert msg.message_text == ""
        assert msg.subject == "Help"

    def test_headers_provide_id_and_language(self) -> None:
        payload = {
            "from": "a@b.com",
            "text": "Olá",
            "headers": {"Message-ID": "<h1@x>", "Content-Language": "pt-BR"},
        }
        msg = normalize_message(payload)
        assert msg.input_reference == "<h1@x>"
        assert msg.detected_source_language == "pt"

    def test_non_mapping_is_malformed(self) -> None:
        with pytest.raises(MalformedSourceError):
            normalize_message("plain text")


class TestNormalizeMessageObject:
    """Email como email.message.Message."""

    def test_multipart_prefers_plain_text(self) -> None:
        mail = EmailMessage()
        mail["From"] = "Cliente <Cliente@Example.com>"
        mail["Subject"] = "Pedido atrasado"
        mail["Message-ID"] = "<m1@example.com>"
        mail.set_content("O pedido não chegou.")
        mail.add_alternative("<p>O pedido <b>não</b> chegou.</p>", subtype="html")
        # set_content/add_alternative reescrevem os headers Content-*
        mail["Content-Language"] = "pt"

        msg = normalize_message(mail)

        assert msg.source_id == "cliente@example.com"
        assert msg.subject == "Pedido atrasado"
        assert msg.message_text == "Pedido atrasado\n\nO pedido não chegou.\n"
        assert msg.detected_source_language == "pt"
        assert msg.input_reference == "<m1@example.com>"

    def test_html_only_message(self) -> None:
        mail = EmailMessage()
        mail["From"] = "a@b.com"
        mail.set_content("<p>Only html</p>", subtype="html")
        assert normalize_message(mail).message_text == "Only html"

    def test_unknown_charsets_fall_back_to_utf8(self) -> None:
        raw = (
            b"From: a@b.com\r\n"
            b"Subject: =?x-bogus?q?Reclamacao?=\r\n"
            b'Content-Type: text/plain; charset="unknown-8bit"\r\n'
            b"\r\n"
            b"Pedido atrasado\r\n"
        )
        msg = normalize_message(message_from_bytes(raw))
        assert msg.subject == "Reclamacao"
        assert msg.message_text.startswith("Reclamacao\n\nPedido atrasado")

    def test_attachments_are_ignored(self) -> None:
        mail = EmailMessage()
        mail["From"] = "a@b.com"
        mail.set_content("Corpo")
        mail.add_attachment(b"%PDF-1.4", maintype="application", subtype="pdf", filename="a.pdf")
        assert normalize_message(mail).message_text == "Corpo\n"
