"""Normalizer Email (IMAP) — extração e normalização de emails."""

from .extractor import (
    decode_mime_header,
    extract_email,
    extract_sender,
    is_email_payload,
    strip_html_tags,
)
from .normalizer import join_subject_and_body, normalize_message

__all__ = [
    "decode_mime_header",
    "extract_email",
    "extract_sender",
    "is_email_payload",
    "join_subject_and_body",
    "normalize_message",
    "strip_html_tags",
]
