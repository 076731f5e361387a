"""Projeções do registro final para os sinks de fan-out."""

from .admin_notification import PRIORITY_BADGES, build_admin_notification
from .replies import build_email_reply, build_whatsapp_text_reply

__all__ = [
    "PRIORITY_BADGES",
    "build_admin_notification",
    "build_email_reply",
    "build_whatsapp_text_reply",
]
