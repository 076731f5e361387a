"""Implementações de MessageSinkProtocol."""

from .logging_sink import LoggingSink
from .memory_sink import InMemorySink
from .notification_sink import AdminNotificationSink

__all__ = [
    "AdminNotificationSink",
    "InMemorySink",
    "LoggingSink",
]
