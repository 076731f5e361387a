"""Logging estruturado JSON (python-json-logger).

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime. Logs nunca carregam corpo de mensagem nem remetente.
"""

from inbound_triage.config.logging.config import configure_logging, get_logger
from inbound_triage.config.logging.filters import (
    REDACTED,
    SENSITIVE_FIELDS,
    CorrelationIdFilter,
    RedactingFilter,
)
from inbound_triage.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "SENSITIVE_FIELDS",
    "CorrelationIdFilter",
    "RedactingFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
