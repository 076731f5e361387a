"""Formatter JSON dos logs do pipeline (python-json-logger).

Todo log carrega asctime, level, logger, message, correlation_id e
service, mais um `timestamp` ISO-8601 em UTC para agregação.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Formatter com campos padronizados e acentos preservados.

    Exemplo de output:
        {"asctime": "2026-10-18 10:30:00,123", "correlation_id": "abc-123",
         "level": "INFO", "logger": "inbound_triage.use_cases.process_inbound",
         "message": "pipeline_completed", "service": "inbound_triage",
         "timestamp": "2026-10-18T10:30:00.123000+00:00", "priority": "urgent"}
    """
    format_string = " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        timestamp=True,
        json_ensure_ascii=False,
    )
