"""Observabilidade: correlation_id e métricas via logs estruturados."""

from inbound_triage.observability.correlation import (
    correlation_scope,
    get_correlation_id,
    new_event_reference,
)
from inbound_triage.observability.metrics import (
    record_latency,
    record_priority,
    record_stage_failure,
    record_translation,
)

__all__ = [
    "correlation_scope",
    "get_correlation_id",
    "new_event_reference",
    "record_latency",
    "record_priority",
    "record_stage_failure",
    "record_translation",
]
