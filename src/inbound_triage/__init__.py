"""inbound_triage — normalização, tradução e priorização de mensagens inbound.

Uso:
    from inbound_triage import ProcessInboundUseCase, PipelineConfig
    from inbound_triage.infra.translation import create_translator

    use_case = ProcessInboundUseCase(
        translator=create_translator(),
        config=PipelineConfig.from_settings(),
    )
    result = await use_case.execute(raw_event, channel_hint="whatsapp")
"""

from inbound_triage.config.settings import PipelineConfig
from inbound_triage.domain import (
    CanonicalMessage,
    PipelineFailure,
    PipelineResult,
    Priority,
    SourceType,
)
from inbound_triage.use_cases import FanOutUseCase, ProcessInboundUseCase, process
from inbound_triage.utils.errors import (
    MalformedSourceError,
    PipelineError,
    TranslationError,
    ValidationError,
)

__all__ = [
    "CanonicalMessage",
    "FanOutUseCase",
    "MalformedSourceError",
    "PipelineConfig",
    "PipelineError",
    "PipelineFailure",
    "PipelineResult",
    "Priority",
    "ProcessInboundUseCase",
    "SourceType",
    "TranslationError",
    "ValidationError",
    "process",
]
