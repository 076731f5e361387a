"""Use case de processamento inbound: evento bruto → registro priorizado.

Executa os estágios em ordem estrita, um por vez, sobre um único registro:

    SourceAdapter → Validator → TextLimiter → Translator →
    PriorityClassifier → SummaryGenerator

A primeira falha leva a execução a FAILED e nenhum estágio seguinte roda.
O resultado é sempre um PipelineResult: mensagem completa ou falha
etiquetada (estágio, tipo de erro, referência do evento), nunca um
registro parcial.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from inbound_triage.config.settings import PipelineConfig
from inbound_triage.domain.result import PipelineFailure, PipelineResult
from inbound_triage.fsm import PipelineState, PipelineStateMachine
from inbound_triage.infra.translation import GoogleTranslateClient, create_translator
from inbound_triage.normalizers import adapt_source
from inbound_triage.observability import (
    correlation_scope,
    get_correlation_id,
    new_event_reference,
    record_latency,
    record_priority,
    record_stage_failure,
)
from inbound_triage.stages import (
    classify_message,
    limit_message,
    summarize_message,
    translate_message,
    validate_message,
)
from inbound_triage.use_cases.fan_out import FanOutUseCase
from inbound_triage.utils.errors import PipelineError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inbound_triage.domain.message import CanonicalMessage, SourceType
    from inbound_triage.protocols import MessageSinkProtocol, TranslationServiceProtocol

logger = logging.getLogger(__name__)


class ProcessInboundUseCase:
    """Processa um evento inbound de ponta a ponta.

    Sem estado entre chamadas: execuções concorrentes não compartilham nada
    além dos colaboradores injetados.
    """

    def __init__(
        self,
        translator: TranslationServiceProtocol,
        config: PipelineConfig | None = None,
        sinks: Sequence[MessageSinkProtocol] | None = None,
    ) -> None:
        self._translator = translator
        self._config = config or PipelineConfig()
        self._fan_out = FanOutUseCase(sinks) if sinks else None

    @property
    def config(self) -> PipelineConfig:
        return self._config

    @property
    def sink_names(self) -> tuple[str, ...]:
        return self._fan_out.sink_names if self._fan_out else ()

    async def execute(
        self,
        raw_event: Any,
        channel_hint: SourceType | str | None = None,
        *,
        input_reference: str | None = None,
    ) -> PipelineResult:
        """Executa o pipeline para um evento.

        Args:
            raw_event: Payload bruto do canal
            channel_hint: Canal informado pelo gatilho (ou None para detectar)
            input_reference: Referência do evento para auditoria; se ausente,
                usa o id do canal ou gera uma nova

        Returns:
            PipelineResult de sucesso (SUMMARIZED) ou falha (FAILED)
        """
        with correlation_scope():
            return await self._execute(raw_event, channel_hint, input_reference)

    async def _execute(
        self,
        raw_event: Any,
        channel_hint: SourceType | str | None,
        input_reference: str | None,
    ) -> PipelineResult:
        start = time.perf_counter()
        correlation_id = get_correlation_id()
        fsm = PipelineStateMachine(reference=input_reference or "")
        reference = input_reference

        try:
            message = adapt_source(raw_event, channel_hint)
            reference = reference or message.input_reference or new_event_reference()
            message = message.updated(input_reference=reference)
            self._advance(fsm, PipelineState.ADAPTED, "source_adapter")

            message = await self._run_stages(message, fsm)
        except PipelineError as exc:
            return self._fail(exc, fsm, reference or new_event_reference())

        record_latency(
            "pipeline", "process", (time.perf_counter() - start) * 1000, correlation_id
        )
        record_priority(str(message.priority), str(message.source_type), correlation_id)
        logger.info(
            "pipeline_completed",
            extra={
                "reference_id": message.reference_id,
                "input_reference": reference,
                "source_type": str(message.source_type),
                "priority": str(message.priority),
                "word_count": message.word_count,
            },
        )

        if self._fan_out is not None:
            report = await self._fan_out.dispatch(message)
            if not report.all_delivered:
                logger.warning(
                    "fan_out_incomplete",
                    extra={"reference_id": message.reference_id, "failed": list(report.failed)},
                )

        return PipelineResult.ok(message, fsm.history)

    async def _run_stages(
        self,
        message: CanonicalMessage,
        fsm: PipelineStateMachine,
    ) -> CanonicalMessage:
        cfg = self._config

        message = validate_message(message)
        self._advance(fsm, PipelineState.VALIDATED, "validator")

        message = limit_message(message, cfg.max_text_length, cfg.truncation_marker)
        self._advance(fsm, PipelineState.LIMITED, "text_limiter")

        message = await translate_message(
            message,
            self._translator,
            target_language=cfg.target_language,
            default_source_language=cfg.default_source_language,
            timeout_seconds=cfg.translation_timeout_seconds,
        )
        self._advance(fsm, PipelineState.TRANSLATED, "translator")

        message = classify_message(message, cfg.priority_rules)
        self._advance(fsm, PipelineState.CLASSIFIED, "priority_classifier")

        message = summarize_message(message, cfg.summary_max_chars)
        self._advance(fsm, PipelineState.SUMMARIZED, "summary_generator")
        return message

    def _advance(
        self,
        fsm: PipelineStateMachine,
        target: PipelineState,
        stage: str,
    ) -> None:
        fsm.advance(target, stage)
        logger.debug(
            "stage_completed",
            extra={"stage": stage, "state": str(target)},
        )

    def _fail(
        self,
        error: PipelineError,
        fsm: PipelineStateMachine,
        reference: str,
    ) -> PipelineResult:
        failure = PipelineFailure.from_error(error, reference)
        fsm.fail(error.stage, metadata={"error_kind": error.error_kind, "field": error.field})
        record_stage_failure(failure.stage, failure.error_kind, get_correlation_id())
        logger.warning("pipeline_failed", extra=failure.to_log_dict())
        return PipelineResult.failed(failure, fsm.history)


async def process(
    raw_event: Any,
    channel_hint: SourceType | str | None = None,
    *,
    translator: TranslationServiceProtocol | None = None,
    config: PipelineConfig | None = None,
) -> PipelineResult:
    """Atalho: processa um evento com colaboradores das settings de ambiente.

    Um tradutor criado aqui é fechado ao final; um tradutor injetado não.
    """
    owned = translator is None
    service = translator or create_translator()
    use_case = ProcessInboundUseCase(
        translator=service,
        config=config or PipelineConfig.from_settings(),
    )
    try:
        return await use_case.execute(raw_event, channel_hint)
    finally:
        if owned and isinstance(service, GoogleTranslateClient):
            await service.aclose()
