"""Registro de métricas via logging estruturado.

As métricas são logs com `metric_type` e podem ser agregadas depois
(BigQuery, CloudWatch Insights, etc.).

Métricas:
- latency: tempo por estágio/operação
- priority: contador de mensagens por faixa
- stage_failure: contador de falhas por estágio e tipo de erro
- translation: chamadas de tradução (ou identidade) por par de idiomas
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "pipeline", "translator")
        operation: Nome da operação (ex: "process", "translate")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_priority(
    priority: str,
    source_type: str,
    correlation_id: str | None = None,
) -> None:
    """Registra a prioridade atribuída a uma mensagem."""
    logger.info(
        "metric_priority",
        extra={
            "metric_type": "priority",
            "priority": priority,
            "source_type": source_type,
            "correlation_id": correlation_id,
        },
    )


def record_stage_failure(
    stage: str,
    error_kind: str,
    correlation_id: str | None = None,
) -> None:
    """Registra falha de estágio."""
    logger.info(
        "metric_stage_failure",
        extra={
            "metric_type": "stage_failure",
            "stage": stage,
            "error_kind": error_kind,
            "correlation_id": correlation_id,
        },
    )


def record_translation(
    source_language: str,
    target_language: str,
    translated: bool,
    correlation_id: str | None = None,
) -> None:
    """Registra passagem pelo Translator.

    Args:
        translated: False quando origem == alvo (identidade, sem chamada externa)
    """
    logger.info(
        "metric_translation",
        extra={
            "metric_type": "translation",
            "source_language": source_language,
            "target_language": target_language,
            "translated": translated,
            "correlation_id": correlation_id,
        },
    )
