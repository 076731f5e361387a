"""Configuração centralizada de logging JSON.

Uso:
    from inbound_triage.config.logging import configure_logging, get_logger

    configure_logging()  # nível de LOG_LEVEL

    logger = get_logger(__name__)
    logger.info("stage_completed", extra={"stage": "validator"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from inbound_triage.config.logging.filters import CorrelationIdFilter, RedactingFilter
from inbound_triage.config.logging.formatters import create_json_formatter
from inbound_triage.config.settings.pipeline import get_pipeline_settings

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "inbound_triage"


def configure_logging(
    level: str | None = None,
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado. Chamar uma vez na inicialização.

    Args:
        level: Nível de log; se None, usa LOG_LEVEL das settings do pipeline.
        service_name: Nome do serviço nos logs.
        correlation_id_getter: Função que retorna o correlation_id do
            contexto atual. Padrão: observability.get_correlation_id.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    if level is None:
        level = get_pipeline_settings().log_level
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(RedactingFilter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Um único handler JSON; reconfigurar não duplica saída
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (geralmente __name__)."""
    return logging.getLogger(name)
