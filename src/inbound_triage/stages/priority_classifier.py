"""PriorityClassifier — prioridade por palavras-chave.

Casamento sem distinção de maiúsculas/acentos e com limite de palavra
("error" não casa com "terror"). As regras são avaliadas em ordem de
precedência: a primeira faixa com match vence, então urgent domina high.
Sem match, a prioridade é normal. LOW nunca é atribuída aqui.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import TYPE_CHECKING

from inbound_triage.config.settings.priority_rules import (
    PriorityRules,
    get_default_priority_rules,
    normalize_keyword_text,
)
from inbound_triage.domain.message import Priority

if TYPE_CHECKING:
    from inbound_triage.domain.message import CanonicalMessage

logger = logging.getLogger(__name__)


def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    # Palavras de uma expressão composta aceitam qualquer espaço entre si
    body = r"\s+".join(re.escape(part) for part in keyword.split())
    return re.compile(rf"(?<!\w){body}(?!\w)")


@lru_cache(maxsize=16)
def _compile_rules(
    rules: PriorityRules,
) -> tuple[tuple[Priority, tuple[re.Pattern[str], ...]], ...]:
    return tuple(
        (rule.tier, tuple(_keyword_pattern(k) for k in rule.keywords))
        for rule in rules.rules
    )


def classify_text(text: str, rules: PriorityRules | None = None) -> Priority:
    """Retorna a faixa de prioridade para `text`."""
    normalized = normalize_keyword_text(text)
    if not normalized:
        return Priority.NORMAL

    for tier, patterns in _compile_rules(rules or get_default_priority_rules()):
        if any(pattern.search(normalized) for pattern in patterns):
            return tier
    return Priority.NORMAL


def classify_message(
    message: CanonicalMessage,
    rules: PriorityRules | None = None,
) -> CanonicalMessage:
    """Atribui `priority` a partir do texto traduzido (ou original)."""
    priority = classify_text(message.processed_text, rules)
    logger.debug("priority_classified", extra={"priority": str(priority)})
    return message.updated(priority=priority)
