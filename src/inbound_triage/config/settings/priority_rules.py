"""Regras de prioridade por palavra-chave (carregadas de YAML).

As regras formam uma lista ordenada de pares (faixa, palavras-chave),
avaliada da maior precedência para a menor. O arquivo padrão fica em
`config/rules/priority_rules.yaml`; PRIORITY_RULES_PATH aponta para outro.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from inbound_triage.domain.message import Priority
from inbound_triage.utils.errors import PriorityRulesError

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = Path(__file__).resolve().parents[1] / "rules" / "priority_rules.yaml"

# Faixas que podem ser atribuídas por palavra-chave, em ordem de severidade
KEYWORD_TIERS: tuple[Priority, ...] = (Priority.URGENT, Priority.HIGH)


def normalize_keyword_text(text: str) -> str:
    """Minúsculas, sem acentos e com espaços colapsados."""
    lowered = (text or "").strip().casefold()
    if not lowered:
        return ""
    no_accents = "".join(
        ch for ch in unicodedata.normalize("NFKD", lowered) if not unicodedata.combining(ch)
    )
    return " ".join(no_accents.split())


@dataclass(frozen=True, slots=True)
class PriorityRule:
    """Uma faixa de prioridade e suas palavras-chave (já normalizadas)."""

    tier: Priority
    keywords: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.tier not in KEYWORD_TIERS:
            raise PriorityRulesError(
                f"Faixa '{self.tier}' não pode ser atribuída por palavra-chave"
            )
        if not self.keywords:
            raise PriorityRulesError(f"Faixa '{self.tier}' sem palavras-chave")
        if any(not k for k in self.keywords):
            raise PriorityRulesError(f"Faixa '{self.tier}' contém palavra-chave vazia")


@dataclass(frozen=True, slots=True)
class PriorityRules:
    """Lista ordenada de regras; a primeira com match define a prioridade."""

    rules: tuple[PriorityRule, ...]

    def __post_init__(self) -> None:
        tiers = [rule.tier for rule in self.rules]
        if len(set(tiers)) != len(tiers):
            raise PriorityRulesError("Faixas de prioridade duplicadas")
        ranks = [KEYWORD_TIERS.index(t) for t in tiers]
        if ranks != sorted(ranks):
            raise PriorityRulesError(
                "Regras devem estar em ordem de precedência (urgent antes de high)"
            )

    @classmethod
    def from_mapping(cls, data: dict[Priority | str, list[str] | tuple[str, ...]]) -> PriorityRules:
        """Constrói regras a partir de {faixa: [palavras]} respeitando a severidade."""
        rules: list[PriorityRule] = []
        try:
            by_tier = {Priority(str(k).lower()): v for k, v in data.items()}
        except ValueError as exc:
            raise PriorityRulesError(f"Faixa desconhecida: {exc}") from exc
        for tier in KEYWORD_TIERS:
            if tier in by_tier:
                rules.append(_build_rule(tier, by_tier.pop(tier)))
        if by_tier:
            raise PriorityRulesError(
                f"Faixa '{next(iter(by_tier))}' não pode ser atribuída por palavra-chave"
            )
        return cls(rules=tuple(rules))

    def keywords_for(self, tier: Priority) -> tuple[str, ...]:
        for rule in self.rules:
            if rule.tier == tier:
                return rule.keywords
        return ()


def _build_rule(tier: Priority, keywords: Any) -> PriorityRule:
    if not isinstance(keywords, (list, tuple)):
        raise PriorityRulesError(f"keywords de '{tier}' deve ser uma lista")
    normalized = tuple(dict.fromkeys(normalize_keyword_text(str(k)) for k in keywords))
    return PriorityRule(tier=tier, keywords=normalized)


def _parse_rules(data: Any, source: str) -> PriorityRules:
    if not isinstance(data, dict) or not isinstance(data.get("rules"), list):
        raise PriorityRulesError(f"{source}: esperado mapeamento com lista 'rules'")

    rules: list[PriorityRule] = []
    for entry in data["rules"]:
        if not isinstance(entry, dict):
            raise PriorityRulesError(f"{source}: cada regra deve ser um mapeamento")
        try:
            tier = Priority(str(entry.get("tier", "")).lower())
        except ValueError as exc:
            raise PriorityRulesError(f"{source}: faixa desconhecida {entry.get('tier')!r}") from exc
        rules.append(_build_rule(tier, entry.get("keywords")))
    return PriorityRules(rules=tuple(rules))


def load_priority_rules(path: Path | str) -> PriorityRules:
    """Carrega regras de um arquivo YAML.

    Raises:
        PriorityRulesError: Se arquivo não existir, YAML inválido ou schema incorreto
    """
    rules_path = Path(path)
    if not rules_path.exists():
        raise PriorityRulesError(f"Arquivo de regras não encontrado: {rules_path}")

    try:
        with rules_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise PriorityRulesError(f"YAML inválido em {rules_path}: {exc}") from exc

    rules = _parse_rules(data, str(rules_path))
    logger.debug(
        "priority_rules_loaded",
        extra={"path": str(rules_path), "tiers": [str(r.tier) for r in rules.rules]},
    )
    return rules


@lru_cache(maxsize=1)
def get_default_priority_rules() -> PriorityRules:
    """Regras do arquivo empacotado (cached)."""
    return load_priority_rules(DEFAULT_RULES_PATH)
