"""Testes para o carregamento e a validação das regras de prioridade."""

from __future__ import annotations

from pathlib import Path

import pytest

from inbound_triage.config.settings.priority_rules import (
    DEFAULT_RULES_PATH,
    PriorityRule,
    PriorityRules,
    get_default_priority_rules,
    load_priority_rules,
    normalize_keyword_text,
)
from inbound_triage.domain.message import Priority
from inbound_triage.utils.errors import PriorityRulesError


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestNormalizeKeywordText:
    """Normalização usada em regras e no texto classificado."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("URGENT", "urgent"),
            ("  Not   Working ", "not working"),
            ("Urgência", "urgencia"),
            ("", ""),
        ],
    )
    def test_normalizes(self, raw: str, expected: str) -> None:
        assert normalize_keyword_text(raw) == expected


class TestPackagedRules:
    """O YAML empacotado define urgent antes de high."""

    def test_default_file_exists_and_loads(self) -> None:
        assert DEFAULT_RULES_PATH.exists()
        rules = get_default_priority_rules()
        assert [r.tier for r in rules.rules] == [Priority.URGENT, Priority.HIGH]
        assert set(rules.keywords_for(Priority.URGENT)) == {
            "urgent", "emergency", "asap", "immediately", "critical"
        }
        assert set(rules.keywords_for(Priority.HIGH)) == {
            "problem", "issue", "error", "broken", "not working", "complaint"
        }


class TestPriorityRulesValidation:
    """Invariantes de PriorityRule e PriorityRules."""

    def test_low_and_normal_cannot_have_keywords(self) -> None:
        with pytest.raises(PriorityRulesError, match="palavra-chave"):
            PriorityRule(tier=Priority.LOW, keywords=("later",))
        with pytest.raises(PriorityRulesError):
            PriorityRule(tier=Priority.NORMAL, keywords=("hello",))

    def test_empty_keywords_rejected(self) -> None:
        with pytest.raises(PriorityRulesError, match="sem palavras-chave"):
            PriorityRule(tier=Priority.HIGH, keywords=())

    def test_rules_must_follow_precedence(self) -> None:
        high = PriorityRule(tier=Priority.HIGH, keywords=("issue",))
        urgent = PriorityRule(tier=Priority.URGENT, keywords=("asap",))
        with pytest.raises(PriorityRulesError, match="ordem de precedência"):
            PriorityRules(rules=(high, urgent))

    def test_duplicate_tiers_rejected(self) -> None:
        rule = PriorityRule(tier=Priority.HIGH, keywords=("issue",))
        with pytest.raises(PriorityRulesError, match="duplicadas"):
            PriorityRules(rules=(rule, rule))

    def test_from_mapping_orders_by_severity_and_normalizes(self) -> None:
        rules = PriorityRules.from_mapping({"high": ["Bug"], "urgent": ["Fire", "fire"]})
        assert [r.tier for r in rules.rules] == [Priority.URGENT, Priority.HIGH]
        assert rules.keywords_for(Priority.URGENT) == ("fire",)
        assert rules.keywords_for(Priority.HIGH) == ("bug",)

    def test_from_mapping_unknown_tier(self) -> None:
        with pytest.raises(PriorityRulesError, match="desconhecida"):
            PriorityRules.from_mapping({"blocker": ["x"]})


class TestLoadPriorityRules:
    """Carregamento de YAML."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(PriorityRulesError, match="não encontrado"):
            load_priority_rules(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "rules: [unclosed\n")
        with pytest.raises(PriorityRulesError, match="YAML inválido"):
            load_priority_rules(path)

    def test_missing_rules_list(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "version: 1\n")
        with pytest.raises(PriorityRulesError, match="lista 'rules'"):
            load_priority_rules(path)

    def test_unknown_tier(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "rules:\n  - tier: blocker\n    keywords: [x]\n")
        with pytest.raises(PriorityRulesError, match="faixa desconhecida"):
            load_priority_rules(path)

    def test_keywords_must_be_list(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "rules:\n  - tier: high\n    keywords: bug\n")
        with pytest.raises(PriorityRulesError, match="deve ser uma lista"):
            load_priority_rules(path)

    def test_loads_custom_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "rules:\n"
            "  - tier: urgent\n    keywords: [Urgente, socorro]\n"
            "  - tier: high\n    keywords: [problema]\n",
        )
        rules = load_priority_rules(path)
        assert rules.keywords_for(Priority.URGENT) == ("urgente", "socorro")
        assert rules.keywords_for(Priority.HIGH) == ("problema",)
