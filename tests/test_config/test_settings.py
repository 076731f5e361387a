"""Testes para settings de pipeline, tradução e PipelineConfig."""

from __future__ import annotations

from pathlib import Path

import pytest

from inbound_triage.config.settings import (
    PipelineConfig,
    PipelineSettings,
    TranslationSettings,
    get_pipeline_settings,
    get_translation_settings,
)
from inbound_triage.config.settings.pipeline import (
    DEFAULT_MAX_TEXT_LENGTH,
    DEFAULT_SUMMARY_MAX_CHARS,
    DEFAULT_TRUNCATION_MARKER,
)
from inbound_triage.config.settings.translation import GOOGLE_TRANSLATE_BASE_URL
from inbound_triage.domain.message import Priority
from inbound_triage.stages.summary_generator import build_summary
from inbound_triage.utils.errors import PriorityRulesError


class TestPipelineSettings:
    """Testes para PipelineSettings."""

    def test_defaults(self) -> None:
        """Valores padrão documentados."""
        settings = PipelineSettings()
        assert settings.target_language == "en"
        assert settings.max_text_length == DEFAULT_MAX_TEXT_LENGTH == 5000
        assert settings.truncation_marker == DEFAULT_TRUNCATION_MARKER == "... [truncated]"
        assert settings.summary_max_chars == DEFAULT_SUMMARY_MAX_CHARS
        assert settings.validate() == []

    def test_validate_reports_each_invalid_field(self) -> None:
        """validate() lista um erro por campo inválido."""
        settings = PipelineSettings(
            target_language="",
            max_text_length=0,
            truncation_marker="",
            summary_max_chars=-1,
        )
        errors = settings.validate()
        assert len(errors) == 4
        assert any("TARGET_LANGUAGE" in e for e in errors)
        assert any("MAX_TEXT_LENGTH" in e for e in errors)

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Variáveis de ambiente sobrescrevem os padrões."""
        monkeypatch.setenv("TARGET_LANGUAGE", " PT ")
        monkeypatch.setenv("MAX_TEXT_LENGTH", "100")
        monkeypatch.setenv("SUMMARY_MAX_CHARS", "50")
        settings = get_pipeline_settings()
        assert settings.target_language == "pt"
        assert settings.max_text_length == 100
        assert settings.summary_max_chars == 50

    def test_settings_are_cached(self) -> None:
        """get_pipeline_settings devolve a mesma instância."""
        assert get_pipeline_settings() is get_pipeline_settings()


class TestTranslationSettings:
    """Testes para TranslationSettings."""

    def test_google_without_key_is_invalid(self) -> None:
        """Provider google exige chave."""
        errors = TranslationSettings(provider="google", api_key="").validate()
        assert any("GOOGLE_TRANSLATE_API_KEY" in e for e in errors)

    def test_identity_needs_no_key(self) -> None:
        """Provider identity não exige chave."""
        assert TranslationSettings(provider="identity").validate() == []

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Provider, chave e timeout vêm do ambiente."""
        monkeypatch.setenv("TRANSLATION_PROVIDER", "identity")
        monkeypatch.setenv("GOOGLE_TRANSLATE_API_KEY", "k-1")
        monkeypatch.setenv("TRANSLATION_TIMEOUT_SECONDS", "2.5")
        settings = get_translation_settings()
        assert settings.provider == "identity"
        assert settings.api_key == "k-1"
        assert settings.timeout_seconds == 2.5
        assert settings.base_url == GOOGLE_TRANSLATE_BASE_URL


class TestPipelineConfig:
    """Testes para PipelineConfig."""

    def test_defaults_use_packaged_rules(self) -> None:
        """Configuração padrão carrega o YAML empacotado."""
        config = PipelineConfig()
        assert "asap" in config.priority_rules.keywords_for(Priority.URGENT)
        assert "not working" in config.priority_rules.keywords_for(Priority.HIGH)

    @pytest.mark.parametrize(
        "field_name",
        ["max_text_length", "summary_max_chars", "translation_timeout_seconds"],
    )
    def test_rejects_non_positive_values(self, field_name: str) -> None:
        """Limites devem ser positivos."""
        with pytest.raises(ValueError, match=field_name):
            PipelineConfig(**{field_name: 0})

    @pytest.mark.parametrize("max_chars", [1, 3])
    def test_rejects_summary_limit_not_larger_than_ellipsis(self, max_chars: int) -> None:
        """Resumo precisa caber ao menos um caractere além das reticências."""
        with pytest.raises(ValueError, match="summary_max_chars"):
            PipelineConfig(summary_max_chars=max_chars)
        assert PipelineSettings(summary_max_chars=max_chars).validate()

    def test_smallest_summary_limit_is_respected(self) -> None:
        """Com o menor limite aceito, o resumo nunca passa do limite."""
        config = PipelineConfig(summary_max_chars=4)
        summary = build_summary("abcdef ghij", config.summary_max_chars)
        assert len(summary) <= 4

    def test_from_settings(self) -> None:
        """Constrói a partir de settings explícitas."""
        settings = PipelineSettings(target_language="pt", max_text_length=42)
        config = PipelineConfig.from_settings(settings, translation_timeout_seconds=3.0)
        assert config.target_language == "pt"
        assert config.max_text_length == 42
        assert config.translation_timeout_seconds == 3.0

    def test_from_settings_with_custom_rules_path(self, tmp_path: Path) -> None:
        """PRIORITY_RULES_PATH aponta para outro YAML."""
        rules_file = tmp_path / "rules.yaml"
        rules_file.write_text(
            "rules:\n  - tier: urgent\n    keywords: [fire]\n", encoding="utf-8"
        )
        settings = PipelineSettings(priority_rules_path=str(rules_file))
        config = PipelineConfig.from_settings(settings, translation_timeout_seconds=1.0)
        assert config.priority_rules.keywords_for(Priority.URGENT) == ("fire",)
        assert config.priority_rules.keywords_for(Priority.HIGH) == ()

    def test_from_settings_with_missing_rules_file(self, tmp_path: Path) -> None:
        """Arquivo inexistente falha na inicialização."""
        settings = PipelineSettings(priority_rules_path=str(tmp_path / "nope.yaml"))
        with pytest.raises(PriorityRulesError, match="não encontrado"):
            PipelineConfig.from_settings(settings, translation_timeout_seconds=1.0)
