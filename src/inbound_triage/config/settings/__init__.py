"""Agregador de settings do pipeline de triagem."""

from __future__ import annotations

from inbound_triage.config.settings.config import PipelineConfig
from inbound_triage.config.settings.pipeline import (
    DEFAULT_MAX_TEXT_LENGTH,
    DEFAULT_TRUNCATION_MARKER,
    PipelineSettings,
    get_pipeline_settings,
)
from inbound_triage.config.settings.priority_rules import (
    PriorityRule,
    PriorityRules,
    get_default_priority_rules,
    load_priority_rules,
)
from inbound_triage.config.settings.translation import (
    TranslationSettings,
    get_translation_settings,
)

__all__ = [
    "DEFAULT_MAX_TEXT_LENGTH",
    "DEFAULT_TRUNCATION_MARKER",
    "PipelineConfig",
    "PipelineSettings",
    "PriorityRule",
    "PriorityRules",
    "TranslationSettings",
    "get_default_priority_rules",
    "get_pipeline_settings",
    "get_translation_settings",
    "load_priority_rules",
]
