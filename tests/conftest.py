"""Configuração do pytest para o projeto inbound_triage."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from inbound_triage.config.settings import (  # noqa: E402
    PipelineConfig,
    get_pipeline_settings,
    get_translation_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Any:
    """Settings são cacheadas; cada teste enxerga o próprio ambiente."""
    get_pipeline_settings.cache_clear()
    get_translation_settings.cache_clear()
    yield
    get_pipeline_settings.cache_clear()
    get_translation_settings.cache_clear()


@pytest.fixture
def pipeline_config() -> PipelineConfig:
    """Configuração padrão: alvo "en", limite 5000, regras empacotadas."""
    return PipelineConfig()


@pytest.fixture
def whatsapp_payload() -> dict[str, Any]:
    """Payload WhatsApp plano com uma mensagem de texto."""
    return {
        "from": "+123",
        "messages": [
            {
                "id": "wamid.HBgM001",
                "type": "text",
                "text": {"body": "urgent asap help"},
            }
        ],
    }


@pytest.fixture
def whatsapp_envelope() -> dict[str, Any]:
    """Envelope completo da Meta Cloud API."""
    return {
        "object": "whatsapp_business_account",
        "entry": [
            {
                "id": "1029384756",
                "changes": [
                    {
                        "field": "messages",
                        "value": {
                            "messaging_product": "whatsapp",
                            "contacts": [{"wa_id": "5511987654321", "profile": {"name": "Ana"}}],
                            "messages": [
                                {
                                    "from": "5511987654321",
                                    "id": "wamid.HBgM002",
                                    "timestamp": "1760000000",
                                    "type": "text",
                                    "text": {"body": "Olá, tenho um problema"},
                                }
                            ],
                        },
                    }
                ],
            }
        ],
    }


@pytest.fixture
def email_payload() -> dict[str, Any]:
    """Email no formato de polling IMAP."""
    return {
        "messageId": "<abc123@mail.example.com>",
        "from": "Maria Silva <Maria@Example.com>",
        "subject": "Order 4411",
        "textPlain": "The package arrived broken.",
    }
