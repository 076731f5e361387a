"""Testes dos tradutores locais (identidade e tabela)."""

from __future__ import annotations

import pytest

from inbound_triage.infra.translation import IdentityTranslator, StaticTranslator
from inbound_triage.utils.errors import TranslationError


class TestLocalTranslators:
    """Tradutores sem IO."""

    @pytest.mark.asyncio
    async def test_identity(self) -> None:
        assert await IdentityTranslator().translate("olá", "pt", "en") == "olá"

    @pytest.mark.asyncio
    async def test_static_records_calls(self) -> None:
        translator = StaticTranslator({("pt", "en", "olá"): "hello"})
        assert await translator.translate("olá", "pt", "en") == "hello"
        assert translator.calls == [("pt", "en", "olá")]

    @pytest.mark.asyncio
    async def test_static_missing_entry(self) -> None:
        translator = StaticTranslator()
        with pytest.raises(TranslationError):
            await translator.translate("olá", "pt", "en")
        assert len(translator.calls) == 1
