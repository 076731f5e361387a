"""Tradutores locais para desenvolvimento e testes (sem IO)."""

from __future__ import annotations

from inbound_triage.utils.errors import TranslationError


class IdentityTranslator:
    """Devolve o texto sem alteração. Provider "identity" em dev."""

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        return text


class StaticTranslator:
    """Tradução por tabela fixa {(origem, alvo, texto): tradução}.

    Texto fora da tabela levanta TranslationError, como um serviço real
    que não consegue traduzir.
    """

    def __init__(self, table: dict[tuple[str, str, str], str] | None = None) -> None:
        self._table = dict(table or {})
        self.calls: list[tuple[str, str, str]] = []

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        key = (source_language, target_language, text)
        self.calls.append(key)
        try:
            return self._table[key]
        except KeyError as exc:
            raise TranslationError(
                f"Sem tradução {source_language}→{target_language} para o texto"
            ) from exc
