"""Helpers compartilhados entre normalizers de canal."""

from __future__ import annotations

from typing import Any


def normalize_sender(value: Any) -> str | None:
    """Converte identificador de remetente em string limpa, ou None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    return cleaned or None


def normalize_language(value: Any) -> str | None:
    """Reduz uma tag de idioma ao subtag primário em minúsculas.

    Exemplos: "pt-BR" → "pt", "EN" → "en", "de, en" → "de".
    """
    if not isinstance(value, str):
        return None
    first = value.split(",")[0].strip()
    primary = first.replace("_", "-").split("-")[0].strip().lower()
    return primary or None
