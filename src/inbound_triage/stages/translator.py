"""Translator — tradução do corpo para o idioma alvo.

Origem igual ao alvo: translatedText recebe messageText sem chamada externa.
Caso contrário, o serviço de tradução é chamado com timeout; qualquer falha
vira TranslationError. Não há fallback silencioso para o texto original.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from inbound_triage.config.settings.pipeline import DEFAULT_LANGUAGE
from inbound_triage.normalizers._common import normalize_language
from inbound_triage.observability import record_latency, record_translation
from inbound_triage.utils.errors import TranslationError, ValidationError

if TYPE_CHECKING:
    from inbound_triage.domain.message import CanonicalMessage
    from inbound_triage.protocols import TranslationServiceProtocol

logger = logging.getLogger(__name__)


def resolve_source_language(
    message: CanonicalMessage,
    default_source_language: str = DEFAULT_LANGUAGE,
) -> str:
    """Idioma de origem detectado ou o padrão quando ausente."""
    return normalize_language(message.detected_source_language) or default_source_language


async def translate_message(
    message: CanonicalMessage,
    translator: TranslationServiceProtocol,
    *,
    target_language: str = DEFAULT_LANGUAGE,
    default_source_language: str = DEFAULT_LANGUAGE,
    timeout_seconds: float = 10.0,
) -> CanonicalMessage:
    """Preenche translatedText (e fixa detectedSourceLanguage).

    Raises:
        ValidationError: Se messageText não for string não-vazia.
        TranslationError: Falha, timeout ou resposta inválida do serviço.
    """
    text = message.message_text
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(
            "messageText deve ser string não-vazia antes da tradução",
            stage="translator",
            field="messageText",
        )

    source = resolve_source_language(message, default_source_language)
    target = normalize_language(target_language) or DEFAULT_LANGUAGE

    if source == target:
        record_translation(source, target, translated=False)
        return message.updated(detected_source_language=source, translated_text=text)

    start = time.perf_counter()
    try:
        async with asyncio.timeout(timeout_seconds):
            translated = await translator.translate(text, source, target)
    except TimeoutError as exc:
        logger.warning(
            "translation_timeout",
            extra={"source_language": source, "target_language": target, "timeout": timeout_seconds},
        )
        raise TranslationError(
            f"Tradução excedeu {timeout_seconds}s", field="translatedText"
        ) from exc
    except TranslationError:
        raise
    except Exception as exc:
        logger.warning(
            "translation_failed",
            extra={"source_language": source, "target_language": target, "error_type": type(exc).__name__},
        )
        raise TranslationError(
            f"Serviço de tradução falhou: {type(exc).__name__}", field="translatedText"
        ) from exc

    if not isinstance(translated, str) or not translated.strip():
        raise TranslationError("Serviço de tradução retornou texto vazio", field="translatedText")

    record_latency("translator", "translate", (time.perf_counter() - start) * 1000)
    record_translation(source, target, translated=True)
    return message.updated(detected_source_language=source, translated_text=translated)
