"""Cliente Google Cloud Translation (REST v2) via httpx.

Implementa TranslationServiceProtocol. Toda falha (HTTP, timeout, resposta
fora do contrato) vira TranslationError; não há fallback.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError as PydanticValidationError

from inbound_triage.config.settings.translation import get_translation_settings
from inbound_triage.infra.translation.models import GoogleTranslateResponse
from inbound_triage.utils.errors import TranslationError

if TYPE_CHECKING:
    from inbound_triage.config.settings.translation import TranslationSettings

logger = logging.getLogger(__name__)


class GoogleTranslateClient:
    """Tradução via Google Cloud Translation API.

    O httpx.AsyncClient é criado sob demanda e pode ser injetado em testes.
    """

    __slots__ = ("_api_key", "_http_client", "_settings")

    def __init__(
        self,
        settings: TranslationSettings | None = None,
        api_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_translation_settings()
        self._api_key = api_key or self._settings.api_key or os.environ.get(
            "GOOGLE_TRANSLATE_API_KEY", ""
        )
        self._http_client = http_client

    async def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._settings.timeout_seconds)
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Traduz `text` de `source_language` para `target_language`.

        Raises:
            TranslationError: Chave ausente, erro HTTP, timeout ou resposta inválida.
        """
        if not self._api_key:
            logger.error("google_translate_api_key_missing")
            raise TranslationError("GOOGLE_TRANSLATE_API_KEY não configurado")

        payload = {
            "q": text,
            "source": source_language,
            "target": target_language,
            "format": "text",
        }
        client = await self._get_http_client()

        try:
            response = await client.post(
                self._settings.base_url,
                params={"key": self._api_key},
                json=payload,
            )
            response.raise_for_status()
            parsed = GoogleTranslateResponse.model_validate(response.json())
        except httpx.TimeoutException as exc:
            logger.warning(
                "google_translate_timeout",
                extra={"timeout": self._settings.timeout_seconds},
            )
            raise TranslationError("Timeout na API de tradução") from exc
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "google_translate_http_error",
                extra={"status_code": exc.response.status_code},
            )
            raise TranslationError(
                f"API de tradução retornou HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("google_translate_transport_error", extra={"error_type": type(exc).__name__})
            raise TranslationError("Falha de transporte na API de tradução") from exc
        except (ValueError, PydanticValidationError) as exc:
            logger.warning("google_translate_invalid_response")
            raise TranslationError("Resposta inválida da API de tradução") from exc

        logger.debug(
            "google_translate_success",
            extra={
                "source_language": source_language,
                "target_language": target_language,
                "detected": parsed.first.detected_source_language,
            },
        )
        return parsed.first.translated_text
