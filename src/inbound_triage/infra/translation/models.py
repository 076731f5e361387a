"""Modelos da resposta da Google Cloud Translation API (v2)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GoogleTranslation(BaseModel):
    """Uma tradução retornada pela API."""

    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(alias="translatedText")
    detected_source_language: str | None = Field(default=None, alias="detectedSourceLanguage")


class GoogleTranslationData(BaseModel):
    translations: list[GoogleTranslation] = Field(min_length=1)


class GoogleTranslateResponse(BaseModel):
    """Envelope `{"data": {"translations": [...]}}`."""

    data: GoogleTranslationData

    @property
    def first(self) -> GoogleTranslation:
        return self.data.translations[0]
