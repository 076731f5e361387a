"""Registro canônico que atravessa todos os estágios do pipeline.

Cada estágio recebe um CanonicalMessage e devolve uma nova instância
(atualização funcional via `updated`), nunca mutando estado compartilhado.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import StrEnum
from typing import Any

from inbound_triage.utils.errors import WriteOnceViolationError


class SourceType(StrEnum):
    """Canal de origem da mensagem."""

    WHATSAPP = "whatsapp"
    EMAIL = "email"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class Priority(StrEnum):
    """Faixas de prioridade.

    LOW existe na taxonomia mas nunca é atribuída por palavra-chave;
    fica reservada para override manual a jusante (triagem humana).
    """

    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"

    def __str__(self) -> str:
        return self.value


# Campos definidos uma única vez (pelo SummaryGenerator)
WRITE_ONCE_FIELDS: frozenset[str] = frozenset({"reference_id", "timestamp"})

# Nomes de saída para os sinks (contrato externo em camelCase)
_EXPORT_NAMES: dict[str, str] = {
    "source_type": "sourceType",
    "source_id": "sourceId",
    "message_text": "messageText",
    "subject": "subject",
    "detected_source_language": "detectedSourceLanguage",
    "translated_text": "translatedText",
    "priority": "priority",
    "summary": "summary",
    "word_count": "wordCount",
    "timestamp": "timestamp",
    "reference_id": "referenceId",
    "input_reference": "inputReference",
}


@dataclass(frozen=True, slots=True)
class CanonicalMessage:
    """Mensagem normalizada, independente de canal.

    Attributes:
        source_type: Canal que produziu a mensagem
        source_id: Telefone ou e-mail do remetente (obrigatório após Validator)
        message_text: Corpo da mensagem (<= limite após TextLimiter)
        subject: Assunto do e-mail, quando houver
        detected_source_language: Código de idioma de origem, se derivável
        translated_text: Texto traduzido (apenas após Translator)
        priority: Prioridade atribuída pelo PriorityClassifier
        summary: Resumo extrativo (SummaryGenerator)
        word_count: Contagem de palavras do texto processado
        timestamp: Momento do processamento em ISO-8601 (write-once)
        reference_id: Id de rastreamento da mensagem (write-once)
        input_reference: Referência ao evento bruto (id do canal) para auditoria
    """

    source_type: SourceType = SourceType.UNKNOWN
    source_id: str | None = None
    message_text: Any = None
    subject: str | None = None
    detected_source_language: str | None = None
    translated_text: str | None = None
    priority: Priority | None = None
    summary: str | None = None
    word_count: int | None = None
    timestamp: str | None = None
    reference_id: str | None = None
    input_reference: str | None = None

    @property
    def processed_text(self) -> str:
        """Texto usado pelos estágios finais: tradução quando existir."""
        if self.translated_text is not None:
            return self.translated_text
        return self.message_text if isinstance(self.message_text, str) else ""

    @property
    def is_summarized(self) -> bool:
        return self.reference_id is not None and self.summary is not None

    def updated(self, **changes: Any) -> CanonicalMessage:
        """Retorna cópia com os campos alterados.

        Raises:
            WriteOnceViolationError: Se tentar sobrescrever reference_id ou
                timestamp já definidos.
        """
        for name in WRITE_ONCE_FIELDS & changes.keys():
            current = getattr(self, name)
            if current is not None and changes[name] != current:
                raise WriteOnceViolationError(
                    f"{name} já definido e não pode ser sobrescrito",
                    field=name,
                )
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Serializa para o formato entregue aos sinks de fan-out."""
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, StrEnum):
                value = value.value
            data[_EXPORT_NAMES[f.name]] = value
        return data
