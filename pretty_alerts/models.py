"""
Modelos pydantic do payload de entrada (Grafana/Alertmanager) e da mensagem
de saída (webhook do Discord).

Entrada é tolerante: labels/annotations ausentes viram dicionários vazios e
URLs ausentes viram string vazia, de modo que o transformador nunca precise
tratar None. Saída segue o formato de webhook do Discord com campos opcionais
omitidos quando vazios.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AlertStatus(str, Enum):
    """Estado de um alerta individual."""
    FIRING = "firing"
    RESOLVED = "resolved"


def _string_mapping(value):
    if value is None:
        return {}
    if isinstance(value, dict):
        return {str(k): "" if v is None else str(v) for k, v in value.items()}
    return value


def _blank_to_none(value):
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def _none_to_empty(value):
    return "" if value is None else value


def _to_string(value):
    # Campos informativos: qualquer escalar vira texto em vez de invalidar o lote
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return ""
    return str(value)


def _lenient_int(value, default=None):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _lenient_mapping(value):
    if not isinstance(value, dict):
        return {}
    return _string_mapping(value)


class Alert(BaseModel):
    """Um alerta do Grafana/Alertmanager."""
    model_config = ConfigDict(populate_by_name=True)

    status: AlertStatus = Field(..., description="Estado do alerta")
    labels: Dict[str, str] = Field(default_factory=dict, description="Labels do alerta")
    annotations: Dict[str, str] = Field(default_factory=dict, description="Annotations do alerta")
    generator_url: str = Field(default="", alias="generatorURL", description="Link para a query de origem")
    starts_at: Optional[datetime] = Field(default=None, alias="startsAt")
    ends_at: Optional[datetime] = Field(default=None, alias="endsAt")
    fingerprint: str = Field(default="", description="Fingerprint do alerta")
    silence_url: str = Field(default="", alias="silenceURL")
    dashboard_url: str = Field(default="", alias="dashboardURL")
    panel_url: str = Field(default="", alias="panelURL")
    values: Optional[Any] = Field(default=None, description="Valores numéricos do Grafana")
    value_string: str = Field(default="", alias="valueString")

    @field_validator("labels", "annotations", mode="before")
    @classmethod
    def _coerce_mapping(cls, value):
        return _string_mapping(value)

    @field_validator("generator_url", mode="before")
    @classmethod
    def _coerce_url(cls, value):
        return _none_to_empty(value)

    @field_validator("fingerprint", "silence_url", "dashboard_url", "panel_url", "value_string", mode="before")
    @classmethod
    def _coerce_string(cls, value):
        return _to_string(value)

    @field_validator("starts_at", "ends_at", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value):
        return _blank_to_none(value)

    def label(self, key: str) -> str:
        return self.labels.get(key, "")

    def annotation(self, key: str) -> str:
        return self.annotations.get(key, "")

    @property
    def severity(self) -> str:
        return self.label("severity")

    @property
    def is_firing(self) -> bool:
        return self.status == AlertStatus.FIRING


class AlertBatch(BaseModel):
    """Payload de webhook: um lote de alertas entregue de uma vez."""
    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(default="", description="Estado agregado (informativo)")
    external_url: str = Field(default="", alias="externalURL", description="URL base da UI de monitoramento")
    alerts: List[Alert] = Field(..., description="Alertas, na ordem recebida")
    receiver: str = Field(default="")
    group_key: str = Field(default="", alias="groupKey")
    group_labels: Dict[str, str] = Field(default_factory=dict, alias="groupLabels")
    common_labels: Dict[str, str] = Field(default_factory=dict, alias="commonLabels")
    common_annotations: Dict[str, str] = Field(default_factory=dict, alias="commonAnnotations")
    truncated_alerts: int = Field(default=0, alias="truncatedAlerts")
    org_id: Optional[int] = Field(default=None, alias="orgId")

    @field_validator("external_url", mode="before")
    @classmethod
    def _coerce_url(cls, value):
        return _none_to_empty(value)

    @field_validator("status", "receiver", "group_key", mode="before")
    @classmethod
    def _coerce_string(cls, value):
        return _to_string(value)

    @field_validator("group_labels", "common_labels", "common_annotations", mode="before")
    @classmethod
    def _coerce_mapping(cls, value):
        return _lenient_mapping(value)

    @field_validator("truncated_alerts", mode="before")
    @classmethod
    def _coerce_count(cls, value):
        return _lenient_int(value, 0)

    @field_validator("org_id", mode="before")
    @classmethod
    def _coerce_org_id(cls, value):
        return _lenient_int(value)

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "AlertBatch":
        return cls.model_validate(data)


def _prune(value):
    # Remove listas vazias (omit-if-empty); None já sai via exclude_none
    if isinstance(value, dict):
        return {k: _prune(v) for k, v in value.items() if v != []}
    if isinstance(value, list):
        return [_prune(v) for v in value]
    return value


class _DiscordModel(BaseModel):
    def to_payload(self) -> Dict[str, Any]:
        """Serializa no formato JSON do webhook do Discord, omitindo campos vazios."""
        return _prune(self.model_dump(exclude_none=True))

    @classmethod
    def from_payload(cls, data: Dict[str, Any]):
        return cls.model_validate(data)


class EmbedField(_DiscordModel):
    name: str = ""
    value: str = ""
    inline: bool = False

    @field_validator("name", "value", mode="before")
    @classmethod
    def _coerce_string(cls, value):
        return _none_to_empty(value)


class EmbedFooter(_DiscordModel):
    text: str
    icon_url: Optional[str] = None

    @field_validator("icon_url", mode="before")
    @classmethod
    def _blank(cls, value):
        return _blank_to_none(value)


class Embed(_DiscordModel):
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    color: Optional[int] = None
    fields: List[EmbedField] = Field(default_factory=list)
    footer: Optional[EmbedFooter] = None
    timestamp: Optional[str] = None

    @field_validator("title", "description", "type", "url", "timestamp", mode="before")
    @classmethod
    def _blank(cls, value):
        return _blank_to_none(value)


class DiscordMessage(_DiscordModel):
    """Uma mensagem enviada ao webhook do Discord."""
    content: Optional[str] = None
    username: Optional[str] = None
    embeds: List[Embed] = Field(default_factory=list)

    @field_validator("content", "username", mode="before")
    @classmethod
    def _blank(cls, value):
        return _blank_to_none(value)
