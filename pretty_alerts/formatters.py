from datetime import datetime
from typing import List, Optional

from .constants import (
    ALERT_MESSAGE_MODE,
    DISCORD_FOOTER_ICON_URL,
    DISCORD_FOOTER_TEXT,
    DISCORD_USERNAME,
    EMBED_TYPE,
    MAX_DESCRIPTION_LENGTH,
    MAX_EMBED_FIELDS,
    MAX_EMBED_TOTAL_LENGTH,
    MAX_FIELD_NAME_LENGTH,
    MAX_FIELD_VALUE_LENGTH,
    MAX_TITLE_LENGTH,
    MODE_SUMMARY,
    STATUS_LINES,
    SUMMARY_FOOTER_TEXT,
)
from .detection import (
    get_alert_color,
    get_alert_title,
    get_batch_severity,
    get_summary_color,
    get_summary_description,
    get_summary_title,
    is_notification,
)
from .links import build_alerting_url, build_silence_url
from .models import Alert, AlertBatch, DiscordMessage, Embed, EmbedField, EmbedFooter
from .utils import _is_meaningful, truncate, utc_timestamp


def build_field_value(alert: Alert, external_url: str = "") -> str:
    """
    Texto do campo do embed para um alerta.

    Só entram as partes não vazias, nesta ordem: summary, description,
    valores da query, namespace, linha de status (omitida para severidades de
    notificação) e, por último, os links de ação separados por " • ".
    """
    parts = []

    summary = alert.annotation("summary")
    if summary:
        parts.append(f"**Summary:** {summary}\n")
    description = alert.annotation("description")
    if description:
        parts.append(f"**Description:** {description}\n")
    values = alert.annotation("values")
    if values:
        parts.append(f"**Query Results:** {values}\n")
    namespace = alert.label("namespace")
    if namespace:
        parts.append(f"**Namespace:** {namespace}\n")

    if not is_notification(alert.severity):
        status = STATUS_LINES[alert.status.value]
        parts.append(f"**Status:** {status['emoji']} {status['label']}\n")

    links = []
    if _is_meaningful(alert.generator_url):
        links.append(f"[View Source]({alert.generator_url})")
    if _is_meaningful(external_url):
        links.append(f"[Silence]({build_silence_url(external_url, alert.labels)})")
    if links:
        parts.append("\n" + " • ".join(links))

    return truncate("".join(parts), MAX_FIELD_VALUE_LENGTH)


def build_alert_field(alert: Alert, external_url: str = "") -> EmbedField:
    return EmbedField(
        name=truncate(alert.label("alertname"), MAX_FIELD_NAME_LENGTH),
        value=build_field_value(alert, external_url),
        inline=False,
    )


def build_footer(text: str = DISCORD_FOOTER_TEXT) -> EmbedFooter:
    return EmbedFooter(text=text, icon_url=DISCORD_FOOTER_ICON_URL)


def grafana_to_discord(batch: AlertBatch) -> List[DiscordMessage]:
    """Uma mensagem por alerta, na ordem do lote. Lote vazio gera lista vazia."""
    alerting_url = build_alerting_url(batch.external_url)
    messages = []

    for alert in batch.alerts:
        embed = Embed(
            title=truncate(get_alert_title(alert), MAX_TITLE_LENGTH),
            type=EMBED_TYPE,
            url=alerting_url,
            color=get_alert_color(alert),
            fields=[build_alert_field(alert, batch.external_url)],
            footer=build_footer(),
        )
        messages.append(DiscordMessage(username=DISCORD_USERNAME, embeds=[embed]))

    return messages


def _overflow_field(alerts: List[Alert]) -> EmbedField:
    names = []
    for alert in alerts:
        status = STATUS_LINES[alert.status.value]
        names.append(f"{status['emoji']} {alert.label('alertname') or '(unnamed)'}")
    return EmbedField(
        name=f"… and {len(alerts)} more",
        value=truncate("\n".join(names), MAX_FIELD_VALUE_LENGTH),
        inline=False,
    )


def _field_length(field: EmbedField) -> int:
    return len(field.name) + len(field.value)


def embed_length(embed: Embed) -> int:
    """Total de caracteres que o Discord soma para o limite de 6000 do embed."""
    total = len(embed.title or "") + len(embed.description or "")
    total += sum(_field_length(f) for f in embed.fields)
    if embed.footer is not None:
        total += len(embed.footer.text)
    return total


def _summary_fields(alerts: List[Alert], external_url: str, budget: int) -> List[EmbedField]:
    """
    Um campo por alerta enquanto couber no número máximo de campos e no
    orçamento de caracteres. O que sobrar vira o campo "… and N more".

    Ao aceitar um campo, reserva espaço para o overflow dos alertas seguintes;
    o overflow de qualquer sufixo menor nunca é maior que esse.
    """
    fields: List[EmbedField] = []
    used = 0
    for index, alert in enumerate(alerts):
        remaining = alerts[index + 1:]
        max_fields = MAX_EMBED_FIELDS - 1 if remaining else MAX_EMBED_FIELDS
        field = build_alert_field(alert, external_url)
        reserve = _field_length(_overflow_field(remaining)) if remaining else 0
        if len(fields) >= max_fields or used + _field_length(field) + reserve > budget:
            break
        fields.append(field)
        used += _field_length(field)

    if len(fields) < len(alerts):
        fields.append(_overflow_field(alerts[len(fields):]))
    return fields


def grafana_to_discord_summary(batch: AlertBatch, now: Optional[datetime] = None) -> List[DiscordMessage]:
    """
    Uma única mensagem para o lote inteiro, com um campo por alerta.

    Acima de MAX_EMBED_FIELDS alertas, ou quando o embed passaria de
    MAX_EMBED_TOTAL_LENGTH caracteres, os excedentes viram um único campo
    "… and N more". Título, cor e descrição vêm da contagem de alertas
    disparando/resolvidos.
    """
    if not batch.alerts:
        return []

    firing_count = sum(1 for a in batch.alerts if a.is_firing)
    resolved_count = len(batch.alerts) - firing_count
    severity = get_batch_severity(batch.alerts)

    title = truncate(get_summary_title(firing_count, resolved_count, severity), MAX_TITLE_LENGTH)
    description = truncate(get_summary_description(firing_count, resolved_count), MAX_DESCRIPTION_LENGTH)
    footer = build_footer(SUMMARY_FOOTER_TEXT)
    budget = MAX_EMBED_TOTAL_LENGTH - len(title) - len(description) - len(footer.text)

    embed = Embed(
        title=title,
        description=description,
        type=EMBED_TYPE,
        url=build_alerting_url(batch.external_url),
        color=get_summary_color(firing_count, resolved_count, severity),
        fields=_summary_fields(batch.alerts, batch.external_url, budget),
        footer=footer,
        timestamp=utc_timestamp(now),
    )
    return [DiscordMessage(username=DISCORD_USERNAME, embeds=[embed])]


def transform(batch: AlertBatch, mode: str = ALERT_MESSAGE_MODE) -> List[DiscordMessage]:
    if mode == MODE_SUMMARY:
        return grafana_to_discord_summary(batch)
    return grafana_to_discord(batch)
