from typing import Iterable, Optional

from .constants import COLORS, NOTIFICATION_SEVERITIES, SUMMARY_TITLES, TITLES
from .models import Alert, AlertStatus


def normalize_severity(severity: Optional[str]) -> str:
    return (severity or "").strip().lower()


def is_notification(severity: Optional[str]) -> bool:
    """Severidades de notificação não exibem linha de status e têm título próprio."""
    return normalize_severity(severity) in NOTIFICATION_SEVERITIES


def is_critical(severity: Optional[str]) -> bool:
    return normalize_severity(severity) == "critical"


def _title(entry) -> str:
    return f"{entry['emoji']} {entry['text']}"


def get_alert_title(alert: Alert) -> str:
    severity = alert.severity
    if is_notification(severity):
        return _title(TITLES["notification"])
    if alert.status == AlertStatus.FIRING:
        if is_critical(severity):
            return _title(TITLES["critical"])
        return _title(TITLES["warning"])
    return _title(TITLES["resolved"])


def get_alert_color(alert: Alert) -> int:
    # Notificação herda a cor do status; só título e linha de status mudam
    if alert.status == AlertStatus.FIRING:
        if is_critical(alert.severity):
            return COLORS["critical"]
        return COLORS["warning"]
    return COLORS["resolved"]


def get_batch_severity(alerts: Iterable[Alert]) -> str:
    """
    Severidade agregada de um lote: 'critical' se qualquer alerta disparando
    for crítico, senão a severidade do primeiro alerta disparando.
    """
    first = ""
    seen_firing = False
    for alert in alerts:
        if alert.status != AlertStatus.FIRING:
            continue
        if is_critical(alert.severity):
            return "critical"
        if not seen_firing:
            first = normalize_severity(alert.severity)
            seen_firing = True
    return first


def get_summary_title(firing_count: int, resolved_count: int, severity: str) -> str:
    if firing_count > 0:
        if is_critical(severity):
            return _title(SUMMARY_TITLES["critical"])
        return _title(SUMMARY_TITLES["warning"])
    if resolved_count > 0:
        return _title(SUMMARY_TITLES["resolved"])
    return _title(SUMMARY_TITLES["default"])


def get_summary_description(firing_count: int, resolved_count: int) -> str:
    parts = []
    if firing_count > 0:
        parts.append(f"{firing_count} alert(s) firing")
    if resolved_count > 0:
        parts.append(f"{resolved_count} alert(s) resolved")
    if not parts:
        return "No alerts"
    return ", ".join(parts)


def get_summary_color(firing_count: int, resolved_count: int, severity: str) -> int:
    if firing_count > 0:
        if is_critical(severity):
            return COLORS["critical"]
        return COLORS["warning"]
    if resolved_count > 0:
        return COLORS["resolved"]
    return COLORS["warning"]
