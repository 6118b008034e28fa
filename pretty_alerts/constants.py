import os

# Configurações globais de ambiente
DISCORD_WEBHOOK_URL = os.getenv("DISCORD_WEBHOOK_URL")
APP_PORT = int(os.getenv("APP_PORT", os.getenv("PORT", "8888")))
DEBUG_MODE = (
    os.getenv("DEBUG_MODE", "False").lower() == "true"
    or os.getenv("DEBUG", "False").lower() == "true"
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").strip().lower()

# Modo de renderização: 'per_alert' (uma mensagem por alerta) | 'summary' (uma mensagem por lote)
MODE_PER_ALERT = "per_alert"
MODE_SUMMARY = "summary"
ALERT_MESSAGE_MODE = os.getenv("ALERT_MESSAGE_MODE", MODE_PER_ALERT).strip().lower()

# Entrega para o Discord
DISCORD_TIMEOUT_SECONDS = int(os.getenv("DISCORD_TIMEOUT_SECONDS", "10"))
DISCORD_VERIFY_TLS = os.getenv("DISCORD_VERIFY_TLS", "true").lower() == "true"
# Discord responde 204 No Content quando aceita a mensagem
DISCORD_ACCEPTED_STATUS = 204

# Identidade visual das mensagens
DISCORD_USERNAME = os.getenv("DISCORD_USERNAME", "Grafana")
DISCORD_FOOTER_TEXT = os.getenv("DISCORD_FOOTER_TEXT", "Grafana v12.3.2")
DISCORD_FOOTER_ICON_URL = os.getenv("DISCORD_FOOTER_ICON_URL", "https://grafana.com/static/assets/img/fav32.png")
SUMMARY_FOOTER_TEXT = os.getenv("SUMMARY_FOOTER_TEXT", "Grafana Alerts")
EMBED_TYPE = "rich"

# Cores (inteiro RGB)
COLORS = {
    "critical": int(os.getenv("CRITICAL_COLOR", "14037554")),  # vermelho (padrão Grafana)
    "warning": int(os.getenv("WARNING_COLOR", "16776960")),  # amarelo
    "resolved": int(os.getenv("RESOLVED_COLOR", "3066993")),  # verde
}

# Severidades que renderizam como notificação (sem linha de status)
NOTIFICATION_SEVERITIES = {"notification", "info"}

TITLES = {
    "critical": {"emoji": "🔥", "text": "Critical Alert Firing"},
    "warning": {"emoji": "⚠️", "text": "Warning Alert Firing"},
    "resolved": {"emoji": "✅", "text": "Alert Resolved"},
    "notification": {"emoji": "ℹ️", "text": "Notification"},
}

SUMMARY_TITLES = {
    "critical": {"emoji": "🔥", "text": "Critical Alerts Firing"},
    "warning": {"emoji": "⚠️", "text": "Warning Alerts Firing"},
    "resolved": {"emoji": "✅", "text": "Alerts Resolved"},
    "default": {"emoji": "📊", "text": "Alert Status Update"},
}

STATUS_LINES = {
    "firing": {"emoji": "🔴", "label": "Firing"},
    "resolved": {"emoji": "✅", "label": "Resolved"},
}

# Limites de embeds do Discord
MAX_EMBED_FIELDS = 25
MAX_TITLE_LENGTH = 256
MAX_DESCRIPTION_LENGTH = 4096
MAX_FIELD_NAME_LENGTH = 256
MAX_FIELD_VALUE_LENGTH = 1024
MAX_EMBED_TOTAL_LENGTH = 6000  # title + description + fields + footer

# Deep links do Grafana
ALERTING_LIST_PATH = "/alerting/list"
SILENCE_PATH = "/alerting/silence/new?alertmanager=grafana"
