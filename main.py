import logging
import sys

from pretty_alerts.constants import APP_PORT, DEBUG_MODE, DISCORD_WEBHOOK_URL
from pretty_alerts.controller import create_app
from pretty_alerts.metrics import PrometheusReporter
from pretty_alerts.services import DiscordWebhook
from pretty_alerts.utils import configure_logging

configure_logging()
logger = logging.getLogger("pretty_alerts")

if not DISCORD_WEBHOOK_URL:
    logger.error("DISCORD_WEBHOOK_URL environment variable is required")
    sys.exit(1)

app = create_app(webhook=DiscordWebhook(DISCORD_WEBHOOK_URL), reporter=PrometheusReporter())

if __name__ == '__main__':
    logger.info(f"Server starting port={APP_PORT}")
    app.run(host='0.0.0.0', port=APP_PORT, debug=DEBUG_MODE, use_reloader=False)
