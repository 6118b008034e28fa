import logging
import time

from flask import Flask, Response, g, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest, HTTPException

from .constants import ALERT_MESSAGE_MODE, MODE_PER_ALERT, MODE_SUMMARY
from .formatters import transform
from .metrics import NullReporter
from .models import AlertBatch
from .services import DeliveryError, DiscordWebhook
from .utils import format_timestamp

logger = logging.getLogger(__name__)

WEBHOOK_PATHS = ('/webhook', '/alert')


class HTTPError(Exception):
    """Erro tipado do handler: status HTTP, mensagem pública e causa original."""

    def __init__(self, status: int, message: str, cause: BaseException = None):
        super().__init__(message)
        self.status = status
        self.message = message
        self.cause = cause

    def __str__(self):
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


def create_app(webhook=None, reporter=None, mode=ALERT_MESSAGE_MODE):
    app = Flask(__name__)
    webhook = webhook if webhook is not None else DiscordWebhook()
    reporter = reporter if reporter is not None else NullReporter()

    if mode not in (MODE_PER_ALERT, MODE_SUMMARY):
        logger.warning(f"ALERT_MESSAGE_MODE desconhecido '{mode}', usando '{MODE_PER_ALERT}'")
        mode = MODE_PER_ALERT

    @app.before_request
    def start_timer():
        g.start = time.monotonic()

    def elapsed():
        return time.monotonic() - g.get('start', time.monotonic())

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'pretty-discord-alerts'}, 200

    @app.route('/ready', methods=['GET'])
    def ready():
        return {'status': 'ready'}, 200

    @app.route('/metrics', methods=['GET'])
    def metrics():
        body, content_type = reporter.render()
        return Response(body, status=200, content_type=content_type)

    @app.route('/webhook', methods=['POST'])
    @app.route('/alert', methods=['POST'])
    def alert():
        logger.debug(f"Received webhook request: {request.get_data(as_text=True)}")

        try:
            data = request.get_json(force=True)
        except BadRequest as exc:
            raise HTTPError(400, "Invalid request body", exc) from exc
        if not isinstance(data, dict):
            raise HTTPError(400, "Invalid request body", TypeError("payload must be a JSON object"))

        try:
            batch = AlertBatch.from_payload(data)
        except ValidationError as exc:
            raise HTTPError(400, "Invalid request body", exc) from exc

        for alert_data in batch.alerts:
            reporter.record_alert(alert_data.status.value, alert_data.severity or "none")
            logger.debug(
                f"Alert {alert_data.label('alertname')!r} status={alert_data.status.value} "
                f"severity={alert_data.severity or 'none'} startsAt={format_timestamp(alert_data.starts_at)}"
            )

        # Entrega sequencial: a primeira falha interrompe o restante do lote,
        # mensagens anteriores já entregues permanecem entregues
        messages = transform(batch, mode)
        for index, message in enumerate(messages, start=1):
            send_start = time.monotonic()
            try:
                webhook.send(message)
            except DeliveryError as exc:
                reporter.record_discord_send(False, time.monotonic() - send_start)
                logger.warning(f"Falha ao entregar mensagem {index}/{len(messages)} ao Discord: {exc}")
                raise HTTPError(500, "Failed to forward to Discord", exc) from exc
            reporter.record_discord_send(True, time.monotonic() - send_start)

        reporter.record_alert_processed()
        duration = elapsed()
        logger.info(
            f"Successfully forwarded alerts count={len(batch.alerts)} messages={len(messages)} "
            f"status={batch.status} duration_ms={int(duration * 1000)}"
        )
        reporter.record_http_request(request.path, request.method, "200", duration)
        reporter.record_webhook_request("success")
        return 'OK', 200

    @app.errorhandler(Exception)
    def handle_error(exc):
        # 404/405 e afins do werkzeug seguem o fluxo normal do Flask
        if isinstance(exc, HTTPException):
            return exc

        if isinstance(exc, HTTPError):
            status = exc.status
            message = exc.message
            metric_label = "discord_error" if status >= 500 else "decode_error"
            logger.error(f"HTTP {status} on {request.path}: {exc}")
        else:
            status = 500
            message = "Internal server error"
            metric_label = "panic"
            logger.exception(f"Erro inesperado em {request.path}: {exc}")

        if request.path in WEBHOOK_PATHS:
            reporter.record_http_request(request.path, request.method, str(status), elapsed())
            reporter.record_webhook_request(metric_label)
        return message, status

    return app
