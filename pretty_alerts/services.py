import logging
from typing import Optional

import requests
import urllib3

from .constants import DISCORD_ACCEPTED_STATUS, DISCORD_TIMEOUT_SECONDS, DISCORD_VERIFY_TLS, DISCORD_WEBHOOK_URL
from .models import DiscordMessage

logger = logging.getLogger(__name__)


class DeliveryError(Exception):
    """Falha ao entregar uma mensagem ao webhook: status inesperado ou erro de transporte."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.cause = cause


class DiscordWebhook:
    """
    Cliente do webhook do Discord.

    Cada chamada a send() faz exatamente um POST; não há retry. O Discord
    responde 204 quando aceita a mensagem, qualquer outro código é falha.
    """

    def __init__(self, url: Optional[str] = DISCORD_WEBHOOK_URL, timeout: int = DISCORD_TIMEOUT_SECONDS,
                 verify_tls: bool = DISCORD_VERIFY_TLS, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.session = session or requests.Session()
        if not self.verify_tls:
            # Webhooks compatíveis auto-hospedados às vezes usam certificado próprio
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            logger.debug("Avisos de InsecureRequestWarning desabilitados (DISCORD_VERIFY_TLS=false)")

    def send(self, message: DiscordMessage) -> None:
        payload = message.to_payload()
        try:
            resp = self.session.post(self.url, json=payload, timeout=self.timeout, verify=self.verify_tls)
        except requests.RequestException as exc:
            raise DeliveryError(f"failed to send webhook: {exc}", cause=exc) from exc

        logger.debug(f"Discord response: {resp.status_code}")
        if resp.status_code != DISCORD_ACCEPTED_STATUS:
            body = resp.text
            logger.debug(f"Response content: {body}")
            raise DeliveryError(f"unexpected status code: {resp.status_code}", status_code=resp.status_code, body=body)
