"""
Métricas do proxy.

O handler recebe um reporter injetado em vez de mexer em contadores globais:
NullReporter não faz nada (útil em testes), PrometheusReporter registra em um
CollectorRegistry próprio e expõe o texto para o endpoint /metrics.
"""

from typing import Optional, Tuple

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, generate_latest


class NullReporter:
    def record_http_request(self, path: str, method: str, status: str, duration: float) -> None:
        pass

    def record_webhook_request(self, status: str) -> None:
        pass

    def record_discord_send(self, success: bool, duration: float) -> None:
        pass

    def record_alert(self, alert_status: str, severity: str) -> None:
        pass

    def record_alert_processed(self) -> None:
        pass

    def render(self) -> Tuple[bytes, str]:
        return b"", CONTENT_TYPE_LATEST


class PrometheusReporter(NullReporter):
    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        # HTTP
        self.http_requests_total = Counter(
            'http_requests_total',
            'Total number of HTTP requests',
            ['path', 'method', 'status'],
            registry=self.registry,
        )
        self.http_request_duration = Histogram(
            'http_request_duration_seconds',
            'HTTP request latencies in seconds',
            ['path', 'method'],
            registry=self.registry,
        )

        # Webhook
        self.webhook_requests_total = Counter(
            'webhook_requests_total',
            'Total number of webhook requests received',
            ['status'],
            registry=self.registry,
        )
        self.discord_send_total = Counter(
            'webhook_discord_send_total',
            'Total number of Discord webhook sends',
            ['status'],
            registry=self.registry,
        )
        self.discord_send_duration = Histogram(
            'webhook_discord_send_duration_seconds',
            'Duration of Discord webhook sends in seconds',
            registry=self.registry,
        )

        # Alertas
        self.alerts_received_total = Counter(
            'alerts_received_total',
            'Total number of alerts received from Grafana',
            ['status', 'severity'],
            registry=self.registry,
        )
        self.alerts_processed_total = Counter(
            'alerts_processed_total',
            'Total number of alerts successfully processed',
            registry=self.registry,
        )

    def record_http_request(self, path: str, method: str, status: str, duration: float) -> None:
        self.http_requests_total.labels(path, method, status).inc()
        self.http_request_duration.labels(path, method).observe(duration)

    def record_webhook_request(self, status: str) -> None:
        self.webhook_requests_total.labels(status).inc()

    def record_discord_send(self, success: bool, duration: float) -> None:
        self.discord_send_total.labels("success" if success else "failure").inc()
        self.discord_send_duration.observe(duration)

    def record_alert(self, alert_status: str, severity: str) -> None:
        self.alerts_received_total.labels(alert_status, severity).inc()

    def record_alert_processed(self) -> None:
        self.alerts_processed_total.inc()

    def render(self) -> Tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
