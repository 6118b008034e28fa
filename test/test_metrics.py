#!/usr/bin/env python3
import sys
import os
import unittest
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pretty_alerts.metrics import NullReporter, PrometheusReporter


class TestPrometheusReporter(unittest.TestCase):
    def test_counters(self):
        reporter = PrometheusReporter()
        reporter.record_alert('firing', 'critical')
        reporter.record_alert('firing', 'critical')
        reporter.record_discord_send(True, 0.1)
        reporter.record_discord_send(False, 0.2)
        reporter.record_webhook_request('success')
        reporter.record_http_request('/webhook', 'POST', '200', 0.3)
        reporter.record_alert_processed()

        registry = reporter.registry
        self.assertEqual(registry.get_sample_value('alerts_received_total', {'status': 'firing', 'severity': 'critical'}), 2.0)
        self.assertEqual(registry.get_sample_value('webhook_discord_send_total', {'status': 'success'}), 1.0)
        self.assertEqual(registry.get_sample_value('webhook_discord_send_total', {'status': 'failure'}), 1.0)
        self.assertEqual(registry.get_sample_value('webhook_discord_send_duration_seconds_count'), 2.0)
        self.assertEqual(registry.get_sample_value('webhook_requests_total', {'status': 'success'}), 1.0)
        self.assertEqual(registry.get_sample_value('http_requests_total', {'path': '/webhook', 'method': 'POST', 'status': '200'}), 1.0)
        self.assertEqual(registry.get_sample_value('alerts_processed_total'), 1.0)

    def test_reporters_are_independent(self):
        a = PrometheusReporter()
        b = PrometheusReporter()
        a.record_alert_processed()
        self.assertEqual(a.registry.get_sample_value('alerts_processed_total'), 1.0)
        self.assertEqual(b.registry.get_sample_value('alerts_processed_total'), 0.0)

    def test_render(self):
        reporter = PrometheusReporter()
        reporter.record_alert_processed()
        body, content_type = reporter.render()
        self.assertIn(b'alerts_processed_total 1.0', body)
        self.assertTrue(content_type.startswith('text/plain'))

    def test_null_reporter(self):
        reporter = NullReporter()
        reporter.record_alert('firing', 'none')
        body, _ = reporter.render()
        self.assertEqual(body, b'')


if __name__ == '__main__':
    unittest.main()
