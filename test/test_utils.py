#!/usr/bin/env python3
import logging
import sys
import os
import unittest
from datetime import datetime, timezone
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pretty_alerts.utils import configure_logging, format_timestamp, strip_trailing_slash, truncate, utc_timestamp


class TestUtils(unittest.TestCase):
    def test_truncate(self):
        self.assertEqual(truncate('abc', 5), 'abc')
        self.assertEqual(truncate('abcdef', 5), 'abcd…')
        self.assertEqual(truncate(None, 5), '')

    def test_strip_trailing_slash(self):
        self.assertEqual(strip_trailing_slash('https://g/'), 'https://g')
        self.assertEqual(strip_trailing_slash('https://g'), 'https://g')
        self.assertEqual(strip_trailing_slash(''), '')

    def test_timestamps(self):
        now = datetime(2026, 2, 2, 12, 0, 0, tzinfo=timezone.utc)
        self.assertEqual(utc_timestamp(now), '2026-02-02T12:00:00Z')
        self.assertEqual(format_timestamp(now), '2026-02-02 12:00:00')
        self.assertEqual(format_timestamp('2026-02-02T12:00:00Z'), '2026-02-02 12:00:00')
        self.assertEqual(format_timestamp(None), 'N/A')

    def test_configure_logging_levels(self):
        root = logging.getLogger()
        previous = root.level
        try:
            self.assertEqual(configure_logging(debug=True, level_name='error'), logging.DEBUG)
            self.assertEqual(configure_logging(debug=False, level_name='warn'), logging.WARNING)
            self.assertEqual(configure_logging(debug=False, level_name='bogus'), logging.INFO)
            self.assertEqual(root.level, logging.INFO)
        finally:
            root.setLevel(previous)


if __name__ == '__main__':
    unittest.main()
