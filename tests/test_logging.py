"""Unit tests for inputly.core.logging."""

import logging
import unittest

from inputly.core.logging import build_formatter


class TestFormatter(unittest.TestCase):
    def _record(self, created: float) -> logging.LogRecord:
        record = logging.LogRecord("inputly", logging.INFO, __file__, 1, "hello", None, None)
        record.created = created
        return record

    def test_timestamp_is_utc(self) -> None:
        line = build_formatter().format(self._record(0))
        self.assertTrue(line.startswith("1970-01-01T00:00:00Z "), line)

    def test_line_layout(self) -> None:
        line = build_formatter().format(self._record(86400))
        self.assertEqual(line, "1970-01-02T00:00:00Z INFO inputly hello")


if __name__ == "__main__":
    unittest.main()
