"""Tests for file-only logging setup."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typp.log import LOGGER_NAME, setup_logging


class SetupLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def test_records_go_to_requested_file_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "typp.log"
            logger = setup_logging("INFO", log_file)
            logging.getLogger("typp.runtime.navigator").info("moved cursor")
            logging.getLogger("typp.document").debug("hidden")

            content = log_file.read_text(encoding="utf-8")
            self.assertIn("typp.runtime.navigator - INFO - moved cursor", content)
            self.assertNotIn("hidden", content)
            self.assertFalse(logger.propagate)
            self.assertEqual(len(logger.handlers), 1)

    def test_repeated_setup_replaces_handlers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            setup_logging("DEBUG", Path(tmp) / "a.log")
            logger = setup_logging("DEBUG", Path(tmp) / "b.log")
            self.assertEqual(len(logger.handlers), 1)

    def test_unwritable_log_location_installs_null_handler(self) -> None:
        with mock.patch("typp.log.logging.FileHandler", side_effect=PermissionError(13, "denied")):
            with tempfile.TemporaryDirectory() as tmp:
                logger = setup_logging("WARNING", Path(tmp) / "typp.log")

        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.NullHandler)

    def test_default_path_uses_platform_log_dir(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("typp.log.user_log_dir", return_value=tmp):
                setup_logging("WARNING")
                self.assertTrue((Path(tmp) / "typp.log").exists())


if __name__ == "__main__":
    unittest.main()
