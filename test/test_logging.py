# -*- coding: utf-8 -*-
"""Tests for logging setup and the error hierarchy."""

import logging
import sys
import unittest

import accounts.config as cfg
from accounts.errors import BankingError, InsufficientFunds, InvalidAmount, OverdraftExceeded
from accounts.logging import get_logger, setup_logging


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, root.handlers[:])

    def tearDown(self):
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers[:] = self._saved[1]

    def test_default_level_is_warning(self):
        setup_logging()
        self.assertEqual(logging.getLogger().level, logging.WARNING)
        self.assertEqual(logging.getLogger("accounts").level, logging.WARNING)

    def test_debug_level(self):
        setup_logging(level="debug")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_invalid_level_falls_back_to_warning(self):
        setup_logging(level="LOUD")
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_single_stderr_handler(self):
        logging.getLogger().addHandler(logging.NullHandler())
        setup_logging()
        handlers = logging.getLogger().handlers
        self.assertEqual(len(handlers), 1)
        self.assertIs(handlers[0].stream, sys.stderr)

    def test_configured_format(self):
        setup_logging()
        self.assertEqual(logging.getLogger().handlers[0].formatter._fmt, cfg.LOG_FORMAT)

    def test_custom_format(self):
        setup_logging(fmt="%(levelname)s %(message)s")
        record = logging.LogRecord("accounts", logging.WARNING, __file__, 1, "limit %s", ("exceeded",), None)
        self.assertEqual(logging.getLogger().handlers[0].format(record), "WARNING limit exceeded")

    def test_get_logger(self):
        self.assertEqual(get_logger("accounts.test").name, "accounts.test")


class TestExceptionHierarchy(unittest.TestCase):
    def test_hierarchy(self):
        self.assertTrue(issubclass(BankingError, Exception))
        self.assertTrue(issubclass(InvalidAmount, BankingError))
        self.assertTrue(issubclass(InsufficientFunds, BankingError))
        self.assertTrue(issubclass(OverdraftExceeded, InsufficientFunds))

    def test_message(self):
        self.assertEqual(str(OverdraftExceeded("Exceeds available balance including overdraft.")),
                         "Exceeds available balance including overdraft.")


if __name__ == '__main__':
    unittest.main(verbosity=2)
