# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import os
import unittest
from unittest.mock import patch

from simplenotes import config
from simplenotes.logger import LOGGER_NAME, configure_logging


class ConfigTest(unittest.TestCase):
    def test_debug_flag_values(self) -> None:
        for value, expected in [('1', True), ('yes', True), ('0', False),
                                ('false', False), ('', False)]:
            with patch.dict(os.environ, {'SIMPLENOTES_DEBUG': value}):
                self.assertEqual(config.debug_enabled(), expected, value)

    def test_log_level_defaults_to_info(self) -> None:
        with patch.dict(os.environ, clear=True):
            self.assertEqual(config.log_level(), logging.INFO)
        with patch.dict(os.environ, {'SIMPLENOTES_DEBUG': '1'}):
            self.assertEqual(config.log_level(), logging.DEBUG)

    def test_configure_logging_is_idempotent(self) -> None:
        logger = configure_logging()
        handlers = list(logger.handlers)
        self.assertIs(configure_logging(), logger)
        self.assertEqual(logger.name, LOGGER_NAME)
        self.assertEqual(logger.handlers, handlers)
        self.assertEqual(len(handlers), 1)


if __name__ == '__main__':
    unittest.main()
