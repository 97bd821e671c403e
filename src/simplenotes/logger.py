# SPDX-License-Identifier: GPL-3.0-or-later
"""Application logging setup."""

import logging

from simplenotes.config import log_level

LOGGER_NAME = 'simplenotes'


def configure_logging() -> logging.Logger:
    """Attach a stream handler to the application logger once."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(log_level())
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    ))
    logger.addHandler(handler)
    return logger
