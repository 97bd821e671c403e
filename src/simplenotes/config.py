# SPDX-License-Identifier: GPL-3.0-or-later
"""Runtime switches read from the environment.

There is no user-facing configuration; these only affect diagnostics.
"""

import logging
import os


def _truthy_env(name, default='0'):
    value = os.getenv(name, default)
    return value not in {'', '0', 'false', 'False'}


def debug_enabled() -> bool:
    return _truthy_env('SIMPLENOTES_DEBUG')


def log_level() -> int:
    return logging.DEBUG if debug_enabled() else logging.INFO
