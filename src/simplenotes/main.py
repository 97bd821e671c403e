# SPDX-License-Identifier: GPL-3.0-or-later

import sys

from simplenotes.constants import APP_VERSION


def main(version=APP_VERSION):
    """Launch the application; returns the process exit status."""
    from simplenotes.application import SimpleNotesApp

    app = SimpleNotesApp(version=version)
    return app.run(sys.argv)


if __name__ == '__main__':
    sys.exit(main())
