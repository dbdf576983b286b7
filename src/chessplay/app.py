"""Application entry point."""

from __future__ import annotations

import os
import sys


def main() -> None:
    """Launch the Chessplay application.

    ``CHESSPLAY_LOG_LEVEL`` (e.g. ``DEBUG``) overrides the default log level.
    """
    from chessplay.ui.bootstrap import run_application
    from chessplay.ui.settings import AppSettings

    settings = AppSettings()
    level = os.environ.get("CHESSPLAY_LOG_LEVEL")
    if level:
        settings.log_level = level

    sys.exit(run_application(settings=settings))


if __name__ == "__main__":
    main()
