#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import sys

import click

from services.timer_service import TimerService
from ui.main_window import MainWindow

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(level: str = "WARNING") -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="MOVEMENT_TIMER_LOG_LEVEL",
    help="Logging verbosity on stderr.",
)
@click.option(
    "--topmost/--no-topmost",
    default=True,
    show_default=True,
    envvar="MOVEMENT_TIMER_TOPMOST",
    help="Keep the window above other windows.",
)
def main(log_level: str, topmost: bool) -> None:
    """Alternate 30 minutes of work with 5 minute movement breaks."""
    setup_logging(log_level)

    timer_service = TimerService()

    app = MainWindow(timer_service, topmost=topmost)
    app.run()


if __name__ == "__main__":
    main()
