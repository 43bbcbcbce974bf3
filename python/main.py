#!/usr/bin/env python3
"""15 Puzzle.

Usage::

    python main.py                # PyQt GUI
    python main.py -f pygame      # Pygame GUI
    python main.py -f rich        # Rich terminal
    python main.py --log-level DEBUG
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    pyqt = "pyqt"
    pygame = "pygame"
    rich = "rich"


_RUNNERS = {
    Frontend.pyqt: "frontend.gui.pyqt.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.rich: "frontend.cli.rich.app",
}


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.pyqt, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        help="Logging verbosity (written to stderr).",
    ),
) -> None:
    """15 Puzzle."""
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run()


if __name__ == "__main__":
    app()
