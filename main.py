# main.py
from __future__ import annotations
import sys
import logging

from rich.console import Console

from app.config import LOG_FILE
from core.terminal import TerminalSession
from ui.display import Display
from ui.game_loop import GameLoop


def setup_logging() -> None:
    # stdout is the game screen, so logs only go to the file
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.FileHandler(LOG_FILE, encoding="utf-8"),
        ],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        Console(stderr=True).print(f"{exctype.__name__}: {value}", style="bold red", markup=False)
        # exit with non-zero so run scripts don't think it succeeded
        sys.exit(1)

    sys.excepthook = excepthook


def main() -> int:
    setup_logging()

    with TerminalSession() as session:
        display = Display()
        display.banner()
        GameLoop(session.reader, display).run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
