# ui/game_loop.py
from __future__ import annotations
import logging
from typing import Callable, Optional

from app.calculation import RoundResult
from app.config import DEFAULT_OPTION_INDEX, MENU_OPTIONS, MENU_PROMPT, GameMode
from app.timer import HighResTimer
from core.keyboard import KeyReader
from services.text_generator import generate
from services.typing_engine import TypingEngine
from ui.display import Display
from ui.menu import Selector
from ui.session_summary import report

log = logging.getLogger(__name__)


class GameLoop:
    def __init__(
        self,
        reader: KeyReader,
        display: Display,
        selector: Optional[Selector] = None,
        text_source: Callable[[int], str] = generate,
        timer_factory: Callable[[], HighResTimer] = HighResTimer,
    ):
        self.reader = reader
        self.display = display
        self.selector = selector or Selector(
            "\n\n" + MENU_PROMPT,
            [mode.label for mode in MENU_OPTIONS],
            default=DEFAULT_OPTION_INDEX,
        )
        self.text_source = text_source
        self.timer_factory = timer_factory

    def run(self):
        """Menu loop. Only ever left through leave_app()."""
        while True:
            choice = self.selector.interact()
            if choice is None:
                log.info("Menu selection cancelled, showing menu again")
                continue

            mode = MENU_OPTIONS[choice]
            log.info("Menu selection: %s", mode.name)
            if mode is GameMode.EXIT:
                self.leave_app()
            self.play_round(mode)

    def play_round(self, mode: GameMode) -> RoundResult:
        target = self.text_source(mode.word_count)
        log.info("Round started: %d words, %d chars", mode.word_count, len(target))
        self.display.show_target(target)
        self.display.show_prompt()

        engine = TypingEngine(target, display=self.display, timer_factory=self.timer_factory)
        result = engine.run(self.reader.events())
        # keys typed after Enter belong to the menu, not to the next round
        self.reader.hand_over()
        if result is None:
            self.leave_app()

        report(self.display, result)
        return result

    def leave_app(self):
        self.display.farewell()
        log.info("Leaving app")
        raise SystemExit(0)

