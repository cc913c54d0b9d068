# services/typing_engine.py
from __future__ import annotations
import logging
from typing import Callable, Iterable, Optional

from app.calculation import RoundResult, score
from app.state import Phase, RoundState
from app.timer import HighResTimer
from core.keyboard import KeyCode, KeyEvent

log = logging.getLogger(__name__)


class TypingEngine:
    """
    Input capture and timing for one round.

    The timer starts on the first character press, not when the prompt is
    shown. Enter before any character is ignored so a round never ends at
    zero elapsed time. Escape cancels the round.
    """

    def __init__(self, target_text: str, display=None, timer_factory: Callable[[], HighResTimer] = HighResTimer):
        self.state = RoundState.fresh(target_text, timer_factory)
        self.display = display

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def typed(self) -> str:
        return self.state.typed_text

    def process_key(self, event: Optional[KeyEvent]) -> Phase:
        st = self.state
        if event is None or st.is_over:
            return st.phase

        if event.code is KeyCode.CHAR:
            if not event.is_press or not event.char:
                return st.phase
            if st.phase is Phase.AWAITING_FIRST_KEY:
                log.debug("Timer started on %r", event.char)
            st.push(event.char)
            if self.display:
                self.display.echo(event.char)

        elif event.code is KeyCode.BACKSPACE:
            if st.pop() and self.display:
                self.display.backspace()

        elif event.code is KeyCode.ENTER:
            if st.phase is Phase.TYPING:
                st.stop()

        elif event.code is KeyCode.ESCAPE:
            st.cancel()

        return st.phase

    def result(self) -> Optional[RoundResult]:
        if self.state.phase is not Phase.FINISHED:
            return None
        return score(self.typed, self.state.target_text, self.state.elapsed)

    def run(self, events: Iterable[Optional[KeyEvent]]) -> Optional[RoundResult]:
        """Consume events until the round finishes (result) or is cancelled (None)."""
        for event in events:
            if self.process_key(event) in (Phase.FINISHED, Phase.CANCELLED):
                break

        if self.state.phase is Phase.CANCELLED:
            log.info("Round cancelled after %d chars", len(self.state.typed))
            return None

        res = self.result()
        if res is not None:
            log.info("Round finished: matched=%s elapsed=%dms", res.matched, res.elapsed_ms)
        return res
