# core/keyboard.py
from __future__ import annotations
import logging
import select
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterator, List, Optional

from prompt_toolkit.input import Input
from prompt_toolkit.input.typeahead import get_typeahead, store_typeahead
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

log = logging.getLogger(__name__)


class KeyCode(Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


class KeyEventKind(Enum):
    PRESS = "press"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    char: str = ""
    kind: KeyEventKind = KeyEventKind.PRESS

    @property
    def is_press(self) -> bool:
        return self.kind is KeyEventKind.PRESS

    @classmethod
    def of(cls, ch: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, ch)


_SPECIAL = {
    Keys.ControlM: KeyCode.ENTER,
    Keys.ControlJ: KeyCode.ENTER,
    Keys.ControlH: KeyCode.BACKSPACE,
    Keys.Escape: KeyCode.ESCAPE,
}


def to_event(press: KeyPress) -> KeyEvent:
    key = press.key
    if isinstance(key, Keys):
        return KeyEvent(_SPECIAL.get(key, KeyCode.OTHER), press.data)
    if len(key) == 1 and key.isprintable():
        return KeyEvent(KeyCode.CHAR, key)
    return KeyEvent(KeyCode.OTHER, press.data)


def strip_alt_prefix(presses: List[KeyPress]) -> List[KeyPress]:
    """Alt+key arrives as ESC then the key in one chunk; keep only the key."""
    out = []
    for i, press in enumerate(presses):
        nxt = presses[i + 1] if i + 1 < len(presses) else None
        if press.key == Keys.Escape and nxt is not None and to_event(nxt).code is KeyCode.CHAR:
            continue
        out.append(press)
    return out


class KeyReader:
    """
    Blocking reader over a prompt_toolkit Input.
    ``read`` waits for the terminal to become readable and returns one event,
    or None when the wait ends without a complete key (timeout, empty read).
    Terminals only report key presses, so every event is a PRESS.

    Keys left over by a prompt_toolkit Application (typeahead) are read first,
    and ``hand_over`` gives unread keys back the same way.
    """

    def __init__(self, inp: Input, timeout: Optional[float] = None):
        self.input = inp
        self.timeout = timeout
        self._pending: Deque[KeyPress] = deque()

    def read(self) -> Optional[KeyEvent]:
        if not self._pending:
            self._pending.extend(strip_alt_prefix(get_typeahead(self.input)))
        if self._pending:
            return to_event(self._pending.popleft())

        try:
            ready, _, _ = select.select([self.input.fileno()], [], [], self.timeout)
        except OSError as e:
            log.debug("select failed: %s", e)
            return None
        if not ready:
            return None

        # A lone ESC stays buffered in the VT100 parser until flushed.
        presses = self.input.read_keys() + self.input.flush_keys()
        self._pending.extend(strip_alt_prefix(presses))
        if not self._pending:
            log.debug("read returned no key")
            return None
        return to_event(self._pending.popleft())

    def hand_over(self):
        if self._pending:
            log.debug("Handing %d unread keys back as typeahead", len(self._pending))
            store_typeahead(self.input, list(self._pending))
            self._pending.clear()

    def events(self) -> Iterator[Optional[KeyEvent]]:
        while True:
            yield self.read()
