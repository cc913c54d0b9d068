import io
import os
import sys
from datetime import timedelta

import pytest
from rich.console import Console

# Ensure the repo root (containing the `app`, `core`, `services`, `ui` packages) is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from core.keyboard import KeyCode, KeyEvent, KeyEventKind
from ui.display import Display


class FakeClock:
    def __init__(self):
        self.now = timedelta(0)

    def advance(self, ms: float):
        self.now += timedelta(milliseconds=ms)


class FakeTimer:
    """Same surface as HighResTimer, driven by a FakeClock."""

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.started_at = None
        self.start_calls = 0

    @property
    def is_started(self) -> bool:
        return self.started_at is not None

    def start(self):
        self.start_calls += 1
        if self.started_at is None:
            self.started_at = self.clock.now

    def elapsed(self) -> timedelta:
        if self.started_at is None:
            return timedelta(0)
        return self.clock.now - self.started_at


class RecordingDisplay:
    def __init__(self):
        self.screen = []
        self.lines = []

    def echo(self, ch):
        self.screen.append(ch)

    def backspace(self):
        self.screen.pop()

    def show_target(self, text):
        self.lines.append(("target", text))

    def show_prompt(self):
        self.lines.append(("prompt", None))

    def line(self, text="", style=None):
        self.lines.append(("line", text))

    def farewell(self):
        self.lines.append(("line", "Bye!"))

    @property
    def text(self) -> str:
        return "".join(self.screen)


class ScriptedReader:
    """Stands in for KeyReader: one shared event stream across rounds."""

    def __init__(self, events):
        self._events = iter(events)
        self.hand_overs = 0

    def events(self):
        return self._events

    def hand_over(self):
        self.hand_overs += 1


class ScriptedSelector:
    def __init__(self, choices):
        self.choices = list(choices)
        self.calls = 0

    def interact(self):
        self.calls += 1
        return self.choices.pop(0)


def keys(text):
    return [KeyEvent.of(ch) for ch in text]


ENTER = KeyEvent(KeyCode.ENTER, "\r")
ESC = KeyEvent(KeyCode.ESCAPE, "\x1b")
BACKSPACE = KeyEvent(KeyCode.BACKSPACE, "\x7f")
TAB = KeyEvent(KeyCode.OTHER, "\t")


def release(ch):
    return KeyEvent(KeyCode.CHAR, ch, KeyEventKind.RELEASE)


def timed(clock, steps):
    """Yield events lazily, moving the clock forward by ``ms`` just before each one."""
    for ms, event in steps:
        clock.advance(ms)
        yield event


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def timer_factory(clock):
    made = []

    def factory():
        t = FakeTimer(clock)
        made.append(t)
        return t

    factory.made = made
    return factory


@pytest.fixture()
def display():
    return RecordingDisplay()


@pytest.fixture()
def console_display(monkeypatch):
    # rich only writes cursor controls to something it treats as a real terminal
    monkeypatch.setenv("TERM", "xterm")
    console = Console(file=io.StringIO(), width=200, force_terminal=True, color_system=None, highlight=False)
    return Display(console)
