# ui/display.py
from __future__ import annotations
from typing import Optional

from rich.console import Console
from rich.control import Control

from app.config import APP_TITLE, FAREWELL, TYPING_PROMPT


class Display:
    """All game output goes through one rich Console on stdout."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, emoji=False)

    def banner(self):
        self.console.print(APP_TITLE, style="bold cyan", markup=False, soft_wrap=True)

    def show_target(self, text: str):
        self.console.print()
        self.console.print()
        self.console.print(text, style="bold", markup=False, soft_wrap=True)
        self.console.print()
        self.console.print()

    def show_prompt(self):
        self.console.print(TYPING_PROMPT, style="dim", markup=False)
        self.console.print()
        self.console.print()

    def echo(self, ch: str):
        self.console.out(ch, end="", highlight=False)

    def backspace(self):
        # step back, blank the cell, step back again
        self.console.control(Control.move(-1, 0))
        self.console.out(" ", end="", highlight=False)
        self.console.control(Control.move(-1, 0))

    def line(self, text: str = "", style: Optional[str] = None):
        self.console.print(text, style=style, markup=False, soft_wrap=True)

    def farewell(self):
        self.line(FAREWELL)
